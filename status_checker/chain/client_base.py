from abc import ABC, abstractmethod

from status_checker.chain.models import OnchainRecord


class BaseChainClient(ABC):
    """Contract for storage network clients.

    One client is connected per run, used read-only, and closed at the end.
    """

    @abstractmethod
    async def connect(self) -> None:
        """Open the connection.

        Raises:
            ChainConnectionError: if the network cannot be reached.
        """

    @abstractmethod
    async def get_current_height(self) -> int:
        """Return the latest block number.

        Raises:
            ChainConnectionError: if the height cannot be fetched.
        """

    @abstractmethod
    async def query_file(self, cid: str) -> OnchainRecord:
        """Return the storage order for `cid`, or a record with no size if absent.

        Raises:
            ChainQueryError: on transport, RPC or decoding failure.
        """

    @abstractmethod
    async def close(self) -> None:
        """Release the connection."""
