"""In-memory chain client.

Serves fixed records without any network access. Used for dry runs of the CLI
(`CHAIN_PROVIDER=example`) and in tests.
"""

from status_checker.chain.client_base import BaseChainClient
from status_checker.chain.models import NOT_FOUND, OnchainRecord


class ExampleClientAdapter(BaseChainClient):
    """Returns records from a dict; unknown cids are reported as not found."""

    DEFAULT_HEIGHT = 1

    def __init__(
        self,
        records: dict[str, OnchainRecord] | None = None,
        current_height: int = DEFAULT_HEIGHT,
    ) -> None:
        self._records = dict(records or {})
        self._current_height = current_height
        self.connected = False
        self.queried: list[str] = []

    async def connect(self) -> None:
        self.connected = True

    async def get_current_height(self) -> int:
        return self._current_height

    async def query_file(self, cid: str) -> OnchainRecord:
        self.queried.append(cid)
        return self._records.get(cid, NOT_FOUND)

    async def close(self) -> None:
        self.connected = False
