class ChainError(Exception):
    """Raised when talking to the storage network fails."""


class ChainConnectionError(ChainError):
    """Raised when the connection or the current height cannot be obtained."""


class ChainQueryError(ChainError):
    """Raised when a single storage query fails (transport, RPC or decoding)."""
