"""Exceptions raised by the DEX core."""


class DexError(Exception):
    """Base exception for DEX operations."""
    pass


class ConfigurationError(DexError):
    """Raised when the active network or wallet is not set up for the operation."""
    pass


class QueryError(DexError):
    """Raised when a read-only contract query fails."""
    pass


class NoRouteError(DexError):
    """Raised when no swap route connects two denoms."""

    def __init__(self, token_in: str, token_out: str):
        self.token_in = token_in
        self.token_out = token_out
        super().__init__(f"No route found for swap from {token_in} to {token_out}")


class ExecutionError(DexError):
    """Raised when a swap transaction fails to submit or execute."""
    pass
