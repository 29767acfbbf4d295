"""Custom exception classes for flow-evm-chains library."""

from typing import Union


class ChainError(Exception):
    """Base exception for chain lookup errors."""

    pass


class UnsupportedNetworkError(ChainError, ValueError):
    """Raised when a network name or chain ID is not in the chain tables."""

    def __init__(self, identifier: Union[int, str]):
        self.identifier = identifier
        super().__init__(f"Unsupported network: {identifier}")
