"""Data types and dataclasses for flow-evm-chains library."""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

# Chain ID (int) or network name / numeric string (str)
ChainIdentifier = Union[int, str]


@dataclass(frozen=True)
class NativeCurrency:
    """Native gas token of a chain."""

    name: str
    symbol: str
    decimals: int


@dataclass(frozen=True)
class BlockExplorer:
    """Default block explorer of a chain."""

    name: str
    url: str


@dataclass(frozen=True)
class ContractReference:
    """Well-known contract deployed on a chain."""

    address: str  # Checksummed address
    block_created: Optional[int] = None


@dataclass(frozen=True)
class ChainDescriptor:
    """Consensus and network parameters of an EVM chain."""

    # Required fields
    id: int  # EIP-155 chain ID
    name: str  # e.g., "Flow EVM Mainnet"
    native_currency: NativeCurrency
    rpc_urls: Tuple[str, ...]

    # Optional fields
    block_explorer: Optional[BlockExplorer] = None
    multicall3: Optional[ContractReference] = None
    testnet: bool = False
