"""
flow-evm-chains: Python library for resolving Flow EVM networks and RPC endpoints
"""

from importlib.metadata import PackageNotFoundError, version

from .chains import FLOW_MAINNET, FLOW_TESTNET
from .constants import DEFAULT_CHAIN_ID, DEFAULT_RPC_URL
from .exceptions import ChainError, UnsupportedNetworkError
from .resolver import (
    CHAIN_MAP,
    NETWORK_NAME_MAP,
    RPC_URL_MAP,
    configured_rpc_url,
    get_chain,
    get_rpc_url,
    get_supported_networks,
    is_supported_network,
    network_info,
    resolve_chain_id,
)
from .types import BlockExplorer, ChainDescriptor, ChainIdentifier, ContractReference, NativeCurrency

try:
    __version__ = version("flow-evm-chains")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "resolve_chain_id",
    "get_chain",
    "get_rpc_url",
    "get_supported_networks",
    "is_supported_network",
    "network_info",
    "configured_rpc_url",
    "CHAIN_MAP",
    "NETWORK_NAME_MAP",
    "RPC_URL_MAP",
    "DEFAULT_CHAIN_ID",
    "DEFAULT_RPC_URL",
    "FLOW_MAINNET",
    "FLOW_TESTNET",
    "ChainDescriptor",
    "ChainIdentifier",
    "NativeCurrency",
    "BlockExplorer",
    "ContractReference",
    "ChainError",
    "UnsupportedNetworkError",
]
