"""Chain lookup API for flow-evm-chains library."""

import logging
import os
import re
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from .chains import FLOW_MAINNET, FLOW_TESTNET
from .constants import DEFAULT_CHAIN_ID, DEFAULT_RPC_URL, RPC_URL_ENV
from .exceptions import UnsupportedNetworkError
from .types import ChainDescriptor, ChainIdentifier

logger = logging.getLogger(__name__)

# Map chain IDs to chain descriptors
CHAIN_MAP: Mapping[int, ChainDescriptor] = MappingProxyType(
    {
        747: FLOW_MAINNET,
        545: FLOW_TESTNET,
    }
)

# Map lowercase network names to chain IDs
NETWORK_NAME_MAP: Mapping[str, int] = MappingProxyType(
    {
        "flow": 747,
        "flow-testnet": 545,
    }
)

# Map chain IDs to public RPC endpoints
RPC_URL_MAP: Mapping[int, str] = MappingProxyType(
    {
        747: "https://mainnet.evm.nodes.onflow.org",
        545: "https://testnet.evm.nodes.onflow.org",
    }
)

# Leading base-10 integer, e.g. "545", " -1", "12abc"
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def _parse_leading_int(text: str) -> Optional[int]:
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(1))


def resolve_chain_id(chain_identifier: ChainIdentifier) -> int:
    """
    Resolve a chain identifier to a chain ID.

    Resolution order for strings:
    - Known network name (case-insensitive)
    - Leading base-10 integer ("545", "999", "12abc")
    - DEFAULT_CHAIN_ID

    Args:
        chain_identifier: Chain ID (int) or network name (str)

    Returns:
        The resolved chain ID. Integers are returned unchanged and are not
        checked against the known chains.
    """
    if isinstance(chain_identifier, int):
        return chain_identifier

    network_name = chain_identifier.lower()
    if network_name in NETWORK_NAME_MAP:
        return NETWORK_NAME_MAP[network_name]

    parsed_id = _parse_leading_int(network_name)
    if parsed_id is not None:
        return parsed_id

    logger.debug(
        "Unknown network '%s', using default chain ID %d", chain_identifier, DEFAULT_CHAIN_ID
    )
    return DEFAULT_CHAIN_ID


def get_chain(chain_identifier: ChainIdentifier = DEFAULT_CHAIN_ID) -> Optional[ChainDescriptor]:
    """
    Get the chain descriptor for a chain ID or network name.

    Args:
        chain_identifier: Chain ID (int) or network name (str)

    Returns:
        ChainDescriptor for the network. For an unknown numeric chain ID the
        result is None; only names are validated.

    Raises:
        UnsupportedNetworkError: If a network name is not supported
    """
    if isinstance(chain_identifier, str):
        network_name = chain_identifier.lower()
        if network_name in NETWORK_NAME_MAP:
            return CHAIN_MAP[NETWORK_NAME_MAP[network_name]]
        raise UnsupportedNetworkError(chain_identifier)

    return CHAIN_MAP.get(chain_identifier)


def get_rpc_url(chain_identifier: ChainIdentifier = DEFAULT_CHAIN_ID) -> str:
    """
    Get the public RPC URL for a chain ID or network name.

    Args:
        chain_identifier: Chain ID (int) or network name (str)

    Returns:
        RPC URL for the chain, or DEFAULT_RPC_URL if the chain has none
    """
    if isinstance(chain_identifier, str):
        chain_id = resolve_chain_id(chain_identifier)
    else:
        chain_id = chain_identifier

    rpc_url = RPC_URL_MAP.get(chain_id)
    if rpc_url is None:
        logger.debug("No RPC URL for chain %s, using %s", chain_id, DEFAULT_RPC_URL)
        return DEFAULT_RPC_URL
    return rpc_url


def get_supported_networks() -> List[str]:
    """Get the supported network names, sorted alphabetically."""
    return sorted(NETWORK_NAME_MAP.keys())


def is_supported_network(chain_identifier: ChainIdentifier) -> bool:
    """
    Check if a network name or chain ID is supported.

    Args:
        chain_identifier: Chain ID (int) or network name (str)

    Returns:
        True if the network is known, False otherwise
    """
    if isinstance(chain_identifier, str):
        return chain_identifier.lower() in NETWORK_NAME_MAP
    return chain_identifier in CHAIN_MAP


def network_info(chain_identifier: ChainIdentifier = DEFAULT_CHAIN_ID) -> Dict[str, Any]:
    """
    Get network information (chain ID, name, RPC and explorer URLs).

    Args:
        chain_identifier: Chain ID (int) or network name (str)

    Returns:
        Dictionary with chain_id, chain_name, rpc_url, block_explorer_url, testnet

    Raises:
        UnsupportedNetworkError: If the network name or chain ID is not supported
    """
    chain = get_chain(chain_identifier)
    if chain is None:
        raise UnsupportedNetworkError(chain_identifier)

    explorer = chain.block_explorer
    return {
        "chain_id": chain.id,
        "chain_name": chain.name,
        "rpc_url": get_rpc_url(chain.id),
        "block_explorer_url": explorer.url if explorer is not None else None,
        "testnet": chain.testnet,
    }


def configured_rpc_url(
    chain_identifier: ChainIdentifier = DEFAULT_CHAIN_ID, rpc_url: Optional[str] = None
) -> str:
    """
    Get the RPC URL to use for a chain, honouring local overrides.

    Precedence:
    - rpc_url argument
    - $FLOW_EVM_RPC_URL / $FLOW_EVM_TESTNET_RPC_URL for the resolved chain
    - get_rpc_url()

    Args:
        chain_identifier: Chain ID (int) or network name (str)
        rpc_url: Explicit RPC URL, returned as-is when given

    Returns:
        RPC URL for the chain
    """
    if rpc_url is not None:
        return rpc_url

    chain_id = resolve_chain_id(chain_identifier)
    env_var = RPC_URL_ENV.get(chain_id)
    if env_var is not None:
        env_url = os.environ.get(env_var)
        if env_url:
            return env_url

    return get_rpc_url(chain_id)
