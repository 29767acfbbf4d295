"""Configuration constants for flow-evm-chains library."""

# Flow EVM mainnet is used whenever no network is given
DEFAULT_CHAIN_ID = 747
DEFAULT_RPC_URL = "https://mainnet.evm.nodes.onflow.org"

# Environment variables that override the public RPC endpoint per chain
RPC_URL_ENV = {
    747: "FLOW_EVM_RPC_URL",
    545: "FLOW_EVM_TESTNET_RPC_URL",
}
