"""Chain definitions for the Flow EVM networks."""

from .types import BlockExplorer, ChainDescriptor, ContractReference, NativeCurrency

FLOW_CURRENCY = NativeCurrency(name="Flow", symbol="FLOW", decimals=18)

MULTICALL3_ADDRESS = "0xcA11bde05977b3631167028862bE2a173976CA11"

FLOW_MAINNET = ChainDescriptor(
    id=747,
    name="Flow EVM Mainnet",
    native_currency=FLOW_CURRENCY,
    rpc_urls=("https://mainnet.evm.nodes.onflow.org",),
    block_explorer=BlockExplorer(name="Mainnet Explorer", url="https://evm.flowscan.io"),
    multicall3=ContractReference(address=MULTICALL3_ADDRESS, block_created=6205),
)

FLOW_TESTNET = ChainDescriptor(
    id=545,
    name="Flow EVM Testnet",
    native_currency=FLOW_CURRENCY,
    rpc_urls=("https://testnet.evm.nodes.onflow.org",),
    block_explorer=BlockExplorer(name="Flow Diver", url="https://evm-testnet.flowscan.io"),
    multicall3=ContractReference(address=MULTICALL3_ADDRESS, block_created=137518),
    testnet=True,
)
