"""Unit tests for the chain definitions and lookup tables."""

import pytest

from flow_evm_chains import (
    CHAIN_MAP,
    DEFAULT_CHAIN_ID,
    DEFAULT_RPC_URL,
    FLOW_MAINNET,
    FLOW_TESTNET,
    NETWORK_NAME_MAP,
    RPC_URL_MAP,
)


class TestDefaults:
    """Test the default configuration values."""

    def test_default_chain_id(self):
        assert DEFAULT_CHAIN_ID == 747

    def test_default_rpc_url(self):
        assert DEFAULT_RPC_URL == "https://mainnet.evm.nodes.onflow.org"

    def test_default_chain_is_known(self):
        """Test that the default chain has a descriptor and an RPC URL."""
        assert DEFAULT_CHAIN_ID in CHAIN_MAP
        assert RPC_URL_MAP[DEFAULT_CHAIN_ID] == DEFAULT_RPC_URL


class TestTableConsistency:
    """Test that every network name resolves through all tables."""

    def test_network_names_are_lowercase(self):
        for name in NETWORK_NAME_MAP:
            assert name == name.lower()

    def test_every_named_chain_has_descriptor(self):
        for name, chain_id in NETWORK_NAME_MAP.items():
            assert chain_id in CHAIN_MAP, f"{name} -> {chain_id} missing from CHAIN_MAP"

    def test_every_named_chain_has_rpc_url(self):
        for name, chain_id in NETWORK_NAME_MAP.items():
            assert chain_id in RPC_URL_MAP, f"{name} -> {chain_id} missing from RPC_URL_MAP"

    def test_descriptor_ids_match_keys(self):
        for chain_id, chain in CHAIN_MAP.items():
            assert chain.id == chain_id

    def test_rpc_url_listed_in_descriptor(self):
        for chain_id, rpc_url in RPC_URL_MAP.items():
            assert rpc_url in CHAIN_MAP[chain_id].rpc_urls


class TestTablesAreReadOnly:
    """Test that the tables cannot be modified at runtime."""

    @pytest.mark.parametrize("table", [CHAIN_MAP, NETWORK_NAME_MAP, RPC_URL_MAP])
    def test_assignment_rejected(self, table):
        with pytest.raises(TypeError):
            table["new"] = 1

    def test_descriptor_is_frozen(self):
        with pytest.raises(AttributeError):
            FLOW_MAINNET.id = 1


class TestFlowDescriptors:
    """Test the Flow EVM chain definitions."""

    def test_mainnet(self):
        assert FLOW_MAINNET.id == 747
        assert FLOW_MAINNET.name == "Flow EVM Mainnet"
        assert FLOW_MAINNET.native_currency.symbol == "FLOW"
        assert FLOW_MAINNET.native_currency.decimals == 18
        assert FLOW_MAINNET.block_explorer.url == "https://evm.flowscan.io"
        assert FLOW_MAINNET.testnet is False

    def test_testnet(self):
        assert FLOW_TESTNET.id == 545
        assert FLOW_TESTNET.name == "Flow EVM Testnet"
        assert FLOW_TESTNET.block_explorer.url == "https://evm-testnet.flowscan.io"
        assert FLOW_TESTNET.testnet is True

    def test_multicall3_shared_address(self):
        assert FLOW_MAINNET.multicall3.address == FLOW_TESTNET.multicall3.address
        assert FLOW_MAINNET.multicall3.block_created == 6205
        assert FLOW_TESTNET.multicall3.block_created == 137518
