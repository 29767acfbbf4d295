"""Shared pytest fixtures for flow-evm-chains tests."""

import pytest

from flow_evm_chains.constants import RPC_URL_ENV


@pytest.fixture
def clean_rpc_env(monkeypatch):
    """Remove RPC URL override variables from the environment."""
    for env_var in RPC_URL_ENV.values():
        monkeypatch.delenv(env_var, raising=False)
    return monkeypatch


@pytest.fixture
def supported_names():
    """Return supported network names in mixed case variants."""
    return {
        "flow": 747,
        "FLOW": 747,
        "Flow": 747,
        "flow-testnet": 545,
        "FLOW-TESTNET": 545,
        "Flow-Testnet": 545,
    }
