"""Shared pytest fixtures for cadence-translator tests."""

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from cadence_translator.parsers import parse_flow_config
from cadence_translator.types import FlowConfig


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_flow_json(fixtures_dir: Path) -> Dict[str, Any]:
    """Load and return the sample flow.json fixture."""
    with open(fixtures_dir / "flow.json") as f:
        return json.load(f)


@pytest.fixture
def sample_config(sample_flow_json: Dict[str, Any]) -> FlowConfig:
    """Return the sample flow.json fixture parsed into a FlowConfig."""
    return parse_flow_config(sample_flow_json)


@pytest.fixture
def foo_flow_json() -> Dict[str, Any]:
    """Minimal configuration with one contract deployed by Alice on testnet."""
    return {
        "contracts": {"Foo.cdc": {}},
        "accounts": {"Alice": {"address": "0x01"}},
        "deployments": {"testnet": {"Alice": ["Foo.cdc"]}},
        "networks": {"testnet": "https://testnet"},
    }


@pytest.fixture
def cadence_project(tmp_path: Path) -> Path:
    """Create a project with transaction and script directories."""
    transactions = tmp_path / "transactions"
    scripts = tmp_path / "scripts"
    transactions.mkdir()
    scripts.mkdir()

    (transactions / "mint_kibble.cdc").write_text(
        'import FungibleToken from "./FungibleToken.cdc"\n'
        'import Kibble from "./Kibble.cdc"\n'
        "\n"
        "transaction(amount: UFix64) {}\n"
    )
    (transactions / "setup_account.cdc").write_text(
        'import KittyItems from "./KittyItems.cdc"\n'
        'import NonFungibleToken from "./NonFungibleToken.cdc"\n'
        "transaction {}\n"
    )
    (scripts / "get_balance.cdc").write_text(
        'import Kibble from "./Kibble.cdc"\n'
        "pub fun main(address: Address): UFix64 { return 0.0 }\n"
    )
    return tmp_path
