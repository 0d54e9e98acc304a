"""Unit tests for contract address resolution."""

import logging

import pytest

from cadence_translator.addresses import deploying_accounts, resolve_contract_address
from cadence_translator.parsers import parse_flow_config
from cadence_translator.types import FlowConfig


class TestResolveContractAddress:
    """Test the resolve_contract_address function."""

    def test_resolves_deploying_account(self, sample_config: FlowConfig):
        """Test that the deploying account's address is returned."""
        address = resolve_contract_address(sample_config, "testnet", "Kibble")
        assert address == "0x01cf0e2f2f715450"

    def test_resolves_deployment_with_arguments(self, sample_config: FlowConfig):
        """Test that object-form deployment entries are matched by name."""
        address = resolve_contract_address(sample_config, "testnet", "KittyItems")
        assert address == "0x01cf0e2f2f715450"

    @pytest.mark.parametrize("contract", ["Kibble", "FungibleToken", "Unknown"])
    def test_network_without_deployments_returns_none(self, sample_config: FlowConfig, contract):
        """Test that a network missing from deployments resolves to None."""
        assert resolve_contract_address(sample_config, "mainnet", contract) is None

    def test_undeployed_contract_returns_none(self, sample_config: FlowConfig):
        """Test that a contract no account deploys resolves to None."""
        assert resolve_contract_address(sample_config, "testnet", "FungibleToken") is None

    def test_account_missing_from_accounts_is_ignored(self):
        """Test that a deploying account without an accounts entry is skipped."""
        config = parse_flow_config(
            {
                "contracts": {"Foo": {}},
                "deployments": {"testnet": {"Ghost": ["Foo"]}},
            }
        )
        assert resolve_contract_address(config, "testnet", "Foo") is None

    def test_account_without_address_is_ignored(self):
        """Test that an account entry lacking an address is skipped."""
        config = parse_flow_config(
            {
                "contracts": {"Foo": {}},
                "accounts": {"Alice": {"key": "abc"}},
                "deployments": {"testnet": {"Alice": ["Foo"]}},
            }
        )
        assert resolve_contract_address(config, "testnet", "Foo") is None

    def test_last_claiming_account_wins_and_warns(self, caplog):
        """Test that duplicate claims resolve to the last account and are flagged."""
        config = parse_flow_config(
            {
                "contracts": {"Foo": {}},
                "accounts": {"Alice": {"address": "0x01"}, "Bob": {"address": "0x02"}},
                "deployments": {"testnet": {"Alice": ["Foo"], "Bob": ["Foo"]}},
            }
        )

        with caplog.at_level(logging.WARNING, logger="cadence_translator"):
            address = resolve_contract_address(config, "testnet", "Foo")

        assert address == "0x02"
        assert "several accounts" in caplog.text
        assert "Alice, Bob" in caplog.text


class TestDeployingAccounts:
    """Test the deploying_accounts function."""

    def test_lists_accounts_in_table_order(self):
        """Test that claimants keep deployment-table order."""
        config = parse_flow_config(
            {
                "accounts": {"B": {"address": "0x02"}, "A": {"address": "0x01"}},
                "deployments": {"emulator": {"B": ["Foo"], "A": ["Foo", "Bar"]}},
            }
        )
        assert deploying_accounts(config, "emulator", "Foo") == ["B", "A"]
        assert deploying_accounts(config, "emulator", "Bar") == ["A"]

    def test_empty_for_unknown_network(self, sample_config: FlowConfig):
        """Test that an unknown network yields no claimants."""
        assert deploying_accounts(sample_config, "previewnet", "Kibble") == []
