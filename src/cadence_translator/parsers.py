"""flow.json parsers for cadence-translator library."""

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .exceptions import ConfigNotFoundError, InvalidConfigError
from .logging import get_logger
from .paths import get_default_config_path
from .types import Account, ContractDescriptor, FlowConfig

logger = get_logger(__name__)


def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    """Return a top-level section, defaulting to empty when absent."""
    section = data.get(name)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise InvalidConfigError(
            f"'{name}' section must be an object, got {type(section).__name__}"
        )
    return section


def parse_contract(name: str, entry: Any) -> ContractDescriptor:
    """
    Parse a single contract entry.

    Args:
        name: Contract name (key in the contracts section)
        entry: Either a source path string or an object with source/aliases

    Returns:
        ContractDescriptor

    Raises:
        InvalidConfigError: If entry is neither a string nor an object
    """
    if entry is None:
        return ContractDescriptor()
    if isinstance(entry, str):
        return ContractDescriptor(source=entry)
    if not isinstance(entry, Mapping):
        raise InvalidConfigError(f"Contract '{name}' must be a string or an object")

    aliases = entry.get("aliases") or {}
    if not isinstance(aliases, Mapping):
        raise InvalidConfigError(f"Aliases of contract '{name}' must be an object")

    return ContractDescriptor(source=entry.get("source"), aliases=dict(aliases))


def parse_account(name: str, entry: Any) -> Account:
    """
    Parse a single account entry.

    A bare string is accepted as the account address.
    """
    if isinstance(entry, str):
        return Account(address=entry)
    if not isinstance(entry, Mapping):
        raise InvalidConfigError(f"Account '{name}' must be a string or an object")
    return Account(address=entry.get("address"), key=entry.get("key"))


def normalize_deployment_entry(entry: Any) -> str:
    """
    Convert a deployment list entry to a contract name.

    Entries are either plain names or objects of the form
    {"name": "Foo", "args": [...]}.
    """
    if isinstance(entry, str):
        return entry
    if isinstance(entry, Mapping) and isinstance(entry.get("name"), str):
        return entry["name"]
    raise InvalidConfigError(f"Unrecognized deployment entry: {entry!r}")


def parse_deployments(section: Mapping[str, Any]) -> Dict[str, Dict[str, Tuple[str, ...]]]:
    """
    Parse the deployments section.

    Returns:
        Dictionary mapping network -> account name -> tuple of contract names
    """
    result: Dict[str, Dict[str, Tuple[str, ...]]] = {}

    for network, accounts in section.items():
        if not isinstance(accounts, Mapping):
            raise InvalidConfigError(f"Deployments for network '{network}' must be an object")

        network_deployments: Dict[str, Tuple[str, ...]] = {}
        for account_name, entries in accounts.items():
            if not isinstance(entries, (list, tuple)):
                raise InvalidConfigError(
                    f"Deployments of account '{account_name}' on '{network}' must be a list"
                )
            network_deployments[account_name] = tuple(
                normalize_deployment_entry(entry) for entry in entries
            )

        result[network] = network_deployments

    return result


def normalize_network_endpoint(network: str, entry: Any) -> Optional[str]:
    """Convert a network entry to its access node URL."""
    if entry is None or isinstance(entry, str):
        return entry
    if isinstance(entry, Mapping) and "host" in entry:
        return entry["host"]
    raise InvalidConfigError(f"Network '{network}' must be a URL string or an object with 'host'")


def parse_flow_config(data: Any) -> FlowConfig:
    """
    Parse a flow.json document into a FlowConfig.

    Args:
        data: Parsed JSON mapping with contracts/accounts/deployments/networks

    Returns:
        FlowConfig with every section normalized

    Raises:
        InvalidConfigError: If the document or one of its sections is malformed
    """
    if not isinstance(data, Mapping):
        raise InvalidConfigError(
            f"Configuration must be an object, got {type(data).__name__}"
        )

    contracts = {
        name: parse_contract(name, entry)
        for name, entry in _section(data, "contracts").items()
    }
    accounts = {
        name: parse_account(name, entry)
        for name, entry in _section(data, "accounts").items()
    }
    deployments = parse_deployments(_section(data, "deployments"))
    networks = {
        network: normalize_network_endpoint(network, entry)
        for network, entry in _section(data, "networks").items()
    }

    return FlowConfig(
        contracts=contracts,
        accounts=accounts,
        deployments=deployments,
        networks=networks,
    )


def load_flow_config(config_path: Optional[Union[Path, str]] = None) -> FlowConfig:
    """
    Load and parse a flow.json file.

    Args:
        config_path: Path to flow.json (defaults to ./flow.json)

    Returns:
        FlowConfig

    Raises:
        ConfigNotFoundError: If the file does not exist
        InvalidConfigError: If the file is not valid JSON or is malformed
    """
    if config_path is None:
        config_path = get_default_config_path()

    path = Path(config_path)
    if not path.exists():
        raise ConfigNotFoundError(f"Flow configuration not found at {path}")

    try:
        with open(path) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidConfigError(f"Invalid JSON in {path}: {e}") from e

    logger.debug("Loaded flow configuration from %s", path)
    return parse_flow_config(data)
