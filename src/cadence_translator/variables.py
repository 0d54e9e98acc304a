"""Per-network FCL variable maps."""

from .addresses import resolve_contract_address
from .constants import ACCESS_NODE_KEY, ADDRESS_PREFIX
from .exceptions import InvalidContractNameError
from .logging import get_logger
from .paths import strip_extension
from .types import FlowConfig, VariableMap

logger = get_logger(__name__)


def contract_key(contract_name: str) -> str:
    """
    Build the variable key for a contract address placeholder.

    Args:
        contract_name: Contract name, with or without ".cdc"

    Returns:
        Key of the form "0x<Name>", e.g. "0xFungibleToken"

    Raises:
        InvalidContractNameError: If the name is empty or contains whitespace
    """
    name = strip_extension(contract_name)
    if not name or any(c.isspace() for c in name):
        raise InvalidContractNameError(
            f"Cannot build a variable key from contract name {contract_name!r}"
        )
    return f"{ADDRESS_PREFIX}{name}"


def build_network_variables(config: FlowConfig, network: str) -> VariableMap:
    """
    Build the FCL variables for one network.

    Every contract gets a key, even when its address is unresolved (None).
    A per-network alias takes precedence over the deploying account's address.

    Args:
        config: Parsed flow configuration
        network: Network name

    Returns:
        New dictionary of contract keys plus "accessNode.api"
    """
    variables: VariableMap = {}

    for contract_name, contract in config.contracts.items():
        alias = contract.aliases.get(network)
        if alias:
            address = alias
        else:
            address = resolve_contract_address(config, network, contract_name)
            if address is None:
                logger.debug("No address for contract '%s' on '%s'", contract_name, network)

        variables[contract_key(contract_name)] = address

    variables[ACCESS_NODE_KEY] = config.networks.get(network)
    return variables
