"""Resolution of contract addresses from flow.json deployments."""

from typing import List, Optional

from .logging import get_logger
from .types import FlowConfig

logger = get_logger(__name__)


def deploying_accounts(config: FlowConfig, network: str, contract_name: str) -> List[str]:
    """
    List accounts that deploy a contract on a network and have a known address.

    Returns:
        Account names in deployment-table order; empty if the network has no deployments
    """
    network_deployments = config.deployments.get(network)
    if not network_deployments:
        return []

    claimants = []
    for account_name, contract_names in network_deployments.items():
        account = config.accounts.get(account_name)
        if contract_name in contract_names and account is not None and account.address:
            claimants.append(account_name)
    return claimants


def resolve_contract_address(
    config: FlowConfig, network: str, contract_name: str
) -> Optional[str]:
    """
    Find the address of the account deploying a contract on a network.

    Args:
        config: Parsed flow configuration
        network: Network name ("emulator", "testnet" or "mainnet")
        contract_name: Contract name as it appears in the contracts section

    Returns:
        Address of the deploying account, or None when the network has no
        deployments or no account deploys the contract. If several accounts
        claim the contract, the last one in the deployment table wins.
    """
    claimants = deploying_accounts(config, network, contract_name)
    if not claimants:
        return None

    if len(claimants) > 1:
        logger.warning(
            "Contract '%s' is deployed by several accounts on '%s' (%s); using '%s'",
            contract_name,
            network,
            ", ".join(claimants),
            claimants[-1],
        )

    return config.accounts[claimants[-1]].address
