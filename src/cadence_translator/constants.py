"""Configuration constants for cadence-translator library."""

# Networks a translation always produces variables for, in output order
NETWORKS = ("emulator", "testnet", "mainnet")

# Variable key FCL reads the access node endpoint from
ACCESS_NODE_KEY = "accessNode.api"

# Prefix for contract address placeholders, e.g. "0xFungibleToken"
ADDRESS_PREFIX = "0x"

CADENCE_EXTENSION = ".cdc"

DEFAULT_CONFIG_FILENAME = "flow.json"
