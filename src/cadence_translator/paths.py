"""Path and file name utilities for cadence-translator library."""

from pathlib import Path

from .constants import CADENCE_EXTENSION, DEFAULT_CONFIG_FILENAME


def get_default_config_path() -> Path:
    """
    Get default flow.json location.

    Returns:
        Path to ./flow.json
    """
    return Path.cwd() / DEFAULT_CONFIG_FILENAME


def strip_extension(name: str) -> str:
    """
    Remove a trailing Cadence extension from a file or contract name.

    Args:
        name: Name such as "Transfer.cdc" or "FungibleToken"

    Returns:
        Name without the ".cdc" suffix; other names are returned unchanged
    """
    if name.endswith(CADENCE_EXTENSION):
        return name[: -len(CADENCE_EXTENSION)]
    return name
