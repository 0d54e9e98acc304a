"""Main API for cadence-translator library."""

import asyncio
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Tuple, Union

from .constants import NETWORKS
from .exceptions import InvalidConfigError
from .imports import rewrite_imports
from .logging import get_logger
from .parsers import load_flow_config, parse_flow_config
from .paths import strip_extension
from .reader import gather_or_cancel, read_directories
from .types import (
    FlowConfig,
    SourceFile,
    TranslatedSource,
    TranslationInput,
    TranslationResult,
    VariableMap,
)
from .variables import build_network_variables

logger = get_logger(__name__)

InputLike = Union[TranslationInput, Mapping[str, Any]]


def _directory_list(value: Any, field_name: str) -> Tuple[Union[Path, str], ...]:
    """Normalize a sequence of directory paths, rejecting a bare path string."""
    if value is None:
        return ()
    if isinstance(value, (str, bytes, Path)):
        raise InvalidConfigError(
            f"'{field_name}' must be a sequence of directory paths, not a single path"
        )
    return tuple(value)


def _coerce_input(input_data: InputLike) -> TranslationInput:
    """Accept either a TranslationInput or a {config, transactions, scripts} mapping."""
    if isinstance(input_data, TranslationInput):
        config = input_data.config
        transactions = input_data.transactions
        scripts = input_data.scripts
    elif isinstance(input_data, Mapping) and "config" in input_data:
        config = input_data["config"]
        transactions = input_data.get("transactions")
        scripts = input_data.get("scripts")
    else:
        raise InvalidConfigError("Translation input must provide a 'config'")

    return TranslationInput(
        config=config,
        transactions=_directory_list(transactions, "transactions"),
        scripts=_directory_list(scripts, "scripts"),
    )


def _coerce_config(config: Union[FlowConfig, Mapping[str, Any]]) -> FlowConfig:
    if isinstance(config, FlowConfig):
        return config
    return parse_flow_config(config)


def build_all_variables(config: FlowConfig) -> Dict[str, VariableMap]:
    """Build variables for every supported network."""
    return {network: build_network_variables(config, network) for network in NETWORKS}


def translate_sources(config: FlowConfig, sources: Iterable[SourceFile]) -> TranslatedSource:
    """
    Rewrite imports of each file and index them by extension-stripped name.

    A later file with the same stripped name replaces an earlier one.
    """
    translated: TranslatedSource = {}

    for source in sources:
        name = strip_extension(source.name)
        if name in translated:
            logger.debug("'%s' overwrites an earlier file with the same name", source.name)
        translated[name] = rewrite_imports(config, source.text)

    return translated


async def translate(input_data: InputLike) -> TranslationResult:
    """
    Translate Cadence transactions and scripts plus flow.json into FCL form.

    Args:
        input_data: TranslationInput, or mapping with "config" (FlowConfig or
            raw flow.json dict), "transactions" and "scripts" (directory paths)

    Returns:
        TranslationResult with rewritten transactions and scripts and
        variables for emulator, testnet and mainnet

    Raises:
        SourceDirectoryError: If any directory cannot be read
        SourceFileError: If any file cannot be read
        InvalidConfigError: If the configuration is malformed
    """
    request = _coerce_input(input_data)
    config = _coerce_config(request.config)

    variables = build_all_variables(config)

    transaction_files, script_files = await gather_or_cancel(
        [read_directories(request.transactions), read_directories(request.scripts)]
    )

    transactions = translate_sources(config, transaction_files)
    scripts = translate_sources(config, script_files)

    logger.info(
        "Translated %d transaction(s) and %d script(s)", len(transactions), len(scripts)
    )

    return TranslationResult(transactions=transactions, scripts=scripts, vars=variables)


def translate_sync(input_data: InputLike) -> TranslationResult:
    """
    Blocking variant of translate() for synchronous callers.

    Must not be called from inside a running event loop.
    """
    return asyncio.run(translate(input_data))


async def translate_project(
    config_path: Optional[Union[Path, str]] = None,
    transactions: Sequence[Union[Path, str]] = (),
    scripts: Sequence[Union[Path, str]] = (),
) -> TranslationResult:
    """
    Load flow.json from disk and translate the given directories.

    Args:
        config_path: Path to flow.json (defaults to ./flow.json)
        transactions: Transaction directories
        scripts: Script directories

    Raises:
        ConfigNotFoundError: If flow.json is not found
    """
    config = load_flow_config(config_path)
    return await translate(
        TranslationInput(config=config, transactions=transactions, scripts=scripts)
    )
