"""
cadence-translator: Translate Cadence sources and flow.json into FCL-ready objects
"""

from importlib.metadata import PackageNotFoundError, version

from .exceptions import (
    ConfigNotFoundError,
    InvalidConfigError,
    InvalidContractNameError,
    SourceDirectoryError,
    SourceFileError,
    TranslationError,
)
from .parsers import load_flow_config, parse_flow_config
from .translator import translate, translate_project, translate_sync
from .types import (
    Account,
    ContractDescriptor,
    FlowConfig,
    SourceFile,
    TranslationInput,
    TranslationResult,
)

try:
    __version__ = version("cadence-translator")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "translate",
    "translate_sync",
    "translate_project",
    "load_flow_config",
    "parse_flow_config",
    "Account",
    "ContractDescriptor",
    "FlowConfig",
    "SourceFile",
    "TranslationInput",
    "TranslationResult",
    "TranslationError",
    "ConfigNotFoundError",
    "InvalidConfigError",
    "InvalidContractNameError",
    "SourceDirectoryError",
    "SourceFileError",
]
