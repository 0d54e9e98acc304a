"""Rewriting of local contract imports in Cadence source."""

from typing import Iterable, Optional, Union

from .constants import ADDRESS_PREFIX
from .exceptions import InvalidConfigError
from .types import FlowConfig


def normalize_line_endings(source: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return source.replace("\r\n", "\n").replace("\r", "\n")


def imported_symbol(line: str) -> Optional[str]:
    """
    Extract the imported symbol from an import line.

    The trimmed line is split on single spaces and the second token is the
    symbol, so `import Foo from "./Foo.cdc"` yields "Foo".

    Returns:
        The symbol, or None if the line is not an import line or has no symbol
    """
    # str.strip() keeps U+FEFF, so a byte-order mark is removed separately
    stripped = line.strip().strip("\ufeff").strip()
    if not stripped.startswith("import"):
        return None

    tokens = stripped.split(" ")
    if len(tokens) < 2:
        return None
    return tokens[1]


def rewrite_import_line(symbol: str) -> str:
    return f"import {symbol} from {ADDRESS_PREFIX}{symbol}"


def rewrite_imports(contracts: Union[FlowConfig, Iterable[str]], source: str) -> str:
    """
    Point imports of configured contracts at address placeholders.

    An import line whose symbol exactly matches a contract name becomes
    `import <symbol> from 0x<symbol>`. Every other line, including imports of
    unknown symbols, is returned unchanged. Line endings are the one exception:
    CRLF and lone CR are normalized to LF, so text without imports is returned
    unchanged only when it already uses LF.

    Args:
        contracts: FlowConfig, or a collection of contract names to match against
        source: Cadence source text

    Returns:
        Rewritten source, with LF line endings

    Raises:
        InvalidConfigError: If contracts is a single string
    """
    if isinstance(contracts, (str, bytes)):
        raise InvalidConfigError(
            "Contract names must be a collection of names, not a single string"
        )
    names = contracts.contracts.keys() if isinstance(contracts, FlowConfig) else contracts
    contract_names = frozenset(names)

    lines = []
    for line in normalize_line_endings(source).split("\n"):
        symbol = imported_symbol(line)
        if symbol is not None and symbol in contract_names:
            lines.append(rewrite_import_line(symbol))
        else:
            lines.append(line)

    return "\n".join(lines)
