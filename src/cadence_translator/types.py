"""Data types and dataclasses for cadence-translator library."""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

# Variable key -> address or endpoint; None marks an unresolved contract
VariableMap = Dict[str, Optional[str]]

# Extension-stripped file name -> rewritten Cadence source
TranslatedSource = Dict[str, str]


@dataclass(frozen=True)
class ContractDescriptor:
    """A contract entry from flow.json."""

    source: Optional[str] = None  # e.g. "./cadence/contracts/Foo.cdc"
    aliases: Mapping[str, str] = field(default_factory=dict)  # network -> address


@dataclass(frozen=True)
class Account:
    """An account entry from flow.json."""

    address: Optional[str] = None  # e.g. "0xf8d6e0586b0a20c7"
    key: Optional[Any] = None


@dataclass(frozen=True)
class FlowConfig:
    """Parsed network configuration, immutable for one translation run."""

    contracts: Mapping[str, ContractDescriptor] = field(default_factory=dict)
    accounts: Mapping[str, Account] = field(default_factory=dict)
    # network -> account name -> contract names deployed by that account
    deployments: Mapping[str, Mapping[str, Tuple[str, ...]]] = field(default_factory=dict)
    networks: Mapping[str, Optional[str]] = field(default_factory=dict)  # network -> access node


@dataclass(frozen=True)
class SourceFile:
    """A file read from a transaction or script directory."""

    name: str  # File name including extension
    content: bytes

    @property
    def text(self) -> str:
        """Decoded content; a leading BOM is dropped and invalid bytes become U+FFFD."""
        return self.content.decode("utf-8-sig", errors="replace")


@dataclass(frozen=True)
class TranslationInput:
    """Everything a translation run needs."""

    config: Union[FlowConfig, Mapping[str, Any]]
    transactions: Sequence[str] = ()
    scripts: Sequence[str] = ()


@dataclass(frozen=True)
class TranslationResult:
    """Translated sources and per-network variables, ready for FCL."""

    transactions: TranslatedSource
    scripts: TranslatedSource
    vars: Dict[str, VariableMap]  # network name -> variables

    def to_dict(self) -> Dict[str, Any]:
        """Convert to plain nested dictionaries for JSON serialization."""
        return {
            "transactions": dict(self.transactions),
            "scripts": dict(self.scripts),
            "vars": {network: dict(variables) for network, variables in self.vars.items()},
        }
