"""Data models for version resolution and reconciliation."""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Tuple

from fxdeps.constants import Constants
from fxdeps.modules import Module
from fxdeps.platforms import Architecture, Platform


@dataclass(frozen=True)
class VersionSpec:
    """A requested version: either a literal or a ``#token#`` special case."""
    raw: str
    token: Optional[str] = None  # None for literal versions

    @property
    def is_special_case(self) -> bool:
        """True when the version is symbolic and must be resolved remotely."""
        return self.token is not None

    @property
    def literal(self) -> Optional[str]:
        """The literal version string, or None for special cases."""
        return None if self.is_special_case else self.raw


def _first(doc: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if doc.get(key) is not None:
            return doc[key]
    return default


def _as_tuple(value: Any) -> Tuple[str, ...]:
    """Coerce a list field; a bare string is one item, anything else is dropped."""
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple)):
        return tuple(str(item) for item in value)
    return ()


@dataclass(frozen=True)
class ArtifactCoordinate:
    """A published artifact as reported by a search index."""
    id: str
    group: str
    artifact: str
    version: str
    packaging: str = "jar"
    classifiers: Tuple[str, ...] = ()
    tags: Tuple[str, ...] = ()

    @classmethod
    def from_doc(cls, doc: Dict[str, Any]) -> "ArtifactCoordinate":
        """Build from a search result document, accepting short and long field names."""
        group = str(_first(doc, "g", "group", default=""))
        artifact = str(_first(doc, "a", "artifact", default=""))
        version = str(_first(doc, "v", "version", default=""))
        return cls(
            id=str(_first(doc, "id", default=f"{group}:{artifact}:{version}")),
            group=group,
            artifact=artifact,
            version=version,
            packaging=str(_first(doc, "p", "prototype", "packaging", default="jar")),
            classifiers=_as_tuple(_first(doc, "ec", "classifiers")),
            tags=_as_tuple(_first(doc, "tags")),
        )

    def notation(self, classifier: str = "") -> str:
        """``group:artifact:version[:classifier]``."""
        base = f"{self.group}:{self.artifact}:{self.version}"
        return f"{base}:{classifier}" if classifier else base


def _ordered_unique(names: Iterable[str]) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(n.strip() for n in names if n and n.strip()))


@dataclass(frozen=True)
class ResolutionRequest:
    """Everything one reconciliation cycle needs."""
    modules: FrozenSet[Module]
    version: str
    platform: Platform
    architecture: Architecture
    configurations: Tuple[str, ...] = field(
        default_factory=lambda: tuple(Constants.DEFAULT_CONFIGURATIONS)
    )

    def __post_init__(self):
        object.__setattr__(self, "modules", frozenset(self.modules))
        object.__setattr__(self, "configurations", _ordered_unique(self.configurations))


@dataclass(frozen=True)
class ConfigurationState:
    """A build configuration and the coordinates currently attached to it."""
    name: str
    dependencies: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "dependencies", tuple(self.dependencies))


@dataclass
class ReconcileResult:
    """Changes to apply: (configuration name, coordinate) pairs."""
    to_add: List[Tuple[str, str]] = field(default_factory=list)
    to_remove: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.to_add and not self.to_remove
