"""JavaFX module catalog and dependency closure.

The catalog is fixed. Direct dependencies are kept in an adjacency table
instead of on the enum members, and ``ALL`` is a sentinel meaning "every
module"; it is never resolved to an artifact itself.
"""

from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Tuple, Union

from fxdeps.constants import Constants
from fxdeps.errors import UnknownModule


class Module(Enum):
    """JavaFX feature modules."""
    BASE = "base"
    GRAPHICS = "graphics"
    CONTROLS = "controls"
    FXML = "fxml"
    MEDIA = "media"
    SWING = "swing"
    WEB = "web"
    ALL = "all"


WILDCARD = Module.ALL

MODULE_DEPENDENCIES: Dict[Module, Tuple[Module, ...]] = {
    Module.BASE: (),
    Module.GRAPHICS: (Module.BASE,),
    Module.CONTROLS: (Module.BASE, Module.GRAPHICS),
    Module.FXML: (Module.BASE, Module.GRAPHICS),
    Module.MEDIA: (Module.BASE, Module.GRAPHICS),
    Module.SWING: (Module.BASE, Module.GRAPHICS),
    Module.WEB: (Module.BASE, Module.CONTROLS, Module.MEDIA),
}

CONCRETE_MODULES: Tuple[Module, ...] = tuple(m for m in Module if m is not WILDCARD)

_CATALOG_ORDER = {module: index for index, module in enumerate(Module)}


def dependencies(module: Module) -> Tuple[Module, ...]:
    """Direct dependencies of ``module``; the wildcard has none of its own."""
    return MODULE_DEPENDENCIES.get(module, ())


def resolve_closure(selected: Iterable[Module]) -> FrozenSet[Module]:
    """Expand a selection into every module it needs.

    If the wildcard is selected the whole concrete catalog is returned and the
    rest of the selection is ignored. Otherwise dependency edges are followed
    transitively from every selected module.
    """
    selected = set(selected)
    if WILDCARD in selected:
        return frozenset(CONCRETE_MODULES)

    result = set()
    pending = list(selected)
    while pending:
        module = pending.pop()
        if module in result:
            continue
        result.add(module)
        pending.extend(dep for dep in dependencies(module) if dep not in result)
    return frozenset(result)


def ordered_closure(selected: Iterable[Module]) -> List[Module]:
    """Closure of ``selected`` sorted in catalog order."""
    return sorted(resolve_closure(selected), key=_CATALOG_ORDER.__getitem__)


def artifact_name(module: Module) -> str:
    """Maven artifact id, e.g. ``javafx-controls``."""
    if module is WILDCARD:
        return ""
    return f"{Constants.ARTIFACT_PREFIX}-{module.value}"


def java_module_name(module: Module) -> str:
    """Java platform module name, e.g. ``javafx.controls``."""
    if module is WILDCARD:
        return ""
    return f"{Constants.ARTIFACT_PREFIX}.{module.value}"


def coordinate_base(module: Module) -> str:
    """``group:artifact`` without version or classifier."""
    if module is WILDCARD:
        return ""
    return f"{Constants.ARTIFACT_GROUP}:{artifact_name(module)}"


def format_coordinate(module: Module, version: str, classifier: str = "") -> str:
    """Full ``group:artifact:version[:classifier]`` notation."""
    if module is WILDCARD:
        return ""
    notation = f"{coordinate_base(module)}:{version}"
    if classifier:
        notation = f"{notation}:{classifier}"
    return notation


def parse_module_list(value: Union[str, Iterable[str]]) -> FrozenSet[Module]:
    """Parse module names, case-insensitively.

    Accepts a ``;``-separated string or an iterable of names. Blank entries
    are skipped.

    Raises:
        UnknownModule: If a name is not in the catalog.
    """
    if isinstance(value, str):
        names = value.split(Constants.MODULE_SEPARATOR)
    else:
        names = list(value)

    modules = set()
    for name in names:
        key = str(name).strip().lower()
        if not key:
            continue
        try:
            modules.add(Module(key))
        except ValueError:
            raise UnknownModule(f"Unknown JavaFX module: {str(name).strip()!r}") from None
    return frozenset(modules)
