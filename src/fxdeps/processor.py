"""Reconciliation of requested JavaFX modules against build configurations.

Every change to the request triggers a full reconcile from scratch; there is
no incremental re-resolution. The caller applies the returned additions and
removals and avoids duplicate inserts.
"""

import logging
from typing import Iterable, List, Optional

from fxdeps.constants import Constants
from fxdeps.errors import CannotResolveVersion
from fxdeps.modules import artifact_name, format_coordinate, ordered_closure
from fxdeps.platforms import resolve_classifier
from fxdeps.resolvers.chain import ResolverChain, default_chain
from fxdeps.versioning.models import ConfigurationState, ReconcileResult, ResolutionRequest
from fxdeps.versioning.parser import parse_version

logger = logging.getLogger(__name__)


def coordinate_group(notation: str) -> str:
    """Group segment of a ``group:artifact[:...]`` notation."""
    return notation.split(":", 1)[0].strip()


class DependencyProcessor:
    """Turns a ResolutionRequest into coordinate additions and removals."""

    def __init__(self, chain: Optional[ResolverChain] = None, group: Optional[str] = None):
        self._chain = chain if chain is not None else default_chain()
        self._group = group or Constants.ARTIFACT_GROUP

    @property
    def chain(self) -> ResolverChain:
        return self._chain

    @property
    def group(self) -> str:
        return self._group

    def resolve_version(self, request: ResolutionRequest) -> str:
        """Concrete version for the request.

        Literal versions are returned untouched without any network call. A
        special case is resolved once, using the first module of the closure
        as representative, since all modules of a release share its version.

        Raises:
            CannotResolveVersion: If the special case cannot be resolved.
        """
        spec = parse_version(request.version)
        if not spec.is_special_case:
            return spec.raw

        modules = ordered_closure(request.modules)
        if not modules:
            raise CannotResolveVersion(self._group, "", request.version)
        representative = artifact_name(modules[0])
        result = self._chain.resolve(self._group, representative, request.version)
        if result is None:
            raise CannotResolveVersion(
                self._group, representative, request.version, cause=self._chain.last_error
            )
        return result.version

    def coordinates_for(self, request: ResolutionRequest) -> List[str]:
        """Formatted coordinates for every module in the request's closure.

        Raises:
            UnsupportedPlatform: If the platform has no classifier.
            CannotResolveVersion: If a special-case version cannot be resolved.
        """
        modules = ordered_closure(request.modules)
        if not modules:
            return []
        classifier = resolve_classifier(request.platform, request.architecture)
        version = self.resolve_version(request)
        return [format_coordinate(module, version, classifier) for module in modules]

    def reconcile(
        self,
        request: ResolutionRequest,
        configurations: Iterable[ConfigurationState],
    ) -> ReconcileResult:
        """Compute the dependency changes for ``request``.

        Engine-owned coordinates are removed from configurations that are no
        longer targeted; the full coordinate set is queued for every targeted
        configuration that exists.

        Raises:
            UnsupportedPlatform: If the platform has no classifier.
            CannotResolveVersion: If a special-case version cannot be resolved.
        """
        configurations = list(configurations)
        targets = set(request.configurations)
        result = ReconcileResult()

        for configuration in configurations:
            if configuration.name in targets:
                continue
            for notation in configuration.dependencies:
                if coordinate_group(notation) == self._group:
                    result.to_remove.append((configuration.name, notation))

        if not request.modules:
            logger.debug("No modules selected; only stale dependencies removed")
            return result

        coordinates = self.coordinates_for(request)
        existing = {configuration.name for configuration in configurations}
        for name in request.configurations:
            if name not in existing:
                logger.debug("Configuration %s does not exist; skipped", name)
                continue
            result.to_add.extend((name, notation) for notation in coordinates)

        logger.info(
            "Reconciled %d modules: %d additions, %d removals",
            len(coordinates),
            len(result.to_add),
            len(result.to_remove),
        )
        return result
