"""Prioritized chain of repository resolvers with a shared artifact cache."""

import logging
from typing import Iterable, List, Optional

from fxdeps.common.logging_utils import extra_context, is_debug_enabled
from fxdeps.errors import TransportError
from fxdeps.versioning.cache import ArtifactCache
from fxdeps.versioning.models import ArtifactCoordinate
from fxdeps.versioning.parser import parse_version

from .base import RepositoryResolver
from .remote_index import RemoteIndexResolver

logger = logging.getLogger(__name__)


class ResolverChain:
    """Try resolvers in registration order; the first hit wins.

    Special-case results are cached per chain. Literal versions never reach a
    resolver or the cache: the literal already is the answer.
    """

    def __init__(
        self,
        resolvers: Optional[Iterable[RepositoryResolver]] = None,
        cache: Optional[ArtifactCache] = None,
    ):
        self._resolvers: List[RepositoryResolver] = list(resolvers or [])
        self._cache = cache if cache is not None else ArtifactCache()
        self._last_error: Optional[TransportError] = None

    @property
    def cache(self) -> ArtifactCache:
        return self._cache

    @property
    def last_error(self) -> Optional[TransportError]:
        """Transport error of the last resolve, set only when every resolver failed on transport."""
        return self._last_error

    @property
    def resolvers(self) -> List[RepositoryResolver]:
        return list(self._resolvers)

    def register(self, resolver: RepositoryResolver) -> None:
        """Append a resolver at the lowest priority."""
        self._resolvers.append(resolver)

    def resolve(
        self,
        group: str,
        artifact: str,
        version: str,
        classifier: Optional[str] = None,
    ) -> Optional[ArtifactCoordinate]:
        """Resolve ``version`` for ``group:artifact``; None when no resolver finds it."""
        self._last_error = None
        spec = parse_version(version)
        if not spec.is_special_case:
            return ArtifactCoordinate(
                id=f"{group}:{artifact}:{spec.raw}",
                group=group,
                artifact=artifact,
                version=spec.raw,
                classifiers=(classifier,) if classifier else (),
            )

        found, cached = self._cache.lookup(spec.token)
        if found:
            if is_debug_enabled(logger):
                logger.debug(
                    "Cache hit",
                    extra=extra_context(
                        event="cache_hit", component="resolver_chain", action="resolve", token=spec.token
                    ),
                )
            return cached

        failures = []
        for resolver in self._resolvers:
            try:
                result = resolver.resolve(group, artifact, spec, classifier)
            except TransportError as exc:
                logger.warning("Resolver %s failed: %s", resolver.name, exc)
                failures.append(exc)
                continue
            if result is not None:
                self._cache.store(spec.token, result)
                return result

        if failures and len(failures) == len(self._resolvers):
            self._last_error = failures[-1]
        logger.warning("Unable to resolve %s:%s version %s", group, artifact, version)
        return None


def default_chain(cache: Optional[ArtifactCache] = None) -> ResolverChain:
    """Chain with a single Maven Central resolver."""
    return ResolverChain([RemoteIndexResolver()], cache=cache)
