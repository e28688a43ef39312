"""Base interface for repository resolvers."""

from abc import ABC, abstractmethod
from typing import Optional

from fxdeps.versioning.models import ArtifactCoordinate, VersionSpec


class RepositoryResolver(ABC):
    """Resolves a (possibly symbolic) version against one backing index."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short name used in logs."""

    @abstractmethod
    def resolve(
        self,
        group: str,
        artifact: str,
        spec: VersionSpec,
        classifier: Optional[str] = None,
    ) -> Optional[ArtifactCoordinate]:
        """Return the matching published artifact, or None when not found.

        Implementations may raise ``TransportError``; the chain treats it as
        not found.
        """
