"""Version specs, resolution models and the resolved-artifact cache."""

from .cache import ArtifactCache
from .models import ArtifactCoordinate, ConfigurationState, ReconcileResult, ResolutionRequest, VersionSpec
from .parser import extract_token, is_special_case, parse_version

__all__ = [
    "ArtifactCache",
    "ArtifactCoordinate",
    "ConfigurationState",
    "ReconcileResult",
    "ResolutionRequest",
    "VersionSpec",
    "extract_token",
    "is_special_case",
    "parse_version",
]
