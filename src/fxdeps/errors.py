"""Exception types raised by the resolution engine."""

from typing import Optional


class FxdepsError(Exception):
    """Base class for all engine errors."""


class UnsupportedPlatform(FxdepsError, ValueError):
    """Platform or architecture has no artifact classifier."""


class UnknownModule(FxdepsError, ValueError):
    """Module name is not part of the catalog."""


class TransportError(FxdepsError):
    """HTTP/network failure or an undecodable response body."""

    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.status_code = status_code


class CannotResolveVersion(FxdepsError):
    """A symbolic version could not be turned into a published version."""

    def __init__(self, group: str, artifact: str, version: str, cause: Optional[TransportError] = None):
        message = f"Cannot resolve version {version!r} for {group}:{artifact}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.cause = cause
        self.group = group
        self.artifact = artifact
        self.version = version
