"""Platform/architecture to artifact classifier mapping.

OpenJFX publishes one jar per platform, distinguished by a classifier such as
``linux-aarch64`` or ``win``. The mapping is kept as data: adding a platform
means adding table rows, not branches.
"""

import platform as _host
from enum import Enum
from typing import Dict, Tuple

from fxdeps.errors import UnsupportedPlatform


class Platform(Enum):
    """Operating system families."""
    LINUX = "linux"
    SOLARIS = "solaris"
    FREE_BSD = "freebsd"
    MACOS = "macos"
    WINDOWS = "windows"
    UNKNOWN = "unknown"

    @classmethod
    def from_name(cls, name: str) -> "Platform":
        """Look up a platform by name or common alias, case-insensitively."""
        key = str(name).strip().lower().replace("_", "").replace("-", "").replace(" ", "")
        try:
            return _PLATFORM_ALIASES[key]
        except KeyError:
            raise UnsupportedPlatform(f"Unknown platform: {name!r}") from None


class Architecture(Enum):
    """CPU architectures."""
    X86 = "x86"
    X64 = "x64"
    ARM = "arm"
    ARM32 = "arm32"
    UNKNOWN = "unknown"

    @classmethod
    def from_name(cls, name: str) -> "Architecture":
        """Look up an architecture by name or common alias, case-insensitively."""
        key = str(name).strip().lower().replace("-", "_")
        try:
            return _ARCH_ALIASES[key]
        except KeyError:
            raise UnsupportedPlatform(f"Unknown architecture: {name!r}") from None


_PLATFORM_ALIASES: Dict[str, Platform] = {
    "linux": Platform.LINUX,
    "solaris": Platform.SOLARIS,
    "sunos": Platform.SOLARIS,
    "freebsd": Platform.FREE_BSD,
    "macos": Platform.MACOS,
    "mac": Platform.MACOS,
    "osx": Platform.MACOS,
    "darwin": Platform.MACOS,
    "windows": Platform.WINDOWS,
    "win": Platform.WINDOWS,
    "win32": Platform.WINDOWS,
    "unknown": Platform.UNKNOWN,
}

_ARCH_ALIASES: Dict[str, Architecture] = {
    "x86": Architecture.X86,
    "i386": Architecture.X86,
    "i686": Architecture.X86,
    "x64": Architecture.X64,
    "x86_64": Architecture.X64,
    "amd64": Architecture.X64,
    "arm": Architecture.ARM,
    "arm64": Architecture.ARM,
    "aarch64": Architecture.ARM,
    "arm32": Architecture.ARM32,
    "armv7l": Architecture.ARM32,
    "unknown": Architecture.UNKNOWN,
}

# Platform -> (classifier for 64-bit ARM, classifier for anything else)
_CLASSIFIERS: Dict[Platform, Tuple[str, str]] = {
    Platform.LINUX: ("linux-aarch64", "linux"),
    Platform.SOLARIS: ("linux-aarch64", "linux"),
    Platform.FREE_BSD: ("linux-aarch64", "linux"),
    Platform.MACOS: ("mac-aarch64", "mac"),
    Platform.WINDOWS: ("win", "win"),
}

# Same shape, used to name downloadable SDK bundles.
_ARCHIVE_SUFFIXES: Dict[Platform, Tuple[str, str]] = {
    Platform.LINUX: ("linux-aarch_64", "linux-x86_64"),
    Platform.SOLARIS: ("linux-aarch_64", "linux-x86_64"),
    Platform.FREE_BSD: ("linux-aarch_64", "linux-x86_64"),
    Platform.MACOS: ("osx-aarch_64", "osx-x86_64"),
    Platform.WINDOWS: ("windows-x86_64", "windows-x86_64"),
}


def _lookup(table: Dict[Platform, Tuple[str, str]], platform: Platform, architecture: Architecture) -> str:
    try:
        arm, other = table[platform]
    except KeyError:
        raise UnsupportedPlatform(f"Platform not supported: {platform.value}") from None
    return arm if architecture is Architecture.ARM else other


def resolve_classifier(platform: Platform, architecture: Architecture) -> str:
    """Artifact classifier for the given platform and architecture.

    Raises:
        UnsupportedPlatform: If the platform has no published artifacts.
    """
    return _lookup(_CLASSIFIERS, platform, architecture)


def resolve_archive_suffix(platform: Platform, architecture: Architecture) -> str:
    """Suffix used in downloadable bundle names, e.g. ``osx-aarch_64``."""
    return _lookup(_ARCHIVE_SUFFIXES, platform, architecture)


def running_platform() -> Platform:
    """Platform of the current interpreter; UNKNOWN when unrecognized."""
    try:
        return Platform.from_name(_host.system())
    except UnsupportedPlatform:
        return Platform.UNKNOWN


def running_architecture() -> Architecture:
    """Architecture of the current interpreter; UNKNOWN when unrecognized."""
    try:
        return Architecture.from_name(_host.machine())
    except UnsupportedPlatform:
        return Architecture.UNKNOWN
