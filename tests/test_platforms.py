"""Tests for platform classifier mapping."""

from unittest.mock import patch

import pytest

from fxdeps.errors import UnsupportedPlatform
from fxdeps.platforms import (
    Architecture,
    Platform,
    resolve_archive_suffix,
    resolve_classifier,
    running_architecture,
    running_platform,
)


class TestResolveClassifier:
    """Classifier table lookups."""

    @pytest.mark.parametrize("platform,arch,expected", [
        (Platform.LINUX, Architecture.ARM, "linux-aarch64"),
        (Platform.LINUX, Architecture.X64, "linux"),
        (Platform.SOLARIS, Architecture.X86, "linux"),
        (Platform.FREE_BSD, Architecture.ARM, "linux-aarch64"),
        (Platform.MACOS, Architecture.ARM, "mac-aarch64"),
        (Platform.MACOS, Architecture.X64, "mac"),
        (Platform.WINDOWS, Architecture.ARM, "win"),
        (Platform.WINDOWS, Architecture.X86, "win"),
        (Platform.WINDOWS, Architecture.UNKNOWN, "win"),
    ])
    def test_table(self, platform, arch, expected):
        assert resolve_classifier(platform, arch) == expected

    def test_arm32_is_not_aarch64(self):
        assert resolve_classifier(Platform.LINUX, Architecture.ARM32) == "linux"

    def test_unknown_platform_is_unsupported(self):
        with pytest.raises(UnsupportedPlatform):
            resolve_classifier(Platform.UNKNOWN, Architecture.X64)

    def test_pure(self):
        assert resolve_classifier(Platform.MACOS, Architecture.ARM) == resolve_classifier(
            Platform.MACOS, Architecture.ARM
        )


class TestArchiveSuffix:
    """Bundle naming suffixes."""

    @pytest.mark.parametrize("platform,arch,expected", [
        (Platform.LINUX, Architecture.ARM, "linux-aarch_64"),
        (Platform.LINUX, Architecture.X64, "linux-x86_64"),
        (Platform.MACOS, Architecture.ARM, "osx-aarch_64"),
        (Platform.MACOS, Architecture.X64, "osx-x86_64"),
        (Platform.WINDOWS, Architecture.ARM, "windows-x86_64"),
    ])
    def test_table(self, platform, arch, expected):
        assert resolve_archive_suffix(platform, arch) == expected

    def test_unknown_platform(self):
        with pytest.raises(UnsupportedPlatform):
            resolve_archive_suffix(Platform.UNKNOWN, Architecture.ARM)


class TestNameLookup:
    """Platform and architecture aliases."""

    @pytest.mark.parametrize("name,expected", [
        ("Linux", Platform.LINUX),
        ("Darwin", Platform.MACOS),
        ("osx", Platform.MACOS),
        ("Windows", Platform.WINDOWS),
        ("FREE_BSD", Platform.FREE_BSD),
        ("SunOS", Platform.SOLARIS),
    ])
    def test_platform_aliases(self, name, expected):
        assert Platform.from_name(name) == expected

    @pytest.mark.parametrize("name,expected", [
        ("aarch64", Architecture.ARM),
        ("ARM64", Architecture.ARM),
        ("AMD64", Architecture.X64),
        ("x86_64", Architecture.X64),
        ("i686", Architecture.X86),
    ])
    def test_architecture_aliases(self, name, expected):
        assert Architecture.from_name(name) == expected

    def test_unknown_platform_name(self):
        with pytest.raises(UnsupportedPlatform):
            Platform.from_name("amiga")

    def test_unknown_architecture_name(self):
        with pytest.raises(UnsupportedPlatform):
            Architecture.from_name("mips")


class TestHostDetection:
    """Detection of the running host."""

    @patch("fxdeps.platforms._host.system", return_value="Linux")
    def test_running_platform(self, _system):
        assert running_platform() == Platform.LINUX

    @patch("fxdeps.platforms._host.system", return_value="Haiku")
    def test_running_platform_unknown(self, _system):
        assert running_platform() == Platform.UNKNOWN

    @patch("fxdeps.platforms._host.machine", return_value="arm64")
    def test_running_architecture(self, _machine):
        assert running_architecture() == Architecture.ARM

    @patch("fxdeps.platforms._host.machine", return_value="riscv64")
    def test_running_architecture_unknown(self, _machine):
        assert running_architecture() == Architecture.UNKNOWN
