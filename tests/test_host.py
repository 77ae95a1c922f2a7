"""Tests for host platform helpers."""

import types

from rapidwright_launcher import host
from rapidwright_launcher.host import (
    LINUX_VARIANT_MARKER,
    WINDOWS_VARIANT_MARKER,
    foreign_variant_marker,
    is_windows,
)


class TestHost:
    """Tests for platform detection."""

    def test_is_windows_follows_os_name(self, monkeypatch):
        monkeypatch.setattr(host, "os", types.SimpleNamespace(name="nt"))
        assert is_windows() is True

        monkeypatch.setattr(host, "os", types.SimpleNamespace(name="posix"))
        assert is_windows() is False

    def test_foreign_variant_marker(self):
        assert foreign_variant_marker(is_windows_platform=True) == LINUX_VARIANT_MARKER
        assert foreign_variant_marker(is_windows_platform=False) == WINDOWS_VARIANT_MARKER
