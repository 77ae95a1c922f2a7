"""Shared pytest fixtures for rapidwright-launcher tests."""

from __future__ import annotations

from collections.abc import Callable
import logging
from pathlib import Path
import zipfile

import pytest


@pytest.fixture
def logger() -> logging.Logger:
    """Logger that propagates to pytest's caplog."""
    log = logging.getLogger("rapidwright_launcher_tests")
    log.setLevel(logging.DEBUG)
    return log


@pytest.fixture
def make_jar(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a synthetic toolkit jar.

    Keys ending in ``/`` become directory entries.
    """

    def _make(members: dict[str, bytes], name: str = "rapidwright.jar") -> Path:
        jar_path = tmp_path / "dist" / name
        jar_path.parent.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(jar_path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            for arcname, data in members.items():
                if arcname.endswith("/"):
                    zf.writestr(zipfile.ZipInfo(arcname), b"")
                else:
                    zf.writestr(arcname, data)
        return jar_path

    return _make


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty working directory the test runs in."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def make_corrupt_jar(make_jar: Callable[..., Path]) -> Callable[..., Path]:
    """Factory writing a jar whose ``member`` has a damaged deflate stream."""

    def _make(member: str = "data/a.txt") -> Path:
        jar_path = make_jar({member: b"resource line\n" * 512})
        with zipfile.ZipFile(jar_path) as zf:
            info = zf.getinfo(member)
        raw = bytearray(jar_path.read_bytes())
        # Local file header: 30 fixed bytes, then name and extra field.
        start = info.header_offset
        name_len = int.from_bytes(raw[start + 26 : start + 28], "little")
        extra_len = int.from_bytes(raw[start + 28 : start + 30], "little")
        data_start = start + 30 + name_len + extra_len
        raw[data_start : data_start + 20] = b"\xff" * 20
        jar_path.write_bytes(bytes(raw))
        return jar_path

    return _make
