"""Tests for origin resolution."""

import sys
import types
import zipimport

import pytest

from rapidwright_launcher.errors import OriginError
from rapidwright_launcher.origin import ArchivePath, DirectoryPath, resolve_origin


class TestResolveOrigin:
    """Tests for resolve_origin."""

    def test_zipimported_module_resolves_to_archive(self, make_jar):
        jar = make_jar({"toolkit/__init__.py": b""})
        module = types.ModuleType("toolkit")
        module.__loader__ = zipimport.zipimporter(str(jar))

        assert resolve_origin(module) == ArchivePath(path=str(jar))

    def test_submodule_resolves_to_import_root(self, tmp_path):
        pkg = tmp_path / "root" / "toolkit"
        pkg.mkdir(parents=True)
        (pkg / "device.py").write_text("", encoding="utf-8")
        module = types.ModuleType("toolkit.device")
        module.__file__ = str(pkg / "device.py")

        origin = resolve_origin(module)

        assert origin == DirectoryPath(path=str((tmp_path / "root").resolve()))

    def test_package_init_resolves_to_import_root(self, tmp_path):
        pkg = tmp_path / "root" / "toolkit" / "util"
        pkg.mkdir(parents=True)
        (pkg / "__init__.py").write_text("", encoding="utf-8")
        module = types.ModuleType("toolkit.util")
        module.__file__ = str(pkg / "__init__.py")

        origin = resolve_origin(module)

        assert origin == DirectoryPath(path=str((tmp_path / "root").resolve()))

    def test_launcher_package_is_resolved_by_default(self):
        origin = resolve_origin()

        assert isinstance(origin, (ArchivePath, DirectoryPath))

    def test_module_without_file_is_an_error(self):
        module = types.ModuleType("in_memory_toolkit")

        with pytest.raises(OriginError, match="in_memory_toolkit"):
            resolve_origin(module)

    def test_builtin_module_is_an_error(self):
        with pytest.raises(OriginError):
            resolve_origin("sys")

    def test_unimportable_reference_is_an_error(self):
        with pytest.raises(OriginError, match="no_such_toolkit_module"):
            resolve_origin("no_such_toolkit_module")

    def test_frozen_executable_resolves_to_its_directory(self, tmp_path, monkeypatch):
        exe = tmp_path / "bin" / "rapidwright"
        exe.parent.mkdir()
        exe.write_bytes(b"")
        monkeypatch.setattr(sys, "frozen", True, raising=False)
        monkeypatch.setattr(sys, "executable", str(exe))
        module = types.ModuleType("toolkit")

        assert resolve_origin(module) == DirectoryPath(path=str(exe.parent.resolve()))
