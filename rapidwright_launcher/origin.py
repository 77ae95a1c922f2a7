"""Locate the code backing the running launcher.

The toolkit ships in two shapes:

- a single ``.jar`` archive that is also importable through ``zipimport``;
- an expanded directory tree whose dependencies live in a ``jars/`` folder.

:func:`resolve_origin` inspects a reference module and reports which shape is
in use and where it lives on disk.
"""

from dataclasses import dataclass
import importlib
import pathlib
import sys
import types
import zipimport

from rapidwright_launcher.errors import OriginError


REFERENCE_MODULE: str = "rapidwright_launcher"


@dataclass(frozen=True, slots=True)
class ArchivePath:
    """Origin backed by a single packaged archive file.

    :ivar path: Filesystem path of the archive.
    """

    path: str


@dataclass(frozen=True, slots=True)
class DirectoryPath:
    """Origin backed by an expanded directory tree.

    :ivar path: Filesystem path of the directory.
    """

    path: str


Origin = ArchivePath | DirectoryPath


def resolve_origin(reference: types.ModuleType | str = REFERENCE_MODULE) -> Origin:
    """Resolve where the code of ``reference`` was loaded from.

    :param reference: Module object or dotted module name.
    :returns: The archive or directory backing the module.
    :raises OriginError: If no on-disk location can be determined.
    """

    module: types.ModuleType
    if isinstance(reference, str):
        try:
            module = importlib.import_module(reference)
        except ImportError as e:
            raise OriginError(f"Couldn't import reference module {reference!r}: {e}") from e
    else:
        module = reference

    loader: object | None = getattr(module, "__loader__", None)
    if isinstance(loader, zipimport.zipimporter):
        return ArchivePath(path=loader.archive)

    if getattr(sys, "frozen", False) is True:
        return DirectoryPath(path=str(pathlib.Path(sys.executable).resolve().parent))

    file: str | None = getattr(module, "__file__", None)
    if file is None:
        raise OriginError(
            f"Couldn't locate code source for module {module.__name__!r} "
            "(no __file__; loaded from memory or builtin)."
        )

    return DirectoryPath(path=str(_import_root(module_name=module.__name__, file=file)))


def _import_root(*, module_name: str, file: str) -> pathlib.Path:
    """Compute the ``sys.path`` entry a module was imported from.

    :param module_name: Dotted module name.
    :param file: The module's ``__file__``.
    :returns: Directory containing the module's top-level package.
    """

    path: pathlib.Path = pathlib.Path(file).resolve()
    depth: int = module_name.count(".")
    if path.stem == "__init__":
        depth += 1
    return path.parents[depth]
