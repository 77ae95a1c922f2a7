"""Unpack bundled resource folders out of the toolkit archive.

Only whole top-level folders are unpacked, and only into a destination where
none of them exist yet. Members are streamed one at a time from the archive;
nothing is rolled back if a write fails part way through.
"""

import logging
import pathlib
import shutil
import zipfile
import zlib

from rapidwright_launcher.errors import (
    AlreadyExistsError,
    UnpackIOError,
    UnsafeEntryError,
    UnsupportedOriginError,
)
from rapidwright_launcher.origin import ArchivePath, Origin


RESOURCE_FOLDERS: tuple[str, ...] = ("data", "scripts", "images")


def check_destination(*, folders: tuple[str, ...], destination_root: pathlib.Path) -> None:
    """Fail if any resource folder already exists at the destination.

    :param folders: Folder names to check, in order.
    :param destination_root: Directory the folders would be unpacked into.
    :raises AlreadyExistsError: On the first folder (or file) that already exists.
    """

    for folder in folders:
        if (destination_root / folder).exists() is True:
            raise AlreadyExistsError(folder)


def unpack_resources(
    *,
    origin: Origin,
    folders: tuple[str, ...] = RESOURCE_FOLDERS,
    destination_root: pathlib.Path,
    logger: logging.Logger,
) -> list[str]:
    """Unpack the requested top-level folders of the origin archive.

    :param origin: Resolved origin; must be an archive.
    :param folders: Top-level folder names to unpack.
    :param destination_root: Directory to unpack into.
    :param logger: Logger for per-file progress.
    :returns: Archive names of the files written, in archive order.
    :raises AlreadyExistsError: If a folder is already present at the destination.
    :raises UnsupportedOriginError: If the origin is not an archive.
    :raises UnsafeEntryError: If a matching member would escape the destination.
    :raises UnpackIOError: If reading the archive or writing a file fails.
    """

    check_destination(folders=folders, destination_root=destination_root)

    if not isinstance(origin, ArchivePath):
        raise UnsupportedOriginError(
            f"Cannot unpack resources from directory {origin.path}; "
            "resource folders are already expanded there."
        )

    names: frozenset[str] = frozenset(folders)
    prefixes: tuple[str, ...] = tuple(f"{folder}/" for folder in folders)
    extracted: list[str] = []
    seen: set[str] = set()
    try:
        with zipfile.ZipFile(origin.path, mode="r") as zf:
            for info in zf.infolist():
                name: str = info.filename
                if name not in names and name.startswith(prefixes) is False:
                    continue
                if info.is_dir() is True:
                    continue
                # Duplicate member names: the first one wins.
                if name in seen:
                    logger.warning(f"Skipping duplicate archive member {name}")
                    continue
                seen.add(name)

                out_path: pathlib.Path = destination_root.joinpath(*_safe_parts(name))
                logger.info(f"Unpacking {name}")
                out_path.parent.mkdir(parents=True, exist_ok=True)
                with zf.open(info, mode="r") as src, open(out_path, "xb") as dst:
                    shutil.copyfileobj(src, dst)
                extracted.append(name)
    except (OSError, EOFError, zlib.error, zipfile.BadZipFile) as e:
        raise UnpackIOError(f"Failed unpacking {origin.path}: {e}") from e

    return extracted


def _safe_parts(name: str) -> tuple[str, ...]:
    """Split an archive member name into path parts, refusing unsafe names.

    :param name: Archive member name.
    :returns: Relative POSIX path parts.
    :raises UnsafeEntryError: If the name is absolute, drive-like or traverses upward.
    """

    if "\\" in name:
        raise UnsafeEntryError(f"Refusing to extract backslash path: {name!r}")
    if ":" in name:
        raise UnsafeEntryError(f"Refusing to extract drive-like path: {name!r}")
    p = pathlib.PurePosixPath(name)
    if p.is_absolute() is True:
        raise UnsafeEntryError(f"Refusing to extract absolute path: {name!r}")
    if ".." in p.parts:
        raise UnsafeEntryError(f"Refusing to extract parent-traversal path: {name!r}")
    return p.parts
