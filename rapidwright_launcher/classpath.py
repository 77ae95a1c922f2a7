"""Compose the classpath needed to re-invoke the toolkit in a subprocess."""

import logging
import os
import pathlib

from rapidwright_launcher.host import foreign_variant_marker, to_windows_path
from rapidwright_launcher.origin import Origin


ARCHIVE_SUFFIX: str = ".jar"
JARS_FOLDER_NAME: str = "jars"
DOC_MARKER: str = "javadoc"


def is_single_archive(location: str) -> bool:
    """Return whether a location names a single packaged archive.

    :param location: Rendered origin path.
    :returns: ``True`` if it ends in the archive suffix (any case).
    """

    return location.lower().endswith(ARCHIVE_SUFFIX)


def compose_classpath(
    *,
    origin: Origin,
    is_windows_platform: bool,
    logger: logging.Logger,
) -> list[str]:
    """Compose the ordered classpath entries for an origin.

    A single archive is its own classpath. Otherwise the origin directory comes
    first, followed by the jars found in its ``jars/`` folder, in the order the
    filesystem lists them (not sorted). Jars built for the other platform and
    javadoc jars are skipped.

    :param origin: Resolved origin.
    :param is_windows_platform: Whether the classpath targets Windows.
    :param logger: Logger for diagnostics.
    :returns: Classpath entries, origin first.
    """

    location: str = origin.path
    if is_windows_platform is True:
        location = to_windows_path(location)

    if is_single_archive(location) is True:
        return [location]

    entries: list[str] = [location]
    jar_dir: pathlib.Path = pathlib.Path(origin.path).absolute() / JARS_FOLDER_NAME
    if jar_dir.is_dir() is False:
        logger.error(
            f"ERROR: Couldn't read {jar_dir} directory, please check RapidWright installation."
        )
        return entries

    skip_marker: str = foreign_variant_marker(is_windows_platform=is_windows_platform)
    try:
        names: list[str] = os.listdir(jar_dir)
    except OSError as e:
        logger.error(f"ERROR: Couldn't read {jar_dir} directory ({e}), please check RapidWright installation.")
        return entries

    for name in names:
        if skip_marker in name:
            continue
        if DOC_MARKER in name:
            continue
        entries.append(str(jar_dir / name))

    if logger.isEnabledFor(logging.DEBUG) is True:
        logger.debug(f"rapidwright-launcher: classpath has {len(entries)} entries")
    return entries
