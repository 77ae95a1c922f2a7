"""Host platform helpers.

Jar files shipped next to an expanded checkout carry a platform variant marker
in their name (``-linux64-`` or ``-win64-``). Only jars matching the host (or
carrying no marker) belong on the classpath.
"""

import os


LINUX_VARIANT_MARKER: str = "-linux64-"
WINDOWS_VARIANT_MARKER: str = "-win64-"


def is_windows() -> bool:
    """Return whether the launcher runs on Windows.

    :returns: ``True`` on Windows hosts.
    """

    return os.name == "nt"


def foreign_variant_marker(*, is_windows_platform: bool) -> str:
    """Return the variant marker that does *not* match the given platform.

    :param is_windows_platform: Whether the target platform is Windows.
    :returns: Marker of jars to leave off the classpath.
    """

    if is_windows_platform is True:
        return LINUX_VARIANT_MARKER
    return WINDOWS_VARIANT_MARKER


def to_windows_path(path: str) -> str:
    """Convert a forward-slash path into Windows form.

    A single leading slash (as in ``/C:/tools/rw``) is dropped first.

    :param path: Forward-slash path.
    :returns: Back-slash path.
    """

    if path.startswith("/") is True:
        path = path[1:]
    return path.replace("/", "\\")
