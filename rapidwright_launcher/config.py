"""Launcher configuration.

Command-line arguments are handed to the shell, so the launcher's own knobs
come from the environment:

- ``RAPIDWRIGHT_LAUNCHER_JAVA``: Java executable (default ``java``).
- ``RAPIDWRIGHT_LAUNCHER_VERBOSE``: enable debug logging.
- ``RAPIDWRIGHT_LAUNCHER_QUIET``: only log warnings and errors.
"""

from collections.abc import Mapping
from dataclasses import dataclass
import os


DEFAULT_JAVA: str = "java"


@dataclass(frozen=True, slots=True)
class LauncherConfig:
    """Resolved launcher configuration.

    :ivar java: Java executable used for the shell and the kernel descriptor.
    :ivar verbose: Verbosity count (0+).
    :ivar quiet: Quietness count (0+).
    """

    java: str
    verbose: int
    quiet: int


def _parse_env_bool(value: str) -> bool | None:
    """Parse a string into a boolean.

    :param value: Raw environment variable string.
    :returns: Parsed boolean, or ``None`` if unknown.
    """

    v: str = value.strip().lower()
    if v in {"1", "true", "yes", "on"}:
        return True
    if v in {"0", "false", "no", "off"}:
        return False
    return None


def _env_flag(environ: Mapping[str, str], name: str) -> int:
    raw: str | None = environ.get(name)
    if raw is None or len(raw) == 0:
        return 0
    return 1 if _parse_env_bool(raw) is True else 0


def load_config(environ: Mapping[str, str] | None = None) -> LauncherConfig:
    """Build the launcher configuration from environment variables.

    :param environ: Environment mapping; defaults to ``os.environ``.
    :returns: Resolved configuration.
    """

    env: Mapping[str, str] = os.environ if environ is None else environ

    java: str = env.get("RAPIDWRIGHT_LAUNCHER_JAVA", "").strip()
    if len(java) == 0:
        java = DEFAULT_JAVA

    return LauncherConfig(
        java=java,
        verbose=_env_flag(env, "RAPIDWRIGHT_LAUNCHER_VERBOSE"),
        quiet=_env_flag(env, "RAPIDWRIGHT_LAUNCHER_QUIET"),
    )
