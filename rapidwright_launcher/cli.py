"""Command line entry point for the RapidWright launcher.

The first recognized launcher option wins; everything else is handed to the
Jython shell untouched:

- ``--unpack_data``: unpack the bundled resource folders into the current directory.
- ``--create_jupyter_kernel``: write ``kernel.json`` into the current directory.
- no arguments: start an interactive shell with the common classes imported.
"""

import logging
import pathlib
import sys

from rapidwright_launcher import FRAMEWORK_NAME, __version__
from rapidwright_launcher.classpath import compose_classpath
from rapidwright_launcher.config import LauncherConfig, load_config
from rapidwright_launcher.errors import LauncherError, OriginError, UnpackError
from rapidwright_launcher.host import is_windows
from rapidwright_launcher.kernel import KERNEL_FILENAME, install_guidance, write_kernel_descriptor
from rapidwright_launcher.origin import Origin, resolve_origin
from rapidwright_launcher.shell import SHELL_VERSION, default_shell_args, launch_shell
from rapidwright_launcher.unpack import RESOURCE_FOLDERS, unpack_resources


UNPACK_OPTION_NAME: str = "--unpack_data"
CREATE_JUPYTER_KERNEL: str = "--create_jupyter_kernel"


def _configure_logging(*, verbose: int, quiet: int) -> logging.Logger:
    """Configure the launcher logger.

    :param verbose: Verbosity count (0+).
    :param quiet: Quietness count (0+).
    :returns: Configured logger.
    """

    level: int = logging.INFO
    if quiet >= 1:
        level = logging.WARNING
    elif verbose >= 1:
        level = logging.DEBUG

    logger: logging.Logger = logging.getLogger("rapidwright_launcher")
    logger.setLevel(level)
    logger.propagate = False

    handler: logging.Handler = logging.StreamHandler(stream=sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger.handlers.clear()
    logger.addHandler(handler)
    return logger


def main(argv: list[str] | None = None) -> int:
    """Run the launcher.

    :param argv: Optional argv list (excluding program name).
    :returns: Exit code.
    """

    args: list[str] = list(sys.argv[1:] if argv is None else argv)
    config: LauncherConfig = load_config()
    logger: logging.Logger = _configure_logging(verbose=config.verbose, quiet=config.quiet)

    try:
        return dispatch(args, config=config, logger=logger)
    except LauncherError as e:
        logger.error(f"ERROR: {e}")
        return 1


def dispatch(args: list[str], *, config: LauncherConfig, logger: logging.Logger) -> int:
    """Route the arguments to unpacking, kernel generation or the shell.

    :param args: Command line arguments (excluding program name).
    :param config: Launcher configuration.
    :param logger: Configured logger.
    :returns: Exit code.
    :raises LauncherError: If the selected action fails.
    """

    if len(args) == 0:
        shell_args: list[str] = default_shell_args()
        logger.info(f"{FRAMEWORK_NAME} {__version__} (Jython {SHELL_VERSION})")
        return _run_shell(shell_args, config=config, logger=logger)

    for arg in args:
        if arg == UNPACK_OPTION_NAME:
            return _unpack_data(logger=logger)
        if arg == CREATE_JUPYTER_KERNEL:
            return _create_jupyter_kernel(config=config, logger=logger)

    return _run_shell(args, config=config, logger=logger)


def _unpack_data(*, logger: logging.Logger) -> int:
    cwd: pathlib.Path = pathlib.Path.cwd()
    try:
        origin: Origin = resolve_origin()
        unpack_resources(
            origin=origin,
            folders=RESOURCE_FOLDERS,
            destination_root=cwd,
            logger=logger,
        )
    except (OriginError, UnpackError) as e:
        logger.error(str(e))
        raise UnpackError("Couldn't unpack ./data directory from RapidWright jar.") from e

    print(
        f"Successfully unpacked {FRAMEWORK_NAME} jar data.  Please set the environment "
        "variable RAPIDWRIGHT_PATH to the directory which contains the recently "
        f"expanded data directory (current directory={cwd})."
    )
    return 0


def _create_jupyter_kernel(*, config: LauncherConfig, logger: logging.Logger) -> int:
    try:
        origin: Origin = resolve_origin()
    except OriginError as e:
        raise OriginError(
            f"Couldn't identify classpath for running {FRAMEWORK_NAME} ({e}). "
            "Set the CLASSPATH correctly and write the kernel file by hand."
        ) from e

    composed: list[str] = compose_classpath(
        origin=origin,
        is_windows_platform=is_windows(),
        logger=logger,
    )
    written: pathlib.Path = write_kernel_descriptor(
        destination=pathlib.Path(KERNEL_FILENAME),
        composed=composed,
        executable=config.java,
    )
    print(install_guidance(written))
    return 0


def _run_shell(args: list[str], *, config: LauncherConfig, logger: logging.Logger) -> int:
    origin: Origin = resolve_origin()
    classpath: list[str] = compose_classpath(
        origin=origin,
        is_windows_platform=is_windows(),
        logger=logger,
    )
    return launch_shell(args, classpath=classpath, executable=config.java, logger=logger)
