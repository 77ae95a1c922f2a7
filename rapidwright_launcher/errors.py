"""Launcher error types."""


class LauncherError(RuntimeError):
    """Base class for failures that end the current launcher invocation."""


class OriginError(LauncherError):
    """Raised when the on-disk location of the running code cannot be determined."""


class UnpackError(LauncherError):
    """Raised when resource folders cannot be unpacked."""


class AlreadyExistsError(UnpackError):
    """Raised when a resource folder is already present at the destination.

    :ivar folder: Name of the conflicting folder.
    """

    def __init__(self, folder: str) -> None:
        super().__init__(
            f"Couldn't unpack ./{folder}/ directory, file/directory already exists."
        )
        self.folder: str = folder


class UnsupportedOriginError(UnpackError):
    """Raised when the origin is a directory rather than an archive."""


class UnpackIOError(UnpackError):
    """Raised when reading the archive or writing a file fails."""


class UnsafeEntryError(UnpackError):
    """Raised when an archive member would land outside the destination."""


class DescriptorWriteError(LauncherError):
    """Raised when the kernel descriptor cannot be written."""


class ShellLaunchError(LauncherError):
    """Raised when the shell process cannot be started."""
