"""Jupyter kernel descriptor for running the toolkit's Jython shell as a kernel.

The descriptor layout is fixed; Jupyter substitutes ``{connection_file}`` when
it starts a session.
"""

import json
import os
import pathlib

from rapidwright_launcher.errors import DescriptorWriteError


KERNEL_FILENAME: str = "kernel.json"
KERNEL_SESSION_CLASS: str = "org.jupyterkernel.kernel.Session"
KERNEL_LANGUAGE: str = "python"
KERNEL_DISPLAY_NAME: str = "Jython 2.7"
CONNECTION_FILE_TOKEN: str = "{connection_file}"
CLASSPATH_SEPARATOR: str = ";"


def render_kernel_descriptor(*, composed: list[str], executable: str) -> str:
    """Render the descriptor text.

    :param composed: Classpath entries from :func:`~rapidwright_launcher.classpath.compose_classpath`.
    :param executable: Java executable to start the kernel with.
    :returns: Descriptor file contents.
    """

    classpath: str = CLASSPATH_SEPARATOR.join(composed)
    q = json.dumps
    return (
        "{\n"
        f' "argv": [{q(executable)},\n'
        f'          {q("-classpath")},\n'
        f"          {q(classpath)},\n"
        f"          {q(KERNEL_SESSION_CLASS)},\n"
        f'          {q("-k")}, {q(KERNEL_LANGUAGE)},\n'
        f'          {q("-f")}, {q(CONNECTION_FILE_TOKEN)}],\n'
        f' "display_name": {q(KERNEL_DISPLAY_NAME)},\n'
        f' "language": {q(KERNEL_LANGUAGE)}\n'
        "}\n"
    )


def write_kernel_descriptor(
    *,
    destination: pathlib.Path,
    composed: list[str],
    executable: str = "java",
) -> pathlib.Path:
    """Write (or overwrite) the kernel descriptor.

    The file is written in place; after a failure its contents are unknown.

    :param destination: Descriptor path.
    :param composed: Classpath entries.
    :param executable: Java executable to start the kernel with.
    :returns: Absolute path of the written descriptor.
    :raises DescriptorWriteError: If the file cannot be written.
    """

    text: str = render_kernel_descriptor(composed=composed, executable=executable)
    try:
        destination.write_text(text, encoding="utf-8")
    except OSError as e:
        raise DescriptorWriteError(f"Couldn't write kernel descriptor {destination}: {e}") from e
    return destination.absolute()


def install_guidance(descriptor_path: pathlib.Path) -> str:
    """Build the post-write instructions shown to the user.

    :param descriptor_path: Absolute descriptor path.
    :returns: Multi-line guidance text.
    """

    return (
        f"Wrote Jupyter Notebook Kernel File: '{descriptor_path}'\n"
        "\n"
        "You can install the RapidWright (Jython 2.7) kernel by running:\n"
        f"    $ jupyter kernelspec install {descriptor_path.parent}{os.sep}\n"
        "Or control the kernel installation with:\n"
        "    $ jupyter kernelspec list"
    )
