"""Start the toolkit's interactive Jython shell.

The shell runs in a child JVM. With no user arguments it is started
interactively with the most commonly used toolkit classes already imported.
"""

import logging
import os
import subprocess

from rapidwright_launcher.errors import ShellLaunchError


SHELL_MAIN_CLASS: str = "org.python.util.jython"
SHELL_VERSION: str = "2.7"
INTERACTIVE_FLAG: str = "-i"
COMMAND_FLAG: str = "-c"

PRIMER_SYMBOLS: tuple[str, ...] = (
    "com.xilinx.rapidwright.debug.DesignInstrumentor",
    "com.xilinx.rapidwright.design.Cell",
    "com.xilinx.rapidwright.design.Design",
    "com.xilinx.rapidwright.design.Module",
    "com.xilinx.rapidwright.design.ModuleInst",
    "com.xilinx.rapidwright.design.ModuleCache",
    "com.xilinx.rapidwright.design.Net",
    "com.xilinx.rapidwright.design.NetType",
    "com.xilinx.rapidwright.design.SitePinInst",
    "com.xilinx.rapidwright.device.PIP",
    "com.xilinx.rapidwright.design.Port",
    "com.xilinx.rapidwright.design.PortType",
    "com.xilinx.rapidwright.design.SiteInst",
    "com.xilinx.rapidwright.design.blocks.PBlock",
    "com.xilinx.rapidwright.device.ClockRegion",
    "com.xilinx.rapidwright.device.Device",
    "com.xilinx.rapidwright.device.BELClass",
    "com.xilinx.rapidwright.device.BEL",
    "com.xilinx.rapidwright.device.FamilyType",
    "com.xilinx.rapidwright.device.Grade",
    "com.xilinx.rapidwright.device.IntentCode",
    "com.xilinx.rapidwright.device.Node",
    "com.xilinx.rapidwright.device.Package",
    "com.xilinx.rapidwright.device.Part",
    "com.xilinx.rapidwright.device.PIPType",
    "com.xilinx.rapidwright.device.Series",
    "com.xilinx.rapidwright.device.Site",
    "com.xilinx.rapidwright.device.SiteTypeEnum",
    "com.xilinx.rapidwright.device.SLR",
    "com.xilinx.rapidwright.device.Tile",
    "com.xilinx.rapidwright.device.TileTypeEnum",
    "com.xilinx.rapidwright.device.Wire",
    "com.xilinx.rapidwright.util.Utils",
    "com.xilinx.rapidwright.device.browser.DeviceBrowser",
    "com.xilinx.rapidwright.edif.EDIFNetlist",
    "com.xilinx.rapidwright.edif.EDIFTools",
    "com.xilinx.rapidwright.examples.AddSubGenerator",
    "com.xilinx.rapidwright.examples.PolynomialGenerator",
    "com.xilinx.rapidwright.examples.SLRCrosserGenerator",
    "com.xilinx.rapidwright.ipi.BlockCreator",
    "com.xilinx.rapidwright.placer.handplacer.HandPlacer",
    "com.xilinx.rapidwright.router.Router",
    "com.xilinx.rapidwright.tests.CodePerfTracker",
    "com.xilinx.rapidwright.design.Unisim",
    "com.xilinx.rapidwright.util.FileTools",
    "com.xilinx.rapidwright.util.DeviceTools",
    "com.xilinx.rapidwright.device.PartNameTools",
    "com.xilinx.rapidwright.util.PerformanceExplorer",
    "com.xilinx.rapidwright.util.StringTools",
    "com.xilinx.rapidwright.design.DesignTools",
    "com.xilinx.rapidwright.design.tools.LUTTools",
)


def build_preamble(symbols: tuple[str, ...] = PRIMER_SYMBOLS) -> str:
    """Build the import command run when the shell starts.

    :param symbols: Fully-qualified class names, in import order.
    :returns: One ``from <pkg> import <Name>;`` statement per symbol.
    """

    statements: list[str] = []
    for qualified in symbols:
        package, _, name = qualified.rpartition(".")
        statements.append(f"from {package} import {name};")
    return "".join(statements)


def default_shell_args() -> list[str]:
    """Return the shell arguments used when the launcher gets none."""

    return [INTERACTIVE_FLAG, COMMAND_FLAG, build_preamble()]


def launch_shell(
    args: list[str],
    *,
    classpath: list[str],
    executable: str,
    logger: logging.Logger,
) -> int:
    """Run the Jython shell and wait for it to exit.

    :param args: Arguments for the shell itself.
    :param classpath: Classpath entries for the JVM.
    :param executable: Java executable.
    :param logger: Logger for debug output.
    :returns: The shell's exit code.
    :raises ShellLaunchError: If the executable cannot be started.
    """

    cmd: list[str] = [executable, "-classpath", os.pathsep.join(classpath), SHELL_MAIN_CLASS, *args]
    if logger.isEnabledFor(logging.DEBUG) is True:
        logger.debug(f"rapidwright-launcher: running shell: {' '.join(cmd)}")

    try:
        proc = subprocess.run(cmd, check=False)
    except OSError as e:
        raise ShellLaunchError(f"Couldn't start {executable!r}: {e}") from e
    return proc.returncode
