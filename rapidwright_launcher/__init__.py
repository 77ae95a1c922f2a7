"""rapidwright-launcher.

Launch-time bootstrapper for the RapidWright toolkit: unpacks bundled resource
folders, writes a Jupyter kernel descriptor and starts the Jython shell.
"""

__all__: list[str] = ["FRAMEWORK_NAME", "__version__"]

FRAMEWORK_NAME: str = "RapidWright"

__version__: str = "2018.2.0"
