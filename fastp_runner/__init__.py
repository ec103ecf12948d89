__all__ = ["__version__"]

# Version comes from the installed distribution metadata.
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("run-fastp")
except PackageNotFoundError:  # running from a source checkout without an install
    __version__ = "0.0.0"
