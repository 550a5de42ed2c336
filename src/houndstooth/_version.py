"""Installed version of houndstooth."""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version


def get_version() -> str:
    """Get version from the installed distribution metadata."""
    try:
        return _metadata_version("houndstooth")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = get_version()
