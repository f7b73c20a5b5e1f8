"""
UpGuard CLI - command-line client for the UpGuard node API.

This package provides an authenticated request dispatcher, page-number
pagination for list endpoints, and a CLI for listing nodes and node groups.
"""

import importlib.metadata
from pathlib import Path

# Defaults
__version__ = "unknown"
__author__ = "UpGuard CLI Contributors"
__license__ = "MIT"


def _read_pyproject_toml():
    """Read and parse pyproject.toml file."""
    try:
        import tomllib  # Python 3.11+
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # Python 3.9-3.10
        except ModuleNotFoundError:
            return None

    pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject_path.exists():
        with open(pyproject_path, "rb") as f:
            return tomllib.load(f)
    return None


# Try to get version from installed package metadata
try:
    __version__ = importlib.metadata.version("upguard-cli")
except importlib.metadata.PackageNotFoundError:
    # Fallback: read from pyproject.toml
    pyproject_data = _read_pyproject_toml()
    if pyproject_data:
        __version__ = pyproject_data.get("project", {}).get("version", __version__)

__all__ = ['__version__', '__author__', '__license__']
