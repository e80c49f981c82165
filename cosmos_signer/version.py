"""
Version information for the cosmos-signer SDK.

Installed distributions report the version from their metadata. Source
checkouts have no metadata, so the ``[project]`` table of the adjacent
pyproject.toml is read instead.
"""
import importlib.metadata
import pathlib
from typing import Optional

import tomli

DISTRIBUTION_NAME = "cosmos-signer-sdk"
PYPROJECT_PATH = pathlib.Path(__file__).parent.parent / "pyproject.toml"
UNKNOWN_VERSION = "0.0.0"


def pyproject_version(path: Optional[pathlib.Path] = None) -> Optional[str]:
    """Return ``project.version`` from ``path``, or None when it cannot be read."""
    try:
        with open(path or PYPROJECT_PATH, "rb") as f:
            data = tomli.load(f)
    except (OSError, tomli.TOMLDecodeError):
        return None
    version = data.get("project", {}).get("version")
    return version if isinstance(version, str) else None


def get_version() -> str:
    try:
        return importlib.metadata.version(DISTRIBUTION_NAME)
    except importlib.metadata.PackageNotFoundError:
        return pyproject_version() or UNKNOWN_VERSION


__version__ = get_version()
