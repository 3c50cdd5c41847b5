"""
Version management for typetags.

The version is read from pyproject.toml, which serves as the single source
of truth. Installed copies without the file fall back to a fixed version.
"""

from pathlib import Path

import tomli

_FALLBACK_VERSION = "0.1.0"


def _find_pyproject() -> Path:
    """
    Locate pyproject.toml next to the package, or in the working directory.

    Returns:
        Path: Candidate path to pyproject.toml (may not exist)
    """
    project_root = Path(__file__).resolve().parent.parent
    candidate = project_root / "pyproject.toml"
    if candidate.exists():
        return candidate
    return Path.cwd() / "pyproject.toml"


PYPROJECT_PATH = _find_pyproject()


def get_version_from_pyproject() -> str:
    """
    Read the version string from pyproject.toml.

    Returns:
        str: Version string, or the fallback version when the file is
        missing, unreadable, or belongs to another project
    """
    try:
        with open(PYPROJECT_PATH, "rb") as f:
            pyproject_data = tomli.load(f)
    except (FileNotFoundError, tomli.TOMLDecodeError):
        return _FALLBACK_VERSION

    project = pyproject_data.get("project", {})
    if project.get("name") != "typetags":
        return _FALLBACK_VERSION
    return project.get("version", _FALLBACK_VERSION)


__version__ = get_version_from_pyproject()


def get_version() -> str:
    """Get the current version of the typetags package."""
    return __version__
