"""Single source of truth for the eqcheck version."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

DISTRIBUTION = "eqcheck"


def get_version() -> str:
    """Get version from the source checkout's pyproject.toml or installed metadata."""
    pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    if version := version_from_pyproject(pyproject):
        return version
    try:
        return _metadata_version(DISTRIBUTION)
    except PackageNotFoundError:
        return "0.0.0"


def version_from_pyproject(path: Path) -> str | None:
    """Return the version declared in path, only if it is eqcheck's own pyproject."""
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError):
        return None
    project = data.get("project", {})
    if not isinstance(project, dict) or project.get("name") != DISTRIBUTION:
        return None
    version = project.get("version")
    return version if isinstance(version, str) else None
