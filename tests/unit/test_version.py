"""Tests for version lookup."""

import tomllib
from pathlib import Path

from eqcheck import __version__
from eqcheck._version import get_version, version_from_pyproject

PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def test_source_checkout_version() -> None:
    declared = tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))["project"]["version"]
    assert get_version() == declared
    assert __version__ == declared


def test_own_pyproject(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "eqcheck"\nversion = "2.3.4"\n')
    assert version_from_pyproject(path) == "2.3.4"


def test_foreign_pyproject_is_ignored(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "something-else"\nversion = "9.9.9"\n')
    assert version_from_pyproject(path) is None


def test_missing_or_broken_pyproject(tmp_path: Path) -> None:
    assert version_from_pyproject(tmp_path / "pyproject.toml") is None
    broken = tmp_path / "broken.toml"
    broken.write_text("[project\n")
    assert version_from_pyproject(broken) is None
