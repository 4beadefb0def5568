"""
Packaging layout: the service runs from backend/ and is never installed
as top-level app/api/utils modules.
"""

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


@pytest.fixture(scope="module")
def pyproject():
    with PYPROJECT.open("rb") as fh:
        return tomllib.load(fh)


def test_no_top_level_modules_installed(pyproject):
    setuptools = pyproject["tool"]["setuptools"]
    assert setuptools["packages"] == []
    assert setuptools["py-modules"] == []


def test_tests_import_from_backend(pyproject):
    assert pyproject["tool"]["pytest"]["ini_options"]["pythonpath"] == ["backend"]
