"""Shared test fixtures for cornerwise."""

from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def categories_path():
    """Return the path to the sample category table fixture."""
    return FIXTURES_DIR / "categories.json"
