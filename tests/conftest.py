import pytest
from pathlib import Path

from euro_airspace.models import AirspaceDatabase


@pytest.fixture
def test_assets_dir() -> Path:
    """Return the path to the test assets directory."""
    return Path(__file__).parent / 'assets'


@pytest.fixture
def openair_file(test_assets_dir) -> Path:
    return test_assets_dir / 'sample_openair.txt'


@pytest.fixture
def tnp_file(test_assets_dir) -> Path:
    return test_assets_dir / 'sample_tnp.txt'


@pytest.fixture
def unknown_file(test_assets_dir) -> Path:
    return test_assets_dir / 'not_airspace.txt'


@pytest.fixture
def database() -> AirspaceDatabase:
    """Return an empty airspace database."""
    return AirspaceDatabase()
