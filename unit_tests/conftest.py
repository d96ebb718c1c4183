import pytest

from elorating.math.elo import elo_configure


@pytest.fixture(autouse=True)
def default_k_factor():
    elo_configure()
    yield
    elo_configure()
