import pytest

from campus_route.config import DEFAULT_CAMPUS_FILE, RouteSettings, load_campus_config
from campus_route.services.route_calculator import RouteCalculator


@pytest.fixture
def campus():
    return load_campus_config(DEFAULT_CAMPUS_FILE)


@pytest.fixture
def settings():
    return RouteSettings()


@pytest.fixture
def calculator(campus, settings):
    # fresh cache per test
    return RouteCalculator(campus, settings=settings)
