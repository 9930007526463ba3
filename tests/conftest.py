import pytest
from fastapi.testclient import TestClient

from calsun.main import app
from calsun.models.sun_events import Coordinate
from calsun.services.astronomy_service import AstronomyService

COPENHAGEN = Coordinate(latitude=55.6761, longitude=12.5683)
NEW_YORK = Coordinate(latitude=40.7128, longitude=-74.0060)
SYDNEY = Coordinate(latitude=-33.8688, longitude=151.2093)
TROMSO = Coordinate(latitude=69.6492, longitude=18.9553)


@pytest.fixture
def service():
    return AstronomyService()


@pytest.fixture
def client():
    return TestClient(app)
