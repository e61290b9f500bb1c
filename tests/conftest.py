"""
Shared fixtures for the boundary polyline tests.
"""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client():
    """FastAPI test client for the application."""
    from main import app
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def square_polygon():
    """GeoJSON Polygon ([lng, lat] order) with one hole."""
    return {
        "type": "Polygon",
        "coordinates": [
            [[-71.1, 42.3], [-71.0, 42.3], [-71.0, 42.4], [-71.1, 42.4], [-71.1, 42.3]],
            [[-71.06, 42.34], [-71.04, 42.34], [-71.04, 42.36], [-71.06, 42.34]],
        ],
    }
