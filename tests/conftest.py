import json

import numpy as np
import pytest

from eez_watch.models.boundary import Boundary, BoundarySet

SQUARE = [(0.0, 0.0), (0.0, 10.0), (10.0, 10.0), (10.0, 0.0), (0.0, 0.0)]
HOLE = [(4.0, 4.0), (6.0, 4.0), (6.0, 6.0), (4.0, 6.0), (4.0, 4.0)]
# Covers the Arabian Sea, Bay of Bengal and southern inside demo boxes, not the Andaman one
DEMO_SHELL = [(68.0, 6.0), (88.0, 6.0), (88.0, 22.0), (68.0, 22.0), (68.0, 6.0)]


@pytest.fixture
def square_boundary():
    """Fixture providing the 10x10 degree square boundary with corners (0,0)-(10,10)."""
    return Boundary.from_coordinates([SQUARE])


@pytest.fixture
def holed_boundary():
    """Fixture providing the square boundary with a 2x2 degree hole in the middle."""
    return Boundary.from_coordinates([SQUARE, HOLE])


@pytest.fixture
def square_set(square_boundary):
    return BoundarySet("square", (square_boundary,))


@pytest.fixture
def demo_boundary_set():
    """Fixture providing an EEZ stand-in that matches most of the demo catalog."""
    return BoundarySet("demo", (Boundary.from_coordinates([DEMO_SHELL]),))


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def square_feature_collection():
    """GeoJSON FeatureCollection with the square first and a far-away triangle second."""
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {"name": "square"},
                "geometry": {"type": "Polygon", "coordinates": [[list(c) for c in SQUARE]]},
            },
            {
                "type": "Feature",
                "properties": {"name": "triangle"},
                "geometry": {
                    "type": "Polygon",
                    "coordinates": [[[50.0, 50.0], [51.0, 50.0], [50.0, 51.0], [50.0, 50.0]]],
                },
            },
        ],
    }


@pytest.fixture
def geojson_file(tmp_path, square_feature_collection):
    """Fixture writing the square FeatureCollection to a temporary GeoJSON file."""
    path = tmp_path / "eez_test.geojson"
    path.write_text(json.dumps(square_feature_collection))
    return path
