import pytest

from eez_watch.models.boundary import Boundary, BoundarySet, InvalidBoundary, OnEdge, Point
from eez_watch.models.safety import SafetyStatus, classify


def test_classify_without_boundary_is_unknown():
    state = classify(Point(5.0, 5.0), None)
    assert state.status is SafetyStatus.UNKNOWN
    assert state.label == "boundary data not loaded"
    assert not state.is_known


def test_classify_with_empty_set_is_unknown():
    state = classify(Point(5.0, 5.0), BoundarySet("empty"))
    assert state.status is SafetyStatus.UNKNOWN


def test_classify_inside(square_set):
    state = classify(Point(5.0, 5.0), square_set)
    assert state.status is SafetyStatus.INSIDE
    assert state.label == "Inside EEZ (Safe)"
    assert str(state) == state.label


def test_classify_outside(square_set):
    state = classify(Point(15.0, 5.0), square_set)
    assert state.status is SafetyStatus.OUTSIDE
    assert state.label == "Outside EEZ — Alert"


def test_classify_uses_primary_boundary_only(square_boundary):
    far_away = Boundary.from_coordinates([[(50, 50), (51, 50), (50, 51), (50, 50)]])
    boundary_set = BoundarySet("pair", (square_boundary, far_away))
    assert classify(Point(50.2, 50.2), boundary_set).status is SafetyStatus.OUTSIDE


def test_classify_on_edge_policy(square_set):
    edge = Point(0.0, 5.0)
    assert classify(edge, square_set).status is SafetyStatus.OUTSIDE
    assert classify(edge, square_set, OnEdge.INSIDE).status is SafetyStatus.INSIDE


def test_classify_is_idempotent(square_set):
    point = Point(15.0, 5.0)
    assert classify(point, square_set) == classify(point, square_set)


def test_classify_propagates_invalid_boundary():
    broken = BoundarySet("broken", (Boundary.from_coordinates([[(0, 0), (1, 0), (0, 0)]]),))
    with pytest.raises(InvalidBoundary):
        classify(Point(0.5, 0.1), broken)
