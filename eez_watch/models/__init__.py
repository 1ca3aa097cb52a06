"""
Public model interface – re-export the boundary engine with *stable* names
so callers can import from `eez_watch.models`.
"""

from .boundary import (
    Point,
    Boundary,
    BoundarySet,
    OnEdge,
    InvalidBoundary,
    contains,
    boundary_distance_km,
)
from .safety import SafetyStatus, SafetyState, classify
from .demo import DemoRegion, DemoSample, DEMO_REGIONS, sample_demo_location

__all__ = [
    "Point", "Boundary", "BoundarySet", "OnEdge", "InvalidBoundary",
    "contains", "boundary_distance_km",
    "SafetyStatus", "SafetyState", "classify",
    "DemoRegion", "DemoSample", "DEMO_REGIONS", "sample_demo_location",
]
