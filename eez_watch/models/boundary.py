"""
Boundary geometry: points, EEZ polygons and the point/boundary relations.

Coordinates are (longitude, latitude) throughout, matching GeoJSON.
Containment treats lon/lat as planar for the ring-crossing test;
distances are great-circle (haversine) kilometers.
"""
import enum
import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from ..utils.constants import EPS, MAX_LAT, MAX_LON, MIN_LAT, MIN_LON
from ..utils.geo_utils import (
    haversine_distance,
    nearest_points_on_segments,
    point_on_segment,
)

# Configure logging
logger = logging.getLogger(__name__)

MIN_RING_POINTS = 4


class InvalidBoundary(ValueError):
    """Raised when a boundary has no rings, a short ring or an unclosed ring."""


class OnEdge(enum.Enum):
    """How points lying exactly on a ring edge are classified."""
    INSIDE = "inside"
    OUTSIDE = "outside"


@dataclass(frozen=True)
class Point:
    """Immutable geographic coordinate in decimal degrees."""
    longitude: float
    latitude: float

    def __post_init__(self):
        try:
            lon, lat = float(self.longitude), float(self.latitude)
        except (TypeError, ValueError):
            logger.error(f"Invalid coordinate types: lon={type(self.longitude)}, lat={type(self.latitude)}")
            raise ValueError("Coordinates must be numeric")

        # boundary values (±90 / ±180) are valid; NaN fails both comparisons
        if not (MIN_LON <= lon <= MAX_LON and MIN_LAT <= lat <= MAX_LAT):
            logger.error(f"Coordinates out of range: lon={lon}, lat={lat}")
            raise ValueError("Coordinates out of valid range")

        object.__setattr__(self, "longitude", lon)
        object.__setattr__(self, "latitude", lat)

    @property
    def lon_lat(self) -> Tuple[float, float]:
        return self.longitude, self.latitude


Ring = Tuple[Point, ...]


@dataclass(frozen=True)
class Boundary:
    """
    A polygon: ``rings[0]`` is the outer shell, any further rings are holes.

    Rings are not checked here; :func:`contains` and
    :func:`boundary_distance_km` validate before use.
    """
    rings: Tuple[Ring, ...]

    @classmethod
    def from_coordinates(cls, rings: Iterable[Iterable[Sequence[float]]]) -> "Boundary":
        """Build from nested ``[[(lon, lat), ...], ...]`` coordinates."""
        return cls(tuple(
            tuple(Point(coord[0], coord[1]) for coord in ring)
            for ring in rings
        ))

    @property
    def shell(self) -> Ring:
        return self.rings[0]

    @property
    def holes(self) -> Tuple[Ring, ...]:
        return self.rings[1:]


@dataclass(frozen=True)
class BoundarySet:
    """Named, read-only collection of boundaries; the first one is active."""
    name: str
    boundaries: Tuple[Boundary, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.boundaries)

    @property
    def primary(self) -> Optional[Boundary]:
        return self.boundaries[0] if self.boundaries else None


def validate_boundary(boundary: Boundary) -> None:
    """
    Check the structural invariants of a boundary.

    Raises:
        InvalidBoundary: If there are no rings, a ring has fewer than four
            points, or a ring's first and last points differ
    """
    if not boundary.rings:
        raise InvalidBoundary("Boundary has no rings")
    for index, ring in enumerate(boundary.rings):
        if len(ring) < MIN_RING_POINTS:
            raise InvalidBoundary(
                f"Ring {index} has {len(ring)} points, at least {MIN_RING_POINTS} required"
            )
        if ring[0] != ring[-1]:
            raise InvalidBoundary(f"Ring {index} is not closed")


def _ring_array(ring: Ring) -> np.ndarray:
    return np.array([p.lon_lat for p in ring], dtype=float)


def _on_ring_edge(px: float, py: float, ring: Ring) -> bool:
    for a, b in zip(ring, ring[1:]):
        if point_on_segment(px, py, a.longitude, a.latitude, b.longitude, b.latitude, EPS):
            return True
    return False


def _point_in_ring(px: float, py: float, ring: Ring) -> bool:
    """Even–odd rule (ray-casting) with the standard vertex-handling guard."""
    inside = False
    n = len(ring)
    j = n - 1
    for i in range(n):
        xi, yi = ring[i].lon_lat
        xj, yj = ring[j].lon_lat
        if (yi > py) != (yj > py):                    # edge straddles scan-line
            xinters = (xj - xi) * (py - yi) / (yj - yi) + xi
            if px < xinters:
                inside = not inside
        j = i
    return inside


def contains(point: Point, boundary: Boundary, on_edge: OnEdge = OnEdge.OUTSIDE) -> bool:
    """
    True if ``point`` lies inside the outer ring and outside every hole.

    Points on any ring edge (shell or hole) are classified by ``on_edge``.

    Raises:
        InvalidBoundary: If the boundary is malformed
    """
    validate_boundary(boundary)
    x, y = point.lon_lat

    for ring in boundary.rings:
        if _on_ring_edge(x, y, ring):
            return on_edge is OnEdge.INSIDE

    if not _point_in_ring(x, y, boundary.shell):
        return False
    return not any(_point_in_ring(x, y, hole) for hole in boundary.holes)


def boundary_distance_km(point: Point, boundary: Boundary) -> float:
    """
    Minimum distance in kilometers from ``point`` to the outer ring.

    Each edge is projected onto in planar lon/lat to find its nearest point,
    which is then measured with the haversine formula. Holes are ignored.
    Returned at full precision; round for display only.

    Raises:
        InvalidBoundary: If the boundary is malformed
    """
    validate_boundary(boundary)
    coords = _ring_array(boundary.shell)
    nearest = nearest_points_on_segments(point.longitude, point.latitude, coords[:-1], coords[1:])
    distances = haversine_distance(point.latitude, point.longitude, nearest[:, 1], nearest[:, 0])
    return float(np.min(distances))
