"""
Position session: the current vessel position and everything derived from it.
"""
import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from .alerts import AlertEvent, AlertTracker
from .models.boundary import BoundarySet, OnEdge, Point, boundary_distance_km
from .models.demo import DemoSample, sample_demo_location
from .models.safety import SafetyState, classify
from .utils.constants import DEFAULT_CENTER
from .utils.geo_utils import format_distance_km

# Configure logging
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PositionUpdate:
    """Result of one position update; ``distance_km`` is None without boundary data."""
    point: Point
    safety: SafetyState
    distance_km: Optional[float]
    alert: Optional[AlertEvent] = None

    @property
    def distance_display(self) -> str:
        return format_distance_km(self.distance_km)


def compute_update(point: Point, boundary_set: Optional[BoundarySet],
                   on_edge: OnEdge = OnEdge.OUTSIDE) -> PositionUpdate:
    """Classification and boundary distance for ``point``; no session state involved."""
    safety = classify(point, boundary_set, on_edge)
    primary = boundary_set.primary if boundary_set is not None else None
    distance = boundary_distance_km(point, primary) if primary is not None else None
    return PositionUpdate(point, safety, distance)


class PositionSession:
    """
    Holds the current position and its last derived safety/distance.

    ``update`` is the only place safety and distance are recomputed. The
    boundary set is swapped whole via :meth:`set_boundary_set`, never
    mutated, so an update always sees one consistent boundary.
    """

    def __init__(self, boundary_set: Optional[BoundarySet] = None,
                 on_edge: OnEdge = OnEdge.OUTSIDE,
                 alert_tracker: Optional[AlertTracker] = None) -> None:
        self._boundary_set = boundary_set
        self.on_edge = on_edge
        self.alerts = alert_tracker or AlertTracker()
        self.current: Optional[PositionUpdate] = None

    @property
    def boundary_set(self) -> Optional[BoundarySet]:
        return self._boundary_set

    @property
    def point(self) -> Optional[Point]:
        return self.current.point if self.current else None

    def set_boundary_set(self, boundary_set: Optional[BoundarySet]) -> Optional[PositionUpdate]:
        """Replace the boundary data and re-derive the current position, if any."""
        self._boundary_set = boundary_set
        if boundary_set is not None:
            logger.info(f"Boundary set '{boundary_set.name}' active with {len(boundary_set)} boundaries")
        if self.current is None:
            return None
        return self.update(self.current.point)

    def update(self, point: Point) -> PositionUpdate:
        """Recompute safety and distance for ``point`` and make it current."""
        result = compute_update(point, self._boundary_set, self.on_edge)
        event = self.alerts.observe(result.safety, point)
        if event is not None:
            result = PositionUpdate(result.point, result.safety, result.distance_km, event)
        self.current = result
        logger.debug(f"Position {point.lon_lat}: {result.safety.label}, {result.distance_display}")
        return result

    def move_to(self, longitude: Optional[float] = None,
                latitude: Optional[float] = None) -> PositionUpdate:
        """
        Update one or both coordinates of the current position.

        Raises:
            ValueError: If a coordinate is omitted and there is no current position
        """
        if longitude is None or latitude is None:
            if self.current is None:
                raise ValueError("Both coordinates are required when no position is set")
            longitude = self.current.point.longitude if longitude is None else longitude
            latitude = self.current.point.latitude if latitude is None else latitude
        return self.update(Point(longitude, latitude))

    def reset(self) -> PositionUpdate:
        """Move back to the default open-water center."""
        return self.update(Point(*DEFAULT_CENTER))

    def update_to_demo_location(self, rng: Optional[np.random.Generator] = None) -> DemoSample:
        """Draw a demo location against the session's boundary data and move there."""
        sample = sample_demo_location(self._boundary_set, rng, self.on_edge)
        self.update(sample.point)
        return sample


def evaluate_positions(frame: pd.DataFrame, session: PositionSession) -> pd.DataFrame:
    """
    Run every row of a position DataFrame through ``session.update``.

    Rows with unusable coordinates are logged and kept with empty results;
    a malformed boundary still raises.

    Returns:
        Copy of ``frame`` with ``status``, ``label``, ``distance_km`` and
        ``alert`` columns added
    """
    statuses, labels, distances, alerts = [], [], [], []
    for record in frame.to_dict("records"):
        try:
            point = Point(record["longitude"], record["latitude"])
        except ValueError as e:
            logger.warning(f"Skipping invalid position {record}: {e}")
            statuses.append(None)
            labels.append(None)
            distances.append(np.nan)
            alerts.append(None)
            continue
        result = session.update(point)
        statuses.append(result.safety.status.value)
        labels.append(result.safety.label)
        distances.append(np.nan if result.distance_km is None else result.distance_km)
        alerts.append(result.alert.kind.value if result.alert else None)

    out = frame.copy()
    out["status"] = statuses
    out["label"] = labels
    out["distance_km"] = distances
    out["alert"] = alerts
    return out
