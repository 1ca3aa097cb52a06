"""
Demo positions with a known relation to the EEZ.

Points are drawn from a fixed catalog of open-water boxes around the Indian
EEZ so demo vessels never land on shore. When boundary data is loaded every
draw is checked against it and redrawn on mismatch.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .boundary import BoundarySet, OnEdge, Point, contains
from .config import FALLBACK_DEMO_POINT, MAX_DEMO_ATTEMPTS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DemoRegion:
    """Lon/lat bounding box with its expected relation to the EEZ."""
    name: str
    bbox: Tuple[float, float, float, float]  # min_lon, min_lat, max_lon, max_lat
    inside_eez: bool

    def sample(self, rng: np.random.Generator) -> Point:
        """Independent uniform draws on longitude and latitude."""
        min_lon, min_lat, max_lon, max_lat = self.bbox
        return Point(rng.uniform(min_lon, max_lon), rng.uniform(min_lat, max_lat))


# Ocean-only boxes close to the Indian EEZ boundary, paired per coast
DEMO_REGIONS: Tuple[DemoRegion, ...] = (
    DemoRegion("Arabian Sea", (68.0, 10.0, 75.0, 22.0), True),
    DemoRegion("Arabian Sea", (60.0, 10.0, 68.0, 22.0), False),
    DemoRegion("Bay of Bengal", (82.0, 10.0, 88.0, 22.0), True),
    DemoRegion("Bay of Bengal", (88.0, 10.0, 95.0, 22.0), False),
    DemoRegion("Indian Ocean", (75.0, 6.0, 85.0, 10.0), True),
    DemoRegion("Indian Ocean", (75.0, 2.0, 85.0, 6.0), False),
    DemoRegion("Andaman Sea", (92.0, 8.0, 98.0, 14.0), True),
    DemoRegion("Andaman Sea", (98.0, 8.0, 104.0, 14.0), False),
)


@dataclass(frozen=True)
class DemoSample:
    point: Point
    want_inside: bool
    region: Optional[DemoRegion]
    attempts: int
    verified: bool = False
    degraded: bool = False


def sample_demo_location(boundary_set: Optional[BoundarySet] = None,
                         rng: Optional[np.random.Generator] = None,
                         on_edge: OnEdge = OnEdge.OUTSIDE,
                         max_attempts: int = MAX_DEMO_ATTEMPTS) -> DemoSample:
    """
    Draw a demo position that is inside or outside the EEZ with equal odds.

    Args:
        boundary_set: Loaded boundaries used to verify each draw; without
            them the first draw is returned unverified
        rng: Seedable numpy generator; a fresh unseeded one by default
        on_edge: Edge policy passed to the containment check
        max_attempts: Draws allowed before falling back to
            ``FALLBACK_DEMO_POINT``

    Returns:
        DemoSample; ``degraded`` is set when the fallback point was used,
        whose own relation to the boundary is not guaranteed to match
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
    rng = rng if rng is not None else np.random.default_rng()

    want_inside = bool(rng.random() < 0.5)
    regions = [region for region in DEMO_REGIONS if region.inside_eez == want_inside]
    boundary = boundary_set.primary if boundary_set is not None else None

    for attempt in range(1, max_attempts + 1):
        region = regions[int(rng.integers(len(regions)))]
        point = region.sample(rng)

        if boundary is None:
            logger.info(f"Demo location {point.lon_lat} in {region.name} "
                        f"({'inside' if want_inside else 'outside'}), unverified")
            return DemoSample(point, want_inside, region, attempt)

        if contains(point, boundary, on_edge) == want_inside:
            logger.info(f"Demo location {point.lon_lat} {'inside' if want_inside else 'outside'} "
                        f"EEZ after {attempt} draw(s)")
            return DemoSample(point, want_inside, region, attempt, verified=True)

    lon, lat = FALLBACK_DEMO_POINT
    logger.warning(f"No verified demo location after {max_attempts} draws "
                   f"(wanted {'inside' if want_inside else 'outside'}); "
                   f"using fallback {FALLBACK_DEMO_POINT}")
    return DemoSample(Point(lon, lat), want_inside, None, max_attempts, degraded=True)
