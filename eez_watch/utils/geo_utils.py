import math
from typing import Optional, Tuple

import numpy as np

from .constants import EARTH_RADIUS_KM


def haversine_distance(lat1, lon1, lat2, lon2):
    """
    Calculate the great-circle distance between two points on Earth using the Haversine formula.
    Accepts scalars or numpy arrays (broadcast); returns distance in kilometers.
    """
    phi1 = np.radians(lat1)
    phi2 = np.radians(lat2)
    delta_phi = np.radians(np.subtract(lat2, lat1))
    delta_lambda = np.radians(np.subtract(lon2, lon1))
    a = np.sin(delta_phi/2)**2 + np.cos(phi1) * np.cos(phi2) * np.sin(delta_lambda/2)**2
    # rounding can push a past 1 for near-antipodal pairs
    a = np.clip(a, 0.0, 1.0)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def nearest_points_on_segments(px: float, py: float,
                               starts: np.ndarray, ends: np.ndarray) -> np.ndarray:
    """
    Planar nearest point on each segment [starts[i] - ends[i]] to (px, py).

    ``starts`` and ``ends`` are Nx2 arrays of (x, y); returns an Nx2 array.
    Zero-length segments collapse onto their start point.
    """
    seg = ends - starts
    rel = np.array([px, py], dtype=float) - starts
    length_sq = np.einsum("ij,ij->i", seg, seg)
    dot = np.einsum("ij,ij->i", rel, seg)
    safe = np.where(length_sq > 0, length_sq, 1.0)
    t = np.where(length_sq > 0, dot / safe, 0.0)
    t = np.clip(t, 0.0, 1.0)
    return starts + t[:, None] * seg


def point_on_segment(px: float, py: float,
                     x1: float, y1: float, x2: float, y2: float,
                     eps: float) -> bool:
    """True if (px, py) lies on the segment [(x1,y1) - (x2,y2)] within ``eps`` degrees."""
    length = math.hypot(x2 - x1, y2 - y1)
    if length == 0:
        return math.hypot(px - x1, py - y1) <= eps
    cross = (x2 - x1) * (py - y1) - (y2 - y1) * (px - x1)
    if abs(cross) / length > eps:
        return False
    return (min(x1, x2) - eps <= px <= max(x1, x2) + eps
            and min(y1, y2) - eps <= py <= max(y1, y2) + eps)


def format_distance_km(distance_km: Optional[float]) -> str:
    """Presentation form of a boundary distance: two decimals, or a dash when unknown."""
    if distance_km is None:
        return "—"
    return f"{distance_km:.2f} km"


def format_coordinates(lat: float, lon: float, digits: int = 4) -> Tuple[str, str]:
    """Fixed-precision (lat, lon) strings for alerts and logs."""
    return f"{lat:.{digits}f}", f"{lon:.{digits}f}"
