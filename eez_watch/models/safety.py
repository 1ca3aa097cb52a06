"""
Safety classification of a vessel position against the active EEZ boundary.
"""
import enum
from dataclasses import dataclass
from typing import Optional

from .boundary import BoundarySet, OnEdge, Point, contains
from .config import LABEL_INSIDE, LABEL_OUTSIDE, LABEL_UNKNOWN


class SafetyStatus(enum.Enum):
    """Relation of the vessel to the EEZ."""
    UNKNOWN = "UNKNOWN"
    INSIDE = "INSIDE"
    OUTSIDE = "OUTSIDE"


@dataclass(frozen=True)
class SafetyState:
    status: SafetyStatus
    label: str

    @property
    def is_known(self) -> bool:
        return self.status is not SafetyStatus.UNKNOWN

    def __str__(self) -> str:
        return self.label


UNKNOWN_STATE = SafetyState(SafetyStatus.UNKNOWN, LABEL_UNKNOWN)
INSIDE_STATE = SafetyState(SafetyStatus.INSIDE, LABEL_INSIDE)
OUTSIDE_STATE = SafetyState(SafetyStatus.OUTSIDE, LABEL_OUTSIDE)


def classify(point: Point, boundary_set: Optional[BoundarySet],
             on_edge: OnEdge = OnEdge.OUTSIDE) -> SafetyState:
    """
    Classify ``point`` against the primary boundary of ``boundary_set``.

    A missing or empty set yields the UNKNOWN state, never a guess at
    safe/unsafe. Malformed boundaries propagate :class:`InvalidBoundary`.
    """
    if boundary_set is None or boundary_set.primary is None:
        return UNKNOWN_STATE
    if contains(point, boundary_set.primary, on_edge):
        return INSIDE_STATE
    return OUTSIDE_STATE
