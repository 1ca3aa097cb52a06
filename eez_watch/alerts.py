"""
Alert transitions and coast-guard alert messages.
"""
import enum
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional
from urllib.parse import quote

from .models.boundary import Point
from .models.config import ALERT_SUBJECT, MAPS_URL
from .models.safety import SafetyState, SafetyStatus
from .utils.geo_utils import format_coordinates

# Configure logging
logger = logging.getLogger(__name__)


class AlertKind(enum.Enum):
    RAISED = "RAISED"
    CLEARED = "CLEARED"


@dataclass(frozen=True)
class AlertEvent:
    kind: AlertKind
    point: Point
    safety: SafetyState


@dataclass(frozen=True)
class AlertMessage:
    subject: str
    body: str
    share_text: str
    maps_link: str

    @property
    def mailto(self) -> str:
        return f"mailto:?subject={quote(self.subject)}&body={quote(self.body)}"


AlertListener = Callable[[AlertEvent], None]


class AlertTracker:
    """
    Turns a stream of safety states into alert edges.

    An alert is raised once when the state becomes OUTSIDE from anything
    else and cleared once the state returns to INSIDE. Repeating a state
    emits nothing; losing boundary data (OUTSIDE -> UNKNOWN) keeps the
    alert active.
    """

    def __init__(self, listeners: Optional[List[AlertListener]] = None) -> None:
        self._listeners: List[AlertListener] = list(listeners or [])
        self._last_status: Optional[SafetyStatus] = None
        self.active_alert: Optional[AlertEvent] = None

    def subscribe(self, listener: AlertListener) -> None:
        """Register a callable that receives every emitted event."""
        self._listeners.append(listener)

    @property
    def alert_active(self) -> bool:
        return self.active_alert is not None

    def observe(self, safety: SafetyState, point: Point) -> Optional[AlertEvent]:
        """Record a new classification; return the event it triggered, if any."""
        previous, self._last_status = self._last_status, safety.status

        event = None
        if safety.status is SafetyStatus.OUTSIDE and previous is not SafetyStatus.OUTSIDE:
            event = AlertEvent(AlertKind.RAISED, point, safety)
            self.active_alert = event
            logger.warning(f"EEZ alert raised at {point.lon_lat}: {safety.label}")
        elif safety.status is SafetyStatus.INSIDE and self.active_alert is not None:
            event = AlertEvent(AlertKind.CLEARED, point, safety)
            self.active_alert = None
            logger.info(f"EEZ alert cleared at {point.lon_lat}")

        if event is not None:
            for listener in self._listeners:
                listener(event)
        return event


def build_alert_message(point: Point) -> AlertMessage:
    """Compose the share/email alert for a vessel outside the EEZ."""
    lat, lon = format_coordinates(point.latitude, point.longitude)
    maps_link = MAPS_URL.format(lat=lat, lon=lon)
    body = (f"Emergency: Vessel is outside the EEZ.\n"
            f"Coordinates: {lat}, {lon}\n"
            f"Map: {maps_link}")
    share_text = f"EEZ ALERT: Outside EEZ\nCoords: {lat}, {lon}\n{maps_link}"
    return AlertMessage(ALERT_SUBJECT, body, share_text, maps_link)
