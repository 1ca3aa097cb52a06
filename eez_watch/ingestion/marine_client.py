"""
Marine conditions from the Open-Meteo marine API.

The core engine never depends on this data; it is fetched alongside
position updates for display only.
"""
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

import pandas as pd
import requests

from ..models.config import MARINE_API_URL, MARINE_DEBOUNCE_S, MARINE_TIMEOUT_S

# Configure logging
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarineConditions:
    latitude: float
    longitude: float
    wave_height_m: Optional[float]
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    def hourly_frame(self) -> pd.DataFrame:
        """Hourly series as a DataFrame (``time`` parsed, one column per variable)."""
        hourly = self.raw.get("hourly") or {}
        df = pd.DataFrame(hourly)
        if "time" in df.columns:
            df["time"] = pd.to_datetime(df["time"])
        return df


def fetch_marine_conditions(lat: float, lon: float,
                            api_url: str = MARINE_API_URL,
                            timeout: float = MARINE_TIMEOUT_S) -> MarineConditions:
    """
    Fetch hourly wave height for a position.

    Returns:
        MarineConditions whose ``wave_height_m`` is the first hourly value,
        or None when the API returns no wave data

    Raises:
        RuntimeError: On transport errors, non-200 responses or bad JSON
    """
    params = {
        "latitude": lat,
        "longitude": lon,
        "hourly": "wave_height",
        "timezone": "auto",
    }
    try:
        response = requests.get(api_url, params=params, timeout=timeout)
        if response.status_code != 200:
            raise RuntimeError(f"API request failed with status {response.status_code}")
        data = response.json()
    except Exception as e:
        raise RuntimeError(f"Failed to fetch marine data from {api_url}: {e}") from e

    try:
        waves = (data.get("hourly") or {}).get("wave_height") or []
        first = waves[0] if waves else None
        wave_height = float(first) if first is not None else None
    except (AttributeError, TypeError, ValueError, IndexError, KeyError) as e:
        raise RuntimeError(f"Unexpected marine payload from {api_url}: {e}") from e
    return MarineConditions(
        latitude=lat,
        longitude=lon,
        wave_height_m=wave_height,
        raw=data,
    )


class DebouncedMarineFetcher:
    """
    Debounced, last-write-wins marine fetches.

    Each ``schedule`` call cancels the pending timer and bumps a generation
    counter; a fetch whose generation is stale when it completes is dropped,
    so ``callback`` only ever sees the most recent request. Failed fetches
    are logged and reported as ``None``.
    """

    def __init__(self, callback: Callable[[Optional[MarineConditions]], None],
                 delay_s: float = MARINE_DEBOUNCE_S,
                 fetch: Callable[..., MarineConditions] = fetch_marine_conditions) -> None:
        self._callback = callback
        self._delay_s = delay_s
        self._fetch = fetch
        self._lock = threading.RLock()
        self._timer: Optional[threading.Timer] = None
        self._generation = 0

    def schedule(self, lat: float, lon: float) -> threading.Timer:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            timer = threading.Timer(self._delay_s, self._run, args=(self._generation, lat, lon))
            timer.daemon = True
            self._timer = timer
        timer.start()
        return timer

    def cancel(self) -> None:
        """Drop the pending request and any fetch already in flight."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._generation += 1

    def _run(self, generation: int, lat: float, lon: float) -> None:
        try:
            result = self._fetch(lat, lon)
        except RuntimeError as e:
            logger.error(f"Marine data error: {e}")
            result = None
        # callback runs under the lock; only the current generation reaches it
        with self._lock:
            if generation != self._generation:
                logger.debug(f"Discarding superseded marine data for ({lat}, {lon})")
                return
            self._callback(result)
