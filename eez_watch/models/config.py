"""Configuration constants and environment settings for the EEZ monitor."""

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv


# Load environment variables from .env file
load_dotenv()

# ────────────────────────────────────────────────────────────────────
#  Boundary data
# ────────────────────────────────────────────────────────────────────
DEFAULT_BOUNDARY_PATH = "data/eez_india.geojson"
DEFAULT_BOUNDARY_NAME = "EEZ"

# ────────────────────────────────────────────────────────────────────
#  Safety labels
# ────────────────────────────────────────────────────────────────────
LABEL_UNKNOWN = "boundary data not loaded"
LABEL_INSIDE = "Inside EEZ (Safe)"
LABEL_OUTSIDE = "Outside EEZ — Alert"

# ────────────────────────────────────────────────────────────────────
#  Demo sampling
# ────────────────────────────────────────────────────────────────────
# Draws per call before giving up on verification
MAX_DEMO_ATTEMPTS = 10
# Arabian Sea open water (lon, lat), inside the Indian EEZ
FALLBACK_DEMO_POINT: Tuple[float, float] = (70.0, 15.0)

# ────────────────────────────────────────────────────────────────────
#  Marine conditions (Open-Meteo)
# ────────────────────────────────────────────────────────────────────
MARINE_API_URL = "https://marine-api.open-meteo.com/v1/marine"
MARINE_TIMEOUT_S = 10.0
MARINE_DEBOUNCE_S = 0.6

# ────────────────────────────────────────────────────────────────────
#  Alerts
# ────────────────────────────────────────────────────────────────────
ALERT_SUBJECT = "EEZ ALERT: Vessel outside EEZ"
MAPS_URL = "https://maps.google.com/?q={lat},{lon}"


@dataclass(frozen=True)
class Settings:
    """Runtime settings resolved from the environment."""
    boundary_path: str = DEFAULT_BOUNDARY_PATH
    on_edge: str = "outside"
    demo_seed: Optional[int] = None
    marine_api_url: str = MARINE_API_URL
    marine_timeout_s: float = MARINE_TIMEOUT_S


def load_settings() -> Settings:
    """
    Build :class:`Settings` from environment variables.

    Recognised variables: ``EEZ_BOUNDARY_PATH``, ``EEZ_ON_EDGE``
    (``inside``/``outside``), ``EEZ_DEMO_SEED``, ``MARINE_API_URL`` and
    ``MARINE_TIMEOUT_S``.

    Raises:
        ValueError: If a variable holds an unusable value
    """
    on_edge = os.getenv("EEZ_ON_EDGE", "outside").strip().lower()
    if on_edge not in ("inside", "outside"):
        raise ValueError(f"EEZ_ON_EDGE must be 'inside' or 'outside', got {on_edge!r}")

    seed_raw = os.getenv("EEZ_DEMO_SEED")
    try:
        demo_seed = int(seed_raw) if seed_raw not in (None, "") else None
    except ValueError:
        raise ValueError(f"EEZ_DEMO_SEED must be an integer, got {seed_raw!r}")

    timeout_raw = os.getenv("MARINE_TIMEOUT_S")
    try:
        timeout = float(timeout_raw) if timeout_raw not in (None, "") else MARINE_TIMEOUT_S
    except ValueError:
        raise ValueError(f"MARINE_TIMEOUT_S must be a number, got {timeout_raw!r}")
    if timeout <= 0:
        raise ValueError(f"MARINE_TIMEOUT_S must be positive, got {timeout}")

    return Settings(
        boundary_path=os.getenv("EEZ_BOUNDARY_PATH", DEFAULT_BOUNDARY_PATH),
        on_edge=on_edge,
        demo_seed=demo_seed,
        marine_api_url=os.getenv("MARINE_API_URL", MARINE_API_URL),
        marine_timeout_s=timeout,
    )
