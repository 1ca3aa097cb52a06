"""
Public ingestion interface – re-export helpers with *stable* names
so tests and main() can import from `eez_watch.ingestion`.
"""

from .boundary_loader import (
    load_boundary_set,
    boundary_set_from_geojson,
    boundary_from_polygon,
)
from .data_loader import load_positions, standardize_columns
from .marine_client import (
    MarineConditions,
    DebouncedMarineFetcher,
    fetch_marine_conditions,
)

__all__ = [
    "load_boundary_set", "boundary_set_from_geojson", "boundary_from_polygon",
    "load_positions", "standardize_columns",
    "MarineConditions", "DebouncedMarineFetcher", "fetch_marine_conditions",
]
