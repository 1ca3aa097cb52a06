"""
EEZ boundary loading.

Reads vector boundary data (GeoJSON, GeoPackage, shapefile, ...) with
geopandas, or converts already-parsed GeoJSON with shapely, into an
immutable BoundarySet. Feature order is kept, so the first feature stays
the active boundary; the parts of a multi-polygon feature are ordered by
descending area so its main shell comes first.
"""
import logging
from pathlib import Path
from typing import Any, Iterable, Iterator, List, Mapping, Optional, Union

import geopandas as gpd
from shapely.geometry import Polygon, shape
from shapely.geometry.base import BaseGeometry

from ..models.boundary import Boundary, BoundarySet
from ..models.config import DEFAULT_BOUNDARY_NAME

# Configure logging
logger = logging.getLogger(__name__)

WGS84_EPSG = 4326


def boundary_from_polygon(polygon: Polygon) -> Boundary:
    """Shell then holes, as (lon, lat) rings; shapely rings are already closed."""
    rings = [polygon.exterior.coords] + [interior.coords for interior in polygon.interiors]
    return Boundary.from_coordinates(rings)


def _polygons(geometry: Optional[BaseGeometry]) -> Iterator[Polygon]:
    """Polygon parts of a geometry, largest first; non-areal geometries yield nothing."""
    if geometry is None or geometry.is_empty:
        return
    if isinstance(geometry, Polygon):
        yield geometry
    elif hasattr(geometry, "geoms"):
        parts: List[Polygon] = []
        for part in geometry.geoms:
            parts.extend(_polygons(part))
        yield from sorted(parts, key=lambda p: p.area, reverse=True)


def _boundary_set(geometries: Iterable[Optional[BaseGeometry]], name: str) -> BoundarySet:
    boundaries = tuple(
        boundary_from_polygon(polygon)
        for geometry in geometries
        for polygon in _polygons(geometry)
    )
    if not boundaries:
        raise ValueError(f"No polygon geometries found for boundary set {name!r}")
    return BoundarySet(name, boundaries)


def load_boundary_set(path: Union[str, Path], name: Optional[str] = None) -> BoundarySet:
    """
    Load a boundary file into a BoundarySet.

    Parameters:
        path: Any vector file geopandas can read
        name: Set name; defaults to the file stem

    Raises:
        FileNotFoundError: If ``path`` does not exist
        RuntimeError: If the file cannot be read
        ValueError: If it contains no polygons
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Boundary file not found: {path}")

    try:
        gdf = gpd.read_file(path)
    except Exception as e:
        logger.error(f"Error reading boundary file {path}: {e}")
        raise RuntimeError(f"Failed to read boundary file {path}: {e}") from e

    if gdf.crs is not None and gdf.crs.to_epsg() != WGS84_EPSG:
        logger.info(f"Reprojecting {path} from {gdf.crs} to EPSG:{WGS84_EPSG}")
        gdf = gdf.to_crs(epsg=WGS84_EPSG)

    boundary_set = _boundary_set(gdf.geometry, name or path.stem)
    logger.info(f"Loaded {len(boundary_set)} boundaries from {path}")
    return boundary_set


def boundary_set_from_geojson(data: Mapping[str, Any],
                              name: str = DEFAULT_BOUNDARY_NAME) -> BoundarySet:
    """
    Convert a parsed GeoJSON FeatureCollection, Feature or bare geometry.

    Raises:
        ValueError: If the data holds no polygons
    """
    kind = data.get("type")
    if kind == "FeatureCollection":
        raw = [feature.get("geometry") for feature in data.get("features") or []]
    elif kind == "Feature":
        raw = [data.get("geometry")]
    else:
        raw = [data]
    return _boundary_set((shape(g) for g in raw if g), name)
