"""
Command-line host for the EEZ monitor: load the boundary, then evaluate a
single position, a CSV track and/or random demo locations.
"""
import argparse
import logging
from typing import Optional

import numpy as np

from .alerts import AlertEvent, AlertKind, build_alert_message
from .ingestion import fetch_marine_conditions, load_boundary_set, load_positions
from .models.boundary import BoundarySet, OnEdge, Point
from .models.config import load_settings
from .session import PositionSession, PositionUpdate, evaluate_positions

# Configure logging
logging.basicConfig(level=logging.INFO)
log = logging.getLogger(__name__)


def _parse_args(argv=None):
    settings = load_settings()
    parser = argparse.ArgumentParser(description="EEZ boundary monitor")
    parser.add_argument("--boundary", type=str, default=settings.boundary_path,
                        help="EEZ boundary file (GeoJSON or any format geopandas reads)")
    parser.add_argument("--lat", type=float, help="Vessel latitude")
    parser.add_argument("--lon", type=float, help="Vessel longitude")
    parser.add_argument("--input", type=str, help="CSV track with latitude/longitude columns")
    parser.add_argument("--output", type=str, help="Write the evaluated track to this CSV")
    parser.add_argument("--demo", type=int, default=0, help="Number of random demo locations")
    parser.add_argument("--seed", type=int, default=settings.demo_seed)
    parser.add_argument("--on-edge", choices=[e.value for e in OnEdge], default=settings.on_edge)
    parser.add_argument("--marine", action="store_true",
                        help="Fetch wave height for --lat/--lon from the marine API")
    parser.add_argument("--marine-url", type=str, default=settings.marine_api_url)
    parser.add_argument("--marine-timeout", type=float, default=settings.marine_timeout_s)
    return parser.parse_args(argv)


def _load_boundary(path: str) -> Optional[BoundarySet]:
    try:
        return load_boundary_set(path)
    except (OSError, RuntimeError, ValueError) as exc:
        log.error("Boundary load failed, safety status will be UNKNOWN: %s", exc)
        return None


def _on_alert(event: AlertEvent) -> None:
    if event.kind is AlertKind.RAISED:
        message = build_alert_message(event.point)
        log.warning("%s\n%s", message.subject, message.body)


def _report(update: PositionUpdate) -> None:
    log.info("(%.4f, %.4f) %s | distance to EEZ boundary: %s",
             update.point.latitude, update.point.longitude,
             update.safety.label, update.distance_display)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    log.info("Starting EEZ monitor with args: %s", args)

    session = PositionSession(_load_boundary(args.boundary), on_edge=OnEdge(args.on_edge))
    session.alerts.subscribe(_on_alert)

    # ---------- single position ----------
    if args.lat is not None and args.lon is not None:
        try:
            point = Point(args.lon, args.lat)
        except ValueError as e:
            log.error("Invalid position: %s", e)
            return
        _report(session.update(point))
        if args.marine:
            try:
                marine = fetch_marine_conditions(args.lat, args.lon, args.marine_url, args.marine_timeout)
                wave = "—" if marine.wave_height_m is None else f"{marine.wave_height_m:.2f} m"
                log.info("Wave height: %s", wave)
            except RuntimeError as e:
                log.error("Marine data error: %s", e)

    # ---------- track ----------
    if args.input:
        try:
            positions = load_positions(args.input)
        except (RuntimeError, ValueError) as e:
            log.error("Position load failed: %s", e)
            return
        evaluated = evaluate_positions(positions, session)
        counts = evaluated["status"].value_counts(dropna=False).to_dict()
        log.info("Evaluated %d positions: %s", len(evaluated), counts)
        if args.output:
            evaluated.to_csv(args.output, index=False)
            log.info("Wrote evaluated track to %s", args.output)

    # ---------- demo ----------
    if args.demo > 0:
        rng = np.random.default_rng(args.seed)
        for _ in range(args.demo):
            sample = session.update_to_demo_location(rng)
            flags = " (fallback)" if sample.degraded else ""
            log.info("Demo draw wanted %s%s", "inside" if sample.want_inside else "outside", flags)
            _report(session.current)

    log.info("Processing completed successfully")


if __name__ == "__main__":
    main()
