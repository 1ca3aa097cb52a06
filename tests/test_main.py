import logging

import pandas as pd
import pytest

from eez_watch.main import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ["EEZ_BOUNDARY_PATH", "EEZ_ON_EDGE", "EEZ_DEMO_SEED"]:
        monkeypatch.delenv(name, raising=False)


def test_main_single_position_inside(geojson_file, caplog):
    caplog.set_level(logging.INFO)
    main(["--boundary", str(geojson_file), "--lat", "5", "--lon", "5"])
    assert "Inside EEZ (Safe)" in caplog.text
    assert "km" in caplog.text


def test_main_single_position_outside_raises_alert(geojson_file, caplog):
    caplog.set_level(logging.INFO)
    main(["--boundary", str(geojson_file), "--lat", "5", "--lon", "15"])
    assert "Outside EEZ — Alert" in caplog.text
    assert "EEZ ALERT: Vessel outside EEZ" in caplog.text


def test_main_missing_boundary_reports_unknown(tmp_path, caplog):
    caplog.set_level(logging.INFO)
    main(["--boundary", str(tmp_path / "missing.geojson"), "--lat", "5", "--lon", "5"])
    assert "Boundary load failed" in caplog.text
    assert "boundary data not loaded" in caplog.text
    assert "Inside EEZ" not in caplog.text


def test_main_invalid_position(geojson_file, caplog):
    main(["--boundary", str(geojson_file), "--lat", "95", "--lon", "5"])
    assert "Invalid position" in caplog.text


def test_main_track_with_output(geojson_file, tmp_path):
    track = tmp_path / "track.csv"
    track.write_text("latitude,longitude\n5,5\n5,15\n5,5\n")
    output = tmp_path / "out.csv"
    main(["--boundary", str(geojson_file), "--input", str(track), "--output", str(output)])

    evaluated = pd.read_csv(output)
    assert evaluated["status"].tolist() == ["INSIDE", "OUTSIDE", "INSIDE"]
    assert evaluated["alert"].fillna("").tolist() == ["", "RAISED", "CLEARED"]


def test_main_demo_draws(geojson_file, caplog):
    caplog.set_level(logging.INFO)
    main(["--boundary", str(geojson_file), "--demo", "3", "--seed", "11"])
    assert caplog.text.count("Demo draw wanted") == 3
    assert "Processing completed successfully" in caplog.text


def test_main_marine_failure_is_logged(geojson_file, caplog, monkeypatch):
    import requests

    def mock_get(*args, **kwargs):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(requests, "get", mock_get)
    main(["--boundary", str(geojson_file), "--lat", "5", "--lon", "5", "--marine"])
    assert "Marine data error" in caplog.text


def test_main_malformed_boundary_is_not_reported_as_invalid_position(monkeypatch, caplog):
    import eez_watch.main as cli
    from eez_watch.models.boundary import Boundary, BoundarySet, InvalidBoundary

    open_ring = Boundary.from_coordinates([[(0, 0), (10, 0), (10, 10), (0, 10)]])
    monkeypatch.setattr(cli, "_load_boundary", lambda path: BoundarySet("broken", (open_ring,)))
    with pytest.raises(InvalidBoundary):
        main(["--lat", "5", "--lon", "5"])
    assert "Invalid position" not in caplog.text


def test_main_marine_unexpected_payload_is_logged(geojson_file, caplog, monkeypatch):
    from unittest.mock import Mock

    import requests

    mock_response = Mock(status_code=200)
    mock_response.json.return_value = {"hourly": [1.0, 2.0]}
    monkeypatch.setattr(requests, "get", lambda *args, **kwargs: mock_response)
    main(["--boundary", str(geojson_file), "--lat", "5", "--lon", "5", "--marine"])
    assert "Marine data error" in caplog.text
