from eez_watch.alerts import AlertKind, AlertTracker, build_alert_message
from eez_watch.models.boundary import Point
from eez_watch.models.safety import INSIDE_STATE, OUTSIDE_STATE, UNKNOWN_STATE

POINT = Point(70.0, 15.0)


def test_first_outside_raises_once():
    events = []
    tracker = AlertTracker([events.append])
    assert tracker.observe(OUTSIDE_STATE, POINT).kind is AlertKind.RAISED
    assert tracker.observe(OUTSIDE_STATE, POINT) is None
    assert tracker.observe(OUTSIDE_STATE, POINT) is None
    assert [e.kind for e in events] == [AlertKind.RAISED]
    assert tracker.alert_active


def test_inside_to_outside_and_back():
    tracker = AlertTracker()
    assert tracker.observe(INSIDE_STATE, POINT) is None
    raised = tracker.observe(OUTSIDE_STATE, POINT)
    assert raised.kind is AlertKind.RAISED
    assert raised.safety is OUTSIDE_STATE
    cleared = tracker.observe(INSIDE_STATE, POINT)
    assert cleared.kind is AlertKind.CLEARED
    assert not tracker.alert_active
    assert tracker.observe(INSIDE_STATE, POINT) is None


def test_unknown_to_outside_raises():
    tracker = AlertTracker()
    assert tracker.observe(UNKNOWN_STATE, POINT) is None
    assert tracker.observe(OUTSIDE_STATE, POINT).kind is AlertKind.RAISED


def test_losing_boundary_keeps_alert_active():
    tracker = AlertTracker()
    tracker.observe(OUTSIDE_STATE, POINT)
    assert tracker.observe(UNKNOWN_STATE, POINT) is None
    assert tracker.alert_active


def test_inside_without_alert_emits_nothing():
    tracker = AlertTracker()
    assert tracker.observe(UNKNOWN_STATE, POINT) is None
    assert tracker.observe(INSIDE_STATE, POINT) is None


def test_subscribe_receives_raise_and_clear():
    events = []
    tracker = AlertTracker()
    tracker.subscribe(events.append)
    tracker.observe(OUTSIDE_STATE, POINT)
    tracker.observe(INSIDE_STATE, POINT)
    assert [e.kind for e in events] == [AlertKind.RAISED, AlertKind.CLEARED]


def test_build_alert_message():
    message = build_alert_message(Point(70.1, 15.5))
    assert message.subject == "EEZ ALERT: Vessel outside EEZ"
    assert message.maps_link == "https://maps.google.com/?q=15.5000,70.1000"
    assert "Coordinates: 15.5000, 70.1000" in message.body
    assert message.maps_link in message.share_text
    assert message.mailto.startswith("mailto:?subject=EEZ%20ALERT%3A%20Vessel%20outside%20EEZ&body=")
    assert "\n" not in message.mailto
