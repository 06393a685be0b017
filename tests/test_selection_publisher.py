"""
Test selection event messages and publishing (without a real broker).

The paho client is replaced with a mock, so no network is needed.
"""

import json
from unittest.mock import MagicMock

import paho.mqtt.client as mqtt
import pytest

from rms_mqtt import (
    LogEvent,
    SelectionEvent,
    SelectionEventType,
    SelectionPublisher,
    Timestamp,
    create_logger,
)


@pytest.fixture
def publisher():
    publisher = SelectionPublisher(
        broker_host="localhost",
        topic="rms/data/selection/test",
        logger=create_logger("test"),
    )
    publisher.client = MagicMock()
    publisher.client.publish.return_value = MagicMock(rc=mqtt.MQTT_ERR_SUCCESS)
    return publisher


def test_event_for_zone_and_clear():
    selected = SelectionEvent.for_zone("분당", service_id="rms_01", catalog="zones_kr")
    cleared = SelectionEvent.for_zone(None, service_id="rms_01", catalog="zones_kr")

    assert selected.event_type == SelectionEventType.SELECTED
    assert selected.zone == "분당"
    assert cleared.event_type == SelectionEventType.CLEARED
    assert cleared.zone is None
    assert selected.timestamp.to_datetime().tzinfo is not None


def test_event_serialization():
    event = SelectionEvent(
        timestamp=Timestamp("2026-10-19T09:12:03+00:00"),
        service_id="rms_01",
        catalog="sectors",
        event_type=SelectionEventType.SELECTED,
        zone="sector3",
    )

    data = json.loads(json.dumps(event.to_dict()))

    assert data == {
        "schema_version": "1.0",
        "timestamp": "2026-10-19T09:12:03+00:00",
        "service_id": "rms_01",
        "catalog": "sectors",
        "event_type": "selected",
        "zone": "sector3",
    }
    assert SelectionEvent.from_dict(data) == event


def test_event_invariants():
    with pytest.raises(ValueError):
        SelectionEvent(Timestamp.now(), "rms_01", "sectors", SelectionEventType.SELECTED)
    with pytest.raises(ValueError):
        SelectionEvent(Timestamp.now(), "rms_01", "sectors", SelectionEventType.CLEARED, zone="A")
    with pytest.raises(ValueError):
        SelectionEvent(Timestamp.now(), "", "sectors", SelectionEventType.CLEARED)


@pytest.mark.parametrize("data", [
    {"service_id": "rms_01", "catalog": "sectors", "event_type": "selected", "zone": "A"},
    {"timestamp": "2026-10-19T09:12:03", "service_id": "rms_01", "catalog": "sectors",
     "event_type": "teleported", "zone": "A"},
])
def test_event_from_dict_rejects_bad_data(data):
    with pytest.raises(ValueError):
        SelectionEvent.from_dict(data)


def test_publish_requires_connection(publisher):
    event = SelectionEvent.for_zone("sector1", service_id="rms_01", catalog="sectors")

    assert publisher.publish_selection(event) is False
    publisher.client.publish.assert_not_called()


def test_publish_selection(publisher):
    publisher._connected.set()
    event = SelectionEvent.for_zone("수지", service_id="rms_01", catalog="zones_kr")

    assert publisher.publish_selection(event) is True

    kwargs = publisher.client.publish.call_args.kwargs
    assert kwargs["topic"] == "rms/data/selection/test"
    assert kwargs["retain"] is True
    assert kwargs["qos"] == 0
    payload = json.loads(kwargs["payload"])
    assert payload["zone"] == "수지"
    assert "수지" in kwargs["payload"]
    assert publisher.get_stats()["message_count"] == 1


def test_publish_broker_rejection(publisher):
    publisher._connected.set()
    publisher.client.publish.return_value = MagicMock(rc=mqtt.MQTT_ERR_NO_CONN)
    event = SelectionEvent.for_zone(None, service_id="rms_01", catalog="sectors")

    assert publisher.publish_selection(event) is False
    assert publisher.get_stats()["message_count"] == 0


def test_connect_failure_returns_false(publisher):
    publisher.client.connect.side_effect = ConnectionRefusedError("refused")

    assert publisher.connect(timeout=0.1) is False
    assert publisher.is_connected() is False


def test_connection_callbacks(publisher):
    publisher._on_connect(publisher.client, None, {}, MagicMock(is_failure=False), None)
    assert publisher.is_connected()

    publisher._on_disconnect(publisher.client, None, {}, MagicMock(), None)
    assert not publisher.is_connected()

    publisher._on_connect(publisher.client, None, {}, MagicMock(is_failure=True), None)
    assert not publisher.is_connected()


def test_structured_log_entry():
    logger = create_logger("test")

    entry = logger.build_entry(
        "ERROR",
        LogEvent.MQTT_PUBLISH_ERROR,
        "Error publishing message",
        metadata={"topic": "rms/data/selection/test"},
        exc_info=RuntimeError("boom"),
    )

    assert entry["event"] == "error.mqtt_publish"
    assert entry["component"] == "test"
    assert entry["metadata"] == {"topic": "rms/data/selection/test"}
    assert entry["exception"] == {"type": "RuntimeError", "message": "boom"}
