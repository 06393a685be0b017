"""
Selection Event Message Schema
==============================

Bounded Context: Selection Event Data Structures

Schema for selection changes published via MQTT.

Message Flow:
    SelectionState → SelectionEvent → SelectionPublisher → MQTT → UI

Example JSON:
    {
        "schema_version": "1.0",
        "timestamp": "2026-10-19T09:12:03.481516+00:00",
        "service_id": "rms_01",
        "catalog": "sectors",
        "event_type": "selected",
        "zone": "sector3"
    }
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .common import Timestamp

SCHEMA_VERSION = "1.0"


class SelectionEventType(str, Enum):
    """Kind of selection change."""
    SELECTED = "selected"
    CLEARED = "cleared"


@dataclass(frozen=True)
class SelectionEvent:
    """
    Immutable selection change message.

    Invariants:
        - SELECTED events carry a non-empty zone
        - CLEARED events carry no zone
    """
    timestamp: Timestamp
    service_id: str
    catalog: str
    event_type: SelectionEventType
    zone: Optional[str] = None
    schema_version: str = SCHEMA_VERSION

    def __post_init__(self):
        """Validate invariants."""
        if not self.service_id:
            raise ValueError("service_id cannot be empty")
        if self.event_type == SelectionEventType.SELECTED and not self.zone:
            raise ValueError("SELECTED event requires a zone")
        if self.event_type == SelectionEventType.CLEARED and self.zone is not None:
            raise ValueError(f"CLEARED event must not carry a zone, got {self.zone!r}")

    @classmethod
    def for_zone(
        cls,
        zone: Optional[str],
        service_id: str,
        catalog: str
    ) -> 'SelectionEvent':
        """Build the event describing a state change to `zone` (None = cleared)."""
        event_type = (
            SelectionEventType.CLEARED if zone is None
            else SelectionEventType.SELECTED
        )
        return cls(
            timestamp=Timestamp.now(),
            service_id=service_id,
            catalog=catalog,
            event_type=event_type,
            zone=zone,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            'schema_version': self.schema_version,
            'timestamp': self.timestamp.to_dict(),
            'service_id': self.service_id,
            'catalog': self.catalog,
            'event_type': self.event_type.value,
            'zone': self.zone,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SelectionEvent':
        """Deserialize from dict.

        Raises:
            ValueError: If required keys missing or invalid values
        """
        try:
            return cls(
                schema_version=data.get('schema_version', SCHEMA_VERSION),
                timestamp=Timestamp(data['timestamp']),
                service_id=data['service_id'],
                catalog=data['catalog'],
                event_type=SelectionEventType(data['event_type']),
                zone=data.get('zone'),
            )
        except KeyError as e:
            raise ValueError(f"Missing required SelectionEvent field: {e}")
        except TypeError as e:
            raise ValueError(f"Invalid SelectionEvent data: {e}")
