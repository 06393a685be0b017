"""
RMS MQTT Communication Package
==============================

Bounded Context: Selection change messaging

Publishes selection changes so a remote UI can follow the current zone.

Architecture:
- schemas/: Immutable message types (SelectionEvent, Timestamp)
- publishers/: Message producers (SelectionPublisher)
- logging/: Structured JSON logging for observability

Example:
    >>> from rms_mqtt import SelectionPublisher, SelectionEvent, create_logger
    >>>
    >>> publisher = SelectionPublisher(
    ...     broker_host="localhost",
    ...     topic="rms/data/selection/rms_01",
    ...     logger=create_logger("publisher")
    ... )
    >>> publisher.connect()
    >>> event = SelectionEvent.for_zone("sector3", service_id="rms_01", catalog="sectors")
    >>> publisher.publish_selection(event)
"""

__version__ = "1.0.0"

from .schemas import (
    Timestamp,
    SelectionEvent,
    SelectionEventType,
)

from .publishers import (
    BasePublisher,
    SelectionPublisher,
)

from .logging import (
    LogEvent,
    StructuredLogger,
    create_logger,
)

__all__ = [
    '__version__',
    # Schemas
    'Timestamp',
    'SelectionEvent',
    'SelectionEventType',
    # Publishers
    'BasePublisher',
    'SelectionPublisher',
    # Logging
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
