"""
Structured Logging for RMS
==========================

Bounded Context: Observability

JSON-structured logging with typed events.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from rms_mqtt.logging import create_logger, LogEvent
    >>> logger = create_logger("service")
    >>> logger.info(
    ...     event=LogEvent.SELECTION_CHANGED,
    ...     message="Zone selected",
    ...     metadata={'zone': 'sector3', 'catalog': 'sectors'}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
