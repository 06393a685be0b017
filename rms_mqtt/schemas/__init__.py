"""
Message Schemas
===============

Immutable message types published by RMS.
"""

from .common import Timestamp
from .selection import SCHEMA_VERSION, SelectionEvent, SelectionEventType

__all__ = [
    'Timestamp',
    'SCHEMA_VERSION',
    'SelectionEvent',
    'SelectionEventType',
]
