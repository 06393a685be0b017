"""
MQTT Publishers
==============

Bounded Context: Message Production

Public API
----------
    BasePublisher: Abstract publisher (for custom publishers)
    SelectionPublisher: Selection event publisher
"""

from .base import BasePublisher
from .selection import SelectionPublisher

__all__ = [
    'BasePublisher',
    'SelectionPublisher',
]
