"""
rms_service - Menu selector service

Wires zone catalogs, random selection, and the observable selection
state, with optional MQTT publishing of every change.

Architecture:
- MenuSelectorService: Main orchestrator
- CommandRegistry: Explicit command registration (text UI)
- AppConfig: Configuration management
"""

from rms_service.config import AppConfig, MQTTConfig, SelectorConfig
from rms_service.registry import CommandRegistry, CommandNotAvailableError
from rms_service.service import MenuSelectorService

__all__ = [
    "AppConfig",
    "MQTTConfig",
    "SelectorConfig",
    "CommandRegistry",
    "CommandNotAvailableError",
    "MenuSelectorService",
]
