"""
Shared Core Module
==================

Event system, configuration and logging setup.
"""

# Event System
from .event_bus import EventBus, EventPayload
from . import events

# Configuration
from .configuration import (
    ConfigManager,
    LoggingConfig,
    LookupConfig,
    SystemConfig,
    ValidationLevel,
    get_config,
    get_config_manager,
)
from .logging_setup import configure_logging

__all__ = [
    # Event System
    "EventBus",
    "EventPayload",
    "events",
    # Configuration
    "ConfigManager",
    "LoggingConfig",
    "LookupConfig",
    "SystemConfig",
    "ValidationLevel",
    "get_config",
    "get_config_manager",
    # Logging
    "configure_logging",
]
