"""Event script schema and loading system.

This package provides JSON-based loading and validation of event scripts:
a shelf configuration, a saved divider layout to restore, session settings,
and a sequence of interaction events to replay.

Public API:
    - ScriptConfiguration: Root script model
    - ShelfConfigSchema: Shelf enclosure model
    - DividerSchema: Divider model
    - EventSchema: Discriminated union of event payloads
    - load_script: Load a script from a JSON file
    - load_script_from_dict: Load a script from a dictionary
    - parse_event: Validate a single event payload
    - ConfigError: Exception for configuration errors
    - config_to_*: Convert validated schemas to domain objects

Example:
    >>> from pathlib import Path
    >>> from shelves.application.config import load_script, ConfigError
    >>>
    >>> try:
    ...     script = load_script(Path("session.json"))
    ...     print(f"{len(script.events)} events")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from shelves.application.config.adapter import (
    config_to_divider,
    config_to_dividers,
    config_to_event,
    config_to_events,
    config_to_settings,
    config_to_shelf,
)
from shelves.application.config.loader import (
    ConfigError,
    load_script,
    load_script_from_dict,
    parse_event,
)
from shelves.application.config.schemas import (
    SUPPORTED_VERSIONS,
    DividerSchema,
    EventSchema,
    LayoutSchema,
    ScriptConfiguration,
    SessionSettingsSchema,
    ShelfConfigSchema,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "ConfigError",
    "DividerSchema",
    "EventSchema",
    "LayoutSchema",
    "ScriptConfiguration",
    "SessionSettingsSchema",
    "ShelfConfigSchema",
    "config_to_divider",
    "config_to_dividers",
    "config_to_event",
    "config_to_events",
    "config_to_settings",
    "config_to_shelf",
    "load_script",
    "load_script_from_dict",
    "parse_event",
]
