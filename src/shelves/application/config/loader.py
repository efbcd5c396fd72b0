"""Event script loader with comprehensive error handling.

This module loads and parses JSON event scripts. It handles file system
errors, JSON parsing errors, and Pydantic validation errors with clear,
actionable error messages.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from shelves.application.config.schemas import EventSchema, ScriptConfiguration


class ConfigError(Exception):
    """A script could not be read, parsed or validated.

    Attributes:
        message: Human-readable summary
        error_type: file_not_found, file_read_error, json_parse or validation
        path: Script file the error came from, when loading from disk
        details: One entry per problem; JSON errors carry line and column,
            validation errors carry a dotted path and message
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


_EVENT_ADAPTER: TypeAdapter = TypeAdapter(EventSchema)


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("shelf", "width"))
        'shelf.width'
        >>> _format_json_path(("events", 2, "MOUSE_MOVE", "x"))
        'events[2].MOUSE_MOVE.x'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Script validation failed:"]
    for detail in details:
        path = detail["path"] or "<root>"
        value = detail.get("value")
        if value is not None and not isinstance(value, dict):
            lines.append(f"  - {path}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {detail['message']}")
    return "\n".join(lines)


def _validation_error(
    error: PydanticValidationError, path: Path | None = None
) -> ConfigError:
    details = _extract_validation_errors(error)
    return ConfigError(
        message=_format_validation_error_message(details),
        error_type="validation",
        path=path,
        details=details,
    )


def load_script(path: Path) -> ScriptConfiguration:
    """Load and validate an event script from a JSON file.

    Args:
        path: Path to the JSON script

    Returns:
        A validated ScriptConfiguration instance

    Raises:
        ConfigError: With error_type "file_not_found", "file_read_error",
            "json_parse" or "validation".
    """
    if not path.exists():
        raise ConfigError(
            message=f"Script file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            message=f"Error reading script file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in script file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    try:
        return ScriptConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise _validation_error(e, path) from e


def load_script_from_dict(data: dict[str, Any]) -> ScriptConfiguration:
    """Load and validate an event script from a dictionary.

    Raises:
        ConfigError: With error_type "validation".
    """
    try:
        return ScriptConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise _validation_error(e) from e


def parse_event(data: dict[str, Any]) -> EventSchema:
    """Validate a single event payload such as ``{"type": "UNHOVER"}``.

    Raises:
        ConfigError: If the payload is not a known, well-formed event.
    """
    try:
        return _EVENT_ADAPTER.validate_python(data)
    except PydanticValidationError as e:
        raise _validation_error(e) from e
