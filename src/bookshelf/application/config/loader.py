"""Loading of JSON shelving unit configurations.

Every failure surfaces as a ConfigError. Schema violations are reported per
field using the dotted paths the ``validate`` command prints
(``shelf.width``, ``addons.lamps``), including the cross-field board
thickness rule, which is attributed to ``shelf.board_thickness``.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from bookshelf.application.config.schema import BookshelfConfiguration

# Cross-field rules raised by model validators, keyed by error type, and the
# field each one is reported against. The rule's context carries the value
# under the same name.
_RULE_FIELDS = {"board_thickness_too_large": "board_thickness"}


class ConfigError(Exception):
    """A configuration that cannot be turned into a shelving unit.

    Attributes:
        message: Human readable summary
        error_type: file_not_found, file_read_error, json_parse or validation
        path: The configuration file, if the configuration came from one
        details: One entry per problem. Validation entries carry ``path``,
            ``message``, ``value`` and ``error_type``; JSON entries carry
            ``line`` and ``message``.
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


def validation_details(error: PydanticValidationError) -> list[dict[str, Any]]:
    """Describe each schema violation by the field it concerns.

    Values that are whole objects (a missing key reports its parent) are
    left out so only scalar offending values are shown.
    """
    details: list[dict[str, Any]] = []
    for err in error.errors():
        location = [str(part) for part in err["loc"]]
        value = err.get("input")
        rule_field = _RULE_FIELDS.get(err["type"])
        if rule_field is not None:
            location.append(rule_field)
            value = err["ctx"][rule_field]
        details.append(
            {
                "path": ".".join(location),
                "message": err["msg"],
                "value": None if isinstance(value, dict) else value,
                "error_type": err["type"],
            }
        )
    return details


def _validate(data: Any, source: Path | None) -> BookshelfConfiguration:
    try:
        return BookshelfConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = validation_details(e)
        lines = [f"Invalid shelving unit configuration in {source or 'data'}:"]
        lines.extend(f"  - {d['path'] or 'schema'}: {d['message']}" for d in details)
        raise ConfigError(
            "\n".join(lines), error_type="validation", path=source, details=details
        ) from e


def _read_json(path: Path) -> Any:
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigError(
            f"Config file not found: {path}", error_type="file_not_found", path=path
        ) from e
    except OSError as e:
        raise ConfigError(
            f"Cannot read config file {path}: {e.strerror or e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in {path} at line {e.lineno}: {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "message": e.msg}],
        ) from e


def load_config(path: Path) -> BookshelfConfiguration:
    """Load a shelving unit configuration from a JSON file.

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON, or does
            not match the schema.
    """
    return _validate(_read_json(path), path)


def load_config_from_dict(data: dict[str, Any]) -> BookshelfConfiguration:
    """Load a shelving unit configuration from already parsed data.

    Raises:
        ConfigError: If the data does not match the schema.
    """
    return _validate(data, None)
