"""Quotation file loading.

A quotation is read in three steps, each reporting its own failure as a
``ConfigError``:

1. Reading the file (missing, unreadable or empty).
2. Parsing JSON (syntax errors carry line and column).
3. Validating against ``QuotationConfiguration`` (errors carry JSON paths
   such as ``rooms[0].units[1].width_mm``).
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from wardrobes.application.config.schema import QuotationConfiguration


class ConfigError(Exception):
    """A quotation file could not be loaded.

    Attributes:
        message: Human-readable description, printed by the CLI.
        error_type: One of file_not_found, permission_denied,
            file_read_error, empty_file, json_parse, validation.
        path: File being loaded, None for in-memory data.
        details: One entry per problem. JSON errors carry line/column;
            validation errors carry path/message/value/error_type.
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


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Join a pydantic error location into a JSON path.

    Examples:
        >>> _format_json_path(("rooms", 0, "units", 1, "width_mm"))
        'rooms[0].units[1].width_mm'
        >>> _format_json_path(("overrides", "0:w1", "panels"))
        'overrides.0:w1.panels'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        else:
            path = f"{path}.{segment}" if path else str(segment)
    return path


def _describe(problem: dict[str, Any]) -> str:
    line = f"  - {problem['path'] or '(root)'}: {problem['message']}"
    value = problem["value"]
    # Echo scalars only; whole rooms or units make the message unreadable
    if value is not None and not isinstance(value, (dict, list)):
        line += f" (got: {value!r})"
    return line


def _read(path: Path) -> str:
    if not path.exists():
        raise ConfigError(
            f"Quotation file not found: {path}", error_type="file_not_found", path=path
        )
    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            f"Permission denied reading quotation file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            f"Error reading quotation file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )
    if not content.strip():
        raise ConfigError(
            f"Quotation file is empty: {path}", error_type="empty_file", path=path
        )
    return content


def _parse(content: str, path: Path) -> Any:
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in quotation file: {path} "
            f"(line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )


def _validate(data: Any, path: Path | None = None) -> QuotationConfiguration:
    try:
        return QuotationConfiguration.model_validate(data)
    except PydanticValidationError as e:
        problems = [
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
            for err in e.errors()
        ]
        header = f"Quotation {path} is invalid:" if path else "Quotation is invalid:"
        raise ConfigError(
            "\n".join([header, *(_describe(problem) for problem in problems)]),
            error_type="validation",
            path=path,
            details=problems,
        )


def load_config(path: Path) -> QuotationConfiguration:
    """Load and validate a quotation from a JSON file.

    Args:
        path: Path to the quotation JSON file.

    Returns:
        The validated quotation.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
            ``error_type`` tells the steps apart.
    """
    return _validate(_parse(_read(path), path), path)


def load_config_from_dict(data: dict[str, Any]) -> QuotationConfiguration:
    """Validate quotation data that is already in memory.

    Raises:
        ConfigError: With ``error_type == "validation"``.
    """
    return _validate(data)
