"""Pricing configuration loader.

A pricing file is read in three stages: the file is read as UTF-8 text,
the text is decoded as JSON, and the decoded data is validated against
PricingConfiguration. Each stage reports its failure as a ConfigError whose
error_type names the stage, so the CLI and the web app can present file,
syntax and schema problems differently.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from dressing.application.config.schema import PricingConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Exception raised when a pricing configuration cannot be used.

    Attributes:
        message: Human-readable summary, also returned by str().
        error_type: Failing stage: "file_not_found", "permission_denied",
            "file_read_error", "json_parse", "validation" or "domain".
        path: The pricing file, when the configuration came from disk.
        details: Structured entries. JSON errors carry line, column and
            message; schema errors carry path, message, value and error_type.
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


def _json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location the way it appears in the file.

    List indices are attached to the preceding key; an empty location
    means the document root.

    Args:
        loc: Location tuple from a pydantic error entry.

    Returns:
        Dotted path such as "transport_zones[1].fee", or "<root>".

    Examples:
        >>> _json_path(("rates", "facade"))
        'rates.facade'
        >>> _json_path(("transport_zones", 1, "fee"))
        'transport_zones[1].fee'
        >>> _json_path(())
        '<root>'
    """
    rendered = ""
    for segment in loc:
        if isinstance(segment, int):
            rendered += f"[{segment}]"
        elif rendered:
            rendered += f".{segment}"
        else:
            rendered = str(segment)
    return rendered or "<root>"


def _schema_error(error: PydanticValidationError) -> ConfigError:
    """Convert a pydantic failure into a single validation ConfigError.

    Args:
        error: The exception raised by PricingConfiguration.model_validate.

    Returns:
        ConfigError whose message lists one offending value per line and
        whose details keep the structured form of each entry.
    """
    details = [
        {
            "path": _json_path(entry["loc"]),
            "message": entry["msg"],
            "value": entry.get("input"),
            "error_type": entry["type"],
        }
        for entry in error.errors()
    ]

    lines = ["Pricing configuration validation failed:"]
    for detail in details:
        line = f"  - {detail['path']}: {detail['message']}"
        value = detail["value"]
        # Section values are not echoed
        if value is not None and not isinstance(value, (dict, list)):
            line += f" (got: {value!r})"
        lines.append(line)

    return ConfigError(
        message="\n".join(lines),
        error_type="validation",
        details=details,
    )


def _read_text(path: Path) -> str:
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )
    try:
        return path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )


def _decode_json(path: Path, content: str) -> Any:
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in config file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )


def load_config(path: Path) -> PricingConfiguration:
    """Load and validate a pricing configuration from a JSON file.

    Omitted sections keep the reference price list, so an empty object
    ("{}") is a valid file describing the default rates.

    Args:
        path: Path to the JSON pricing file.

    Returns:
        A validated PricingConfiguration instance.

    Raises:
        ConfigError: If the file cannot be read, decoded or validated. The
            error's path is always set to the file.

    Example:
        >>> try:
        ...     config = load_config(Path("prices.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"{detail['path']}: {detail['message']}")
    """
    data = _decode_json(path, _read_text(path))
    logger.debug(f"Decoded pricing configuration from {path}")
    try:
        return load_config_from_dict(data)
    except ConfigError as e:
        e.path = path
        raise


def load_config_from_dict(data: Any) -> PricingConfiguration:
    """Validate already decoded pricing data.

    Used for configuration that does not come from a file, such as data
    built in code or received by the web API.

    Args:
        data: Decoded JSON document; anything other than an object is
            reported at "<root>".

    Returns:
        A validated PricingConfiguration instance.

    Raises:
        ConfigError: With error_type "validation" if the data breaks the schema.
    """
    try:
        return PricingConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise _schema_error(e) from e
