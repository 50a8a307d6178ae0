"""Configuration for the well-formedness checker and its command-line tool.

Configuration objects are immutable; use ``override`` to derive a modified
copy. Values can be loaded from a dictionary, a JSON string or a JSON file.
"""

import json
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .errors import ConfigError, ConfigValidationError

VALID_OUTPUT_FORMATS = ("text", "json")
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class CheckerConfig:
    """Settings shared by the file API and the CLI."""

    encoding: str = "utf-8"
    output_format: str = "text"
    log_level: str = "WARNING"
    show_summary: bool = False
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the configuration."""
        try:
            self._validate()
        except ValueError as e:
            raise ConfigValidationError(str(e), field_name=e.args[1]) from e

    def _validate(self) -> None:
        if not self.encoding:
            raise ValueError("encoding cannot be empty", "encoding")
        if self.output_format not in VALID_OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {list(VALID_OUTPUT_FORMATS)}",
                "output_format",
            )
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {list(VALID_LOG_LEVELS)}", "log_level"
            )
        if not isinstance(self.show_summary, bool):
            raise ValueError("show_summary must be a boolean", "show_summary")
        if self.correlation_id is not None and not isinstance(self.correlation_id, str):
            raise ValueError("correlation_id must be a string or None", "correlation_id")

    def override(self, **kwargs: Any) -> "CheckerConfig":
        """Create a new configuration with specific overrides.

        ``None`` values are ignored so that unset command-line options can be
        passed straight through.

        Example:
            >>> config = CheckerConfig().override(output_format="json")
            >>> config.output_format
            'json'
        """
        changes = {key: value for key, value in kwargs.items() if value is not None}
        unknown = set(changes) - {f.name for f in fields(self)}
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {sorted(unknown)}",
                field_name=sorted(unknown)[0],
            )
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CheckerConfig":
        """Create configuration from a dictionary.

        Unknown keys are rejected rather than silently dropped.
        """
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration data must be a JSON object")
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {sorted(unknown)}",
                field_name=sorted(unknown)[0],
                suggestions=[f"Valid fields are: {', '.join(sorted(known))}"],
            )
        return cls(**data)

    @classmethod
    def from_json(cls, json_str: str) -> "CheckerConfig":
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid configuration JSON: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "CheckerConfig":
        """Load configuration from a JSON file.

        A missing file yields the default configuration.
        """
        path = Path(config_path)
        if not path.exists():
            return cls()
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Could not read config file {path}: {e}") from e
        return cls.from_json(text)
