"""
Configuration - Handles build configuration and input files.

This module handles:
- Configuration dataclass with all options
- JSON configuration file support
- Loading the schema and records JSON files
- Configuration validation
"""

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from fixed_length_builder.exceptions import ConfigError


@dataclass
class Config:
    """
    Configuration for a fixed-length file build.

    Attributes:
        schema_file: JSON file with the schema (object of key -> rule)
        records_file: JSON file with the records (array of objects)
        output_file: Output path (None writes to stdout)
        glue: Line separator
        encoding: Output file encoding
        total_length: Expected line length, checked against every line
        log_level: Logging level
        verbose: Enable verbose output
    """

    schema_file: Path = field(default_factory=lambda: Path("schema.json"))
    records_file: Path = field(default_factory=lambda: Path("records.json"))
    output_file: Optional[Path] = None
    glue: str = "\n"
    encoding: str = "latin-1"
    total_length: Optional[int] = None
    log_level: str = "WARNING"
    verbose: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        data = {}
        for key, value in asdict(self).items():
            if isinstance(value, Path):
                data[key] = str(value)
            else:
                data[key] = value
        return data

    def save_to_file(self, path: Path) -> None:
        """Save configuration to JSON file."""
        path.write_text(json.dumps(self.to_dict(), indent=2))

    @classmethod
    def load_from_file(cls, path: Path) -> "Config":
        """Load configuration from JSON file."""
        try:
            data = json.loads(path.read_text())
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Cannot read configuration {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration {path} must be a JSON object")
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create config from dictionary."""
        data = dict(data)
        for key in ("schema_file", "records_file", "output_file"):
            if data.get(key):
                data[key] = Path(data[key])

        # Filter only known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in known_fields}

        return cls(**filtered_data)

    def validate(self) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not self.schema_file.is_file():
            errors.append(f"Schema file does not exist: {self.schema_file}")

        if not self.records_file.is_file():
            errors.append(f"Records file does not exist: {self.records_file}")

        if self.output_file and self.output_file.is_dir():
            errors.append(f"Output path is a directory: {self.output_file}")

        if self.total_length is not None and (
            not isinstance(self.total_length, int) or self.total_length < 0
        ):
            errors.append(f"Invalid total length: {self.total_length}")

        try:
            "".encode(self.encoding)
        except LookupError:
            errors.append(f"Unknown encoding: {self.encoding}")

        valid_log_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.log_level.upper() not in valid_log_levels:
            errors.append(f"Invalid log level: {self.log_level}")

        return errors

    def is_valid(self) -> bool:
        """Check if configuration is valid."""
        return len(self.validate()) == 0


def create_default_config() -> Config:
    """Create a configuration with default values."""
    return Config()


def _read_json(path: Path, what: str) -> Any:
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read {what} file {path}: {e}") from e


def load_schema(path: Path) -> Dict[str, Dict[str, Any]]:
    """
    Load a schema from a JSON file.

    The file holds an object of field key -> rule; JSON object order is
    the output order.

    Raises:
        ConfigError: If the file cannot be read or is not an object of objects
    """
    data = _read_json(path, "schema")
    if not isinstance(data, dict):
        raise ConfigError(f"Schema file {path} must contain a JSON object")
    for key, rule in data.items():
        if not isinstance(rule, dict):
            raise ConfigError(f"Schema field '{key}' must be a JSON object")
    return data


def load_records(path: Path) -> List[Dict[str, Any]]:
    """
    Load records from a JSON file holding an array of objects.

    Raises:
        ConfigError: If the file cannot be read or has the wrong shape
    """
    data = _read_json(path, "records")
    if not isinstance(data, list):
        raise ConfigError(f"Records file {path} must contain a JSON array")
    for index, record in enumerate(data, 1):
        if not isinstance(record, dict):
            raise ConfigError(f"Record {index} in {path} must be a JSON object")
    return data
