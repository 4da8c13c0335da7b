from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..services.pipeline import ReportConfig
from ..services.render import RenderOptions
from ..text.csv_parser import CsvOptions

"""Report config loader.

Responsibilities:
- Load YAML (default config/report.yml)
- Validate against the packaged report_schema.json
- Apply defaults for every omitted key
"""

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "SCHEMA_PATH",
    "config_from_mapping",
    "load_config",
]

DEFAULT_CONFIG_PATH = Path("config/report.yml")
SCHEMA_PATH = Path(__file__).parent / "report_schema.json"


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: the schema file is missing or unreadable, or the data
            fails validation (wrong types, unknown keys, negative drop_last)
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")
    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def config_from_mapping(data: dict[str, Any]) -> ReportConfig:
    """Build a ReportConfig from already validated data."""
    return ReportConfig(
        csv=CsvOptions.from_mapping(data.get("csv")),
        render=RenderOptions(**(data.get("render") or {})),
        drop_last=data.get("drop_last", 0),
    )


def load_config(path: Path) -> ReportConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping, got {type(data).__name__}")

    _validate_config_schema(data)
    return config_from_mapping(data)
