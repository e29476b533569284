"""Runtime settings, loaded from an optional YAML file.

Lookup order: explicit path, then the JSON_INSPECTOR_CONFIG environment
variable, then ./config.yaml. Without any file the defaults apply.

Example::

    max_input_bytes: 5242880
    preview_length: 500
    top_values: 5
    indent_size: 4
    logging:
      level: DEBUG
      file: logs/json_inspector.log
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "JSON_INSPECTOR_CONFIG"
DEFAULT_CONFIG_PATH = "config.yaml"
MAX_INPUT_BYTES = 10 * 1024 * 1024
INT_SETTINGS = {"max_input_bytes", "preview_length", "top_values", "indent_size"}


@dataclass
class InspectorConfig:
    max_input_bytes: int = MAX_INPUT_BYTES
    preview_length: int = 1000
    top_values: int = 10
    indent_size: int = 2
    log_level: str = "INFO"
    log_file: Optional[str] = None


def _flatten(raw: Dict[str, Any]) -> Dict[str, Any]:
    values = dict(raw)
    section = values.pop("logging", None)
    if isinstance(section, dict):
        if "level" in section:
            values["log_level"] = section["level"]
        if "file" in section:
            values["log_file"] = section["file"]
    elif section is not None:
        raise ValueError("'logging' must be a mapping")
    return values


def _coerce(name: str, value: Any) -> Any:
    if name == "log_file":
        return None if value is None else str(value)
    if name in INT_SETTINGS:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Config value '{name}' must be an integer, got {value!r}")
        if value < 0:
            raise ValueError(f"Config value '{name}' must be >= 0, got {value}")
        return value
    if not isinstance(value, str):
        raise ValueError(f"Config value '{name}' must be a string, got {value!r}")
    return value


def config_from_dict(raw: Dict[str, Any]) -> InspectorConfig:
    values = _flatten(raw or {})
    known = {f.name for f in fields(InspectorConfig)}
    kwargs: Dict[str, Any] = {}
    for name, value in values.items():
        if name not in known:
            logger.warning("Ignoring unknown config key: %s", name)
            continue
        kwargs[name] = _coerce(name, value)
    if "log_level" in kwargs:
        kwargs["log_level"] = kwargs["log_level"].upper()
    return InspectorConfig(**kwargs)


def resolve_config_path(path: Optional[str] = None) -> Optional[Path]:
    candidate = path or os.environ.get(CONFIG_ENV_VAR)
    if candidate:
        return Path(candidate)
    default = Path(DEFAULT_CONFIG_PATH)
    return default if default.exists() else None


def load_config(path: Optional[str] = None) -> InspectorConfig:
    config_path = resolve_config_path(path)
    if config_path is None:
        return InspectorConfig()

    with open(config_path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")

    config = config_from_dict(raw)
    logger.debug("Loaded config from %s", config_path)
    return config
