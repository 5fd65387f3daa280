"""YAML config loader with environment override and runtime get/set."""

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from weatherdash.config.schema import DashboardConfig
from weatherdash.models.common import ClientMode

logger = logging.getLogger(__name__)

API_KEY_ENV = "OPENWEATHER_API_KEY"


def load_config(path: str | Path | None = None) -> DashboardConfig:
    """Load and validate config from a YAML file.

    A missing or empty file yields the defaults (demo mode). When the file
    carries no API key and OPENWEATHER_API_KEY is set, the key is taken from
    the environment and the client switches to live mode.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        if path.exists():
            with open(path) as f:
                raw = yaml.safe_load(f) or {}
        else:
            logger.info("Config %s not found, using defaults", path)

    env_key = os.environ.get(API_KEY_ENV, "").strip()
    api = raw.setdefault("api", {}) or {}
    raw["api"] = api
    if env_key and not api.get("api_key"):
        api["api_key"] = env_key
        api.setdefault("mode", ClientMode.LIVE.value)

    return DashboardConfig(**raw)


def save_config(config: DashboardConfig, path: str | Path) -> None:
    """Write the config back to YAML, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = json.loads(config.model_dump_json())
    with open(path, "w") as f:
        yaml.safe_dump(data, f, sort_keys=False)


def get_config_value(config: DashboardConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'search.debounce_ms'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(config: DashboardConfig, dotted_key: str, value: Any) -> DashboardConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new DashboardConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        target = target[part]
    if parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    # Attempt type coercion for common cases
    old_value = target.get(parts[-1])
    if isinstance(old_value, int) and isinstance(value, str):
        value = int(value)
    elif isinstance(old_value, float) and isinstance(value, str):
        value = float(value)
    target[parts[-1]] = value
    return DashboardConfig(**data)
