# src/geoprims/config/settings.py
"""
Library settings (Pydantic).

Settings are loaded from `src/geoprims/config/defaults.yaml`, then optionally overridden by:
- an external YAML file via `GEOPRIMS_CONFIG_PATH`
- environment variables (currently only `GEOPRIMS_LOG_LEVEL`)

Design rule:
- Tuning knobs live in YAML; the geodetic constants of WGS84 do not.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `geoprims.config`."""
    text = resources.files("geoprims.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    name: str = "geoprims"
    log_level: str = "WARNING"


class ProjectionSettings(BaseModel):
    web_mercator_max_latitude: float = Field(90.0, gt=0, le=90)


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    projection: ProjectionSettings = Field(default_factory=ProjectionSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload."""
    data = dict(data)
    log_level = os.getenv("GEOPRIMS_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level
    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    config_path = os.getenv("GEOPRIMS_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
