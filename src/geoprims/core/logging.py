"""
Logging configuration.

We use a YAML logging config (`src/geoprims/config/logging.yaml`) and then apply
runtime overrides from settings (e.g., `GEOPRIMS_LOG_LEVEL`).

The library never calls this on import; applications opt in.
"""

from __future__ import annotations

import copy
import logging.config

from geoprims.config.settings import get_logging_config, get_settings


def configure_logging() -> None:
    """Configure the Python logging system based on packaged YAML config + settings."""
    settings = get_settings()
    # get_logging_config() is cached; dictConfig must not see our edits leak back into it.
    config = copy.deepcopy(get_logging_config())

    level = settings.app.log_level.upper()
    config.setdefault("root", {})["level"] = level
    for logger_cfg in config.get("loggers", {}).values():
        if isinstance(logger_cfg, dict):
            logger_cfg["level"] = level
    for handler in config.get("handlers", {}).values():
        if isinstance(handler, dict) and "level" in handler:
            handler["level"] = level

    logging.config.dictConfig(config)
