"""Logging setup for the schemalint CLI."""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import Any

import yaml

_DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"

logger = logging.getLogger(__name__)


def _read_dict_config(config_path: Path) -> dict[str, Any]:
    with open(config_path, encoding="utf-8") as f:
        config = yaml.safe_load(f)
    if not isinstance(config, dict):
        raise ValueError("top-level YAML value must be a mapping")
    return config


def setup_logging(config_path: Path | None = None, level: int = logging.INFO) -> None:
    """Apply a YAML dictConfig, or basicConfig when none is given or it cannot be applied."""
    if config_path is None:
        logging.basicConfig(level=level, format=_DEFAULT_FORMAT)
        return

    try:
        logging.config.dictConfig(_read_dict_config(config_path))
    except (OSError, ValueError, TypeError, yaml.YAMLError) as exc:
        logging.basicConfig(level=level, format=_DEFAULT_FORMAT)
        logger.warning("logging config %s not applied, using defaults: %s", config_path, exc)


def get_logger(name: str) -> logging.Logger:
    """Return a standard library logger."""
    return logging.getLogger(name)
