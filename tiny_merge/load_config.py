"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from tiny_merge.deep_merge import deep_merge
from tiny_merge.errors import MergeConfigurationError

DEFAULT_CONFIG: dict[str, Any] = {
    "output": {
        "pad_columns": False,
        "sort_classes": True,
    },
    "logging": {
        "level": "WARNING",
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"{path} must contain a mapping at the top level."
                raise MergeConfigurationError(msg)
            config = deep_merge(config, user_config)
    config["logging"]["level"] = _log_level(config["logging"]["level"], path)
    return config


def _log_level(level: object, path: str | None) -> str:
    """Normalize a level name; ``info`` becomes ``INFO``."""
    name = str(level).upper()
    # getLevelName maps known names to their number and anything else to a str
    if not isinstance(logging.getLevelName(name), int):
        msg = f"{path}: unknown logging level {level!r}."
        raise MergeConfigurationError(msg)
    return name
