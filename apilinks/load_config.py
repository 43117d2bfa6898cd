"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from apilinks.guide_url import DEFAULT_GUIDE_PREFIX

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "urls": {
        "api_url": "",
        "guide_url": "",
        "guide_prefix": DEFAULT_GUIDE_PREFIX,
        "style": "multi-page",
    },
    "output": {
        "format": "html",
    },
    "internal_symbols": [],
}


def merge_config(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Merge user settings into a configuration.

    Sections are merged key by key. ``internal_symbols`` collects the names
    from both sides; any other value in ``update`` replaces the base value.
    """
    result = base.copy()
    for key, value in update.items():
        if key not in DEFAULT_CONFIG:
            logger.warning("Unknown config key %r", key)
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = merge_config_section(current, value)
        elif key == "internal_symbols" and isinstance(value, list):
            result[key] = sorted({*(current or []), *value})
        else:
            result[key] = value
    return result


def merge_config_section(
    base: dict[str, Any], update: dict[str, Any]
) -> dict[str, Any]:
    """Merge one config section, recursing into nested mappings."""
    result = base.copy()
    for key, value in update.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = merge_config_section(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = merge_config(config, user_config)
        else:
            logger.warning("Config file %s not found, using defaults", path)
    return config
