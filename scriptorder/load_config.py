"""Logic for loading and merging configuration files."""

import copy
import logging
from collections.abc import Collection
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

# Pattern lists under these keys accumulate across config layers.
ADDITIVE_KEYS = frozenset({"excludes"})

DEFAULT_CONFIG: dict[str, Any] = {
    "sources": {
        "includes": ["**/*.js"],
        "excludes": [],
        "encoding": "utf-8",
        "default_excludes": True,
    },
    "output": {
        "bundle_filename": "bundle.js",
        "source_bundles_dir": "script-source-bundles",
        "scripts_dir": "scripts",
        "report_filename": "build_report.json",
    },
    "bundle": {
        "strip_markers": True,
        "banner_width": 75,
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = merge_config(config, user_config)
        else:
            logger.warning("Config file %s not found, using defaults", p)
    return config


def merge_config(
    base: dict[str, Any],
    update: dict[str, Any],
    additive: Collection[str] = ADDITIVE_KEYS,
) -> dict[str, Any]:
    """Return ``base`` overlaid with ``update``; neither input is modified.

    Nested sections merge key by key. A list under an ``additive`` key is
    unioned with the base list and sorted; any other value replaces.
    """
    merged = dict(base)
    for key, value in update.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            value = merge_config(current, value, additive)
        elif key in additive and isinstance(current, list) and isinstance(value, list):
            value = sorted(set(current) | set(value))
        merged[key] = value
    return merged
