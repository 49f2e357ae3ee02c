"""Shared utilities for config loading."""

from pathlib import Path
from typing import Any, Optional

import yaml


class ConfigError(Exception):
    """A config file exists but cannot be used."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid config {path}: {reason}")
        self.path = path


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base. Dicts merge, lists/scalars replace."""
    merged = base.copy()
    for key, val in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(val, dict):
            merged[key] = deep_merge(merged[key], val)
        else:
            merged[key] = val
    return merged


def load_yaml(path: Path) -> Optional[dict]:
    """Load a YAML mapping. None if the file is missing or empty.

    Raises ConfigError for unparseable YAML or a non-mapping top level.
    """
    if not path.exists():
        return None
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(path, str(e)) from e
    if data is None:
        return None
    if not isinstance(data, dict):
        raise ConfigError(path, f"expected a mapping, got {type(data).__name__}")
    return data


def get_path(config: dict, dotted: str, default: Any = None) -> Any:
    """Look up 'a.b.c' in nested dicts, returning default when any level is missing."""
    node: Any = config
    for part in dotted.split("."):
        if not isinstance(node, dict) or part not in node:
            return default
        node = node[part]
    return default if node is None else node
