"""Configuration loading for git-yank defaults."""

from yank.config.settings import get_config, get_config_loaded_sources, load_config, reload_config
from yank.config.utils import ConfigError, deep_merge, get_path, load_yaml

__all__ = [
    "load_config",
    "get_config",
    "reload_config",
    "get_config_loaded_sources",
    "ConfigError",
    "deep_merge",
    "get_path",
    "load_yaml",
]
