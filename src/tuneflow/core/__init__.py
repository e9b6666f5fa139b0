"""Core infrastructure layer - no business logic dependencies.

This module provides foundation-level services:
- Configuration management (TOML + .env)
- Logging setup (Loguru)
"""

from .config import (
    Config,
    LoggingConfig,
    PlayerConfig,
    WebConfig,
    YouTubeConfig,
    get_config_dir,
    get_config_path,
    get_data_dir,
    load_config,
)
from .output import get_log_file_path, setup_from_config, setup_loguru

__all__ = [
    "Config",
    "LoggingConfig",
    "PlayerConfig",
    "WebConfig",
    "YouTubeConfig",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "load_config",
    "get_log_file_path",
    "setup_from_config",
    "setup_loguru",
]
