"""
Configuration management for TuneFlow
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from loguru import logger


@dataclass
class YouTubeConfig:
    """Configuration for the YouTube Data API search gateway."""

    api_key: Optional[str] = None
    api_base: str = "https://www.googleapis.com/youtube/v3"
    max_results: int = 12
    timeout: float = 10.0


@dataclass
class PlayerConfig:
    """Configuration for the embedded player and playback session."""

    volume: float = 1.0  # 0.0 - 1.0
    repeat_on_start: bool = False
    shuffle_on_start: bool = False
    show_video: bool = False  # Desktop video toggle default
    mobile_breakpoint: int = 800  # Viewport width (px) below which the surface is always shown
    tick_interval: float = 1.0  # Seconds between elapsed-time ticks
    page_origin: str = "http://localhost:5173"

    def validate(self) -> None:
        """Validate player configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if not 0.0 <= self.volume <= 1.0:
            raise ValueError(f"volume must be between 0.0 and 1.0, got {self.volume}")
        if self.tick_interval <= 0:
            raise ValueError(f"tick_interval must be positive, got {self.tick_interval}")
        if self.mobile_breakpoint <= 0:
            raise ValueError(
                f"mobile_breakpoint must be positive, got {self.mobile_breakpoint}"
            )


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/tuneflow/tuneflow.log)
    )
    max_file_size_mb: int = 10  # Maximum log file size before rotation
    backup_count: int = 5  # Number of backup files to keep
    console_output: bool = False  # Also output to console (for debugging)


@dataclass
class WebConfig:
    """Configuration for the web backend."""

    host: str = "127.0.0.1"
    port: int = 8642
    allowed_origins: List[str] = field(
        default_factory=lambda: ["http://localhost:5173"]
    )


@dataclass
class Config:
    """Main configuration object."""

    youtube: YouTubeConfig = field(default_factory=YouTubeConfig)
    player: PlayerConfig = field(default_factory=PlayerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    web: WebConfig = field(default_factory=WebConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "tuneflow"
    return Path.home() / ".config" / "tuneflow"


def _find_project_config() -> Optional[Path]:
    """Find config.toml in project root by looking for pyproject.toml.

    Returns:
        Path to config.toml in project root, or None if not found
    """
    current = Path(__file__).resolve().parent
    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists():
            config_path = parent / "config.toml"
            if config_path.exists():
                return config_path
            return None
    return None


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Project root (detected via pyproject.toml) - for development
    2. Current working directory
    3. XDG_CONFIG_HOME/tuneflow (or ~/.config/tuneflow)
    """
    project_config = _find_project_config()
    if project_config:
        return project_config

    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "tuneflow"
    return Path.home() / ".local" / "share" / "tuneflow"


def _parse_config(toml_data: dict) -> Config:
    """Build a Config from parsed TOML, keeping defaults for missing keys."""
    config = Config()

    if "youtube" in toml_data:
        youtube_data = toml_data["youtube"]
        config.youtube = YouTubeConfig(
            api_key=youtube_data.get("api_key") or None,
            api_base=youtube_data.get("api_base", config.youtube.api_base),
            max_results=youtube_data.get("max_results", config.youtube.max_results),
            timeout=youtube_data.get("timeout", config.youtube.timeout),
        )

    if "player" in toml_data:
        player_data = toml_data["player"]
        config.player = PlayerConfig(
            volume=player_data.get("volume", config.player.volume),
            repeat_on_start=player_data.get(
                "repeat_on_start", config.player.repeat_on_start
            ),
            shuffle_on_start=player_data.get(
                "shuffle_on_start", config.player.shuffle_on_start
            ),
            show_video=player_data.get("show_video", config.player.show_video),
            mobile_breakpoint=player_data.get(
                "mobile_breakpoint", config.player.mobile_breakpoint
            ),
            tick_interval=player_data.get(
                "tick_interval", config.player.tick_interval
            ),
            page_origin=player_data.get("page_origin", config.player.page_origin),
        )
        try:
            config.player.validate()
        except ValueError as e:
            logger.warning(f"Invalid player configuration: {e}. Using defaults.")
            config.player = PlayerConfig()

    if "logging" in toml_data:
        logging_data = toml_data["logging"]
        log_file = logging_data.get("log_file")
        if log_file:
            log_file = str(Path(log_file).expanduser())
        config.logging = LoggingConfig(
            level=logging_data.get("level", config.logging.level).upper(),
            log_file=log_file,
            max_file_size_mb=logging_data.get(
                "max_file_size_mb", config.logging.max_file_size_mb
            ),
            backup_count=logging_data.get(
                "backup_count", config.logging.backup_count
            ),
            console_output=logging_data.get(
                "console_output", config.logging.console_output
            ),
        )

    if "web" in toml_data:
        web_data = toml_data["web"]
        config.web = WebConfig(
            host=web_data.get("host", config.web.host),
            port=web_data.get("port", config.web.port),
            allowed_origins=web_data.get(
                "allowed_origins", config.web.allowed_origins
            ),
        )

    return config


def _apply_env_overrides(config: Config) -> Config:
    """Override credentials and origins with environment variables if present."""
    api_key = os.environ.get("YOUTUBE_API_KEY")
    if api_key:
        config.youtube.api_key = api_key

    allowed_origins = os.environ.get("ALLOWED_ORIGINS")
    if allowed_origins:
        config.web.allowed_origins = [
            origin.strip() for origin in allowed_origins.split(",") if origin.strip()
        ]

    return config


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file, falling back to defaults.

    Environment variables override TOML values:
    - YOUTUBE_API_KEY
    - ALLOWED_ORIGINS (comma-separated)
    """
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config_path = config_path or get_config_path()

    if not config_path.exists():
        logger.debug(f"No configuration at {config_path}, using defaults")
        return _apply_env_overrides(Config())

    try:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)
        config = _parse_config(toml_data)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning(f"Error loading configuration from {config_path}: {e}")
        logger.warning("Using default configuration.")
        config = Config()

    return _apply_env_overrides(config)
