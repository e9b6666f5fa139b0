"""Tests for configuration loading."""

import os
from pathlib import Path

import pytest

from tuneflow.core.config import Config, PlayerConfig, load_config


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Point XDG dirs at tmp_path and clear credential env vars."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.delenv("YOUTUBE_API_KEY", raising=False)
    monkeypatch.delenv("ALLOWED_ORIGINS", raising=False)


def write_config(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "config.toml"
    path.write_text(text)
    return path


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(tmp_path / "missing.toml")

    assert config == Config()
    assert config.youtube.api_key is None
    assert config.web.allowed_origins == ["http://localhost:5173"]


def test_parses_sections(tmp_path):
    path = write_config(
        tmp_path,
        """
[youtube]
api_key = "file-key"
max_results = 5

[player]
volume = 0.6
repeat_on_start = true
mobile_breakpoint = 720

[logging]
level = "debug"

[web]
port = 9000
allowed_origins = ["https://music.example.com"]
""",
    )

    config = load_config(path)

    assert config.youtube.api_key == "file-key"
    assert config.youtube.max_results == 5
    assert config.player.volume == 0.6
    assert config.player.repeat_on_start is True
    assert config.player.mobile_breakpoint == 720
    assert config.player.tick_interval == 1.0
    assert config.logging.level == "DEBUG"
    assert config.web.port == 9000
    assert config.web.allowed_origins == ["https://music.example.com"]


def test_empty_api_key_treated_as_missing(tmp_path):
    path = write_config(tmp_path, '[youtube]\napi_key = ""\n')

    assert load_config(path).youtube.api_key is None


def test_invalid_player_section_falls_back(tmp_path):
    path = write_config(tmp_path, "[player]\nvolume = 3.0\n")

    assert load_config(path).player == PlayerConfig()


def test_malformed_toml_gives_defaults(tmp_path):
    path = write_config(tmp_path, "[player\nvolume = ")

    assert load_config(path) == Config()


def test_env_overrides_file(tmp_path, monkeypatch):
    path = write_config(tmp_path, '[youtube]\napi_key = "file-key"\n')
    monkeypatch.setenv("YOUTUBE_API_KEY", "env-key")
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test, http://b.test,")

    config = load_config(path)

    assert config.youtube.api_key == "env-key"
    assert config.web.allowed_origins == ["http://a.test", "http://b.test"]


def test_env_applies_without_file(tmp_path, monkeypatch):
    monkeypatch.setenv("YOUTUBE_API_KEY", "env-key")

    assert load_config(tmp_path / "missing.toml").youtube.api_key == "env-key"


def test_dotenv_in_config_dir(tmp_path):
    env_dir = tmp_path / "config" / "tuneflow"
    env_dir.mkdir(parents=True)
    (env_dir / ".env").write_text("YOUTUBE_API_KEY=dotenv-key\n")

    try:
        config = load_config(tmp_path / "missing.toml")
    finally:
        # load_dotenv writes straight to os.environ
        os.environ.pop("YOUTUBE_API_KEY", None)

    assert config.youtube.api_key == "dotenv-key"


@pytest.mark.parametrize(
    "kwargs",
    [{"volume": -0.1}, {"tick_interval": 0}, {"mobile_breakpoint": 0}],
)
def test_player_validate_rejects(kwargs):
    with pytest.raises(ValueError):
        PlayerConfig(**kwargs).validate()
