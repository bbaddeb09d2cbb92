"""Config directory, config.json and environment overrides."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError

DEFAULT_API_URL = "https://api.openai.com/v1/chat/completions"
DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_TIMEOUT = 120.0
DEFAULT_BUCKET = "questions_and_answers"

CONFIG_DIR_NAME = ".askgpt"
CONFIG_FILE_NAME = "config.json"
DB_FILE_NAME = "qa.db"


class Config(BaseModel):
    api_key: str = Field(..., min_length=1)


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    config_dir: Path
    config_file: Path
    db_file: Path
    bucket: str = DEFAULT_BUCKET
    api_url: str = DEFAULT_API_URL
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    timeout: float = DEFAULT_TIMEOUT


def config_dir(env: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if env is None else env
    raw = env.get("ASKGPT_HOME")
    path = Path(raw).expanduser() if raw else Path.home() / CONFIG_DIR_NAME
    try:
        path.mkdir(mode=0o755, parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigError(f"Error creating config directory {path}: {e}") from e
    return path


def _float_env(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from None


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if env is None else env
    d = config_dir(env)
    return Settings(
        config_dir=d,
        config_file=d / CONFIG_FILE_NAME,
        db_file=d / DB_FILE_NAME,
        api_url=env.get("ASKGPT_API_URL", DEFAULT_API_URL),
        model=env.get("ASKGPT_MODEL", DEFAULT_MODEL),
        temperature=_float_env(env, "ASKGPT_TEMPERATURE", DEFAULT_TEMPERATURE),
        timeout=_float_env(env, "ASKGPT_TIMEOUT", DEFAULT_TIMEOUT),
    )


def load_config(path: Path) -> Config:
    """
    Read config.json. A missing file, unreadable file, bad JSON
    or empty api_key all raise ConfigError.
    """
    if not path.exists():
        raise ConfigError(f"Config file {path} does not exist")
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Error reading config file {path}: {e}") from e
    try:
        return Config.model_validate_json(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {path}: {e.errors()[0]['msg']}") from e
