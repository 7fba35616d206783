"""Configuration loader - YAML with env var expansion, or plain env vars, validated by Pydantic."""

import os
import re
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

_ENV_RE = re.compile(r"\$\{([^}]+)\}")

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

_TRUE_STRINGS = {"1", "true", "yes", "on"}


class ConfigError(ValueError):
    """Required configuration is missing."""


def _expand_env(value: str) -> str:
    """Replace ${VAR} patterns with environment variable values."""
    def _replace(match: re.Match) -> str:
        var = match.group(1)
        return os.environ.get(var, "")
    return _ENV_RE.sub(_replace, value)


def _walk_expand(obj: Any) -> Any:
    """Recursively expand env vars in strings throughout a dict/list."""
    if isinstance(obj, str):
        return _expand_env(obj)
    if isinstance(obj, dict):
        return {k: _walk_expand(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_walk_expand(i) for i in obj]
    return obj


# --- Pydantic models ---


class ClientConfig(BaseModel):
    url: str
    key: str
    verify_tls: bool = False  # devices usually serve self-signed certificates

    @field_validator("url")
    @classmethod
    def _check_url(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("url must not be empty")
        if not v.startswith(("http://", "https://")):
            raise ValueError("url must start with http:// or https://")
        return v

    @field_validator("key")
    @classmethod
    def _check_key(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("key must not be empty")
        return v


class LoggingConfig(BaseModel):
    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def _check_level(cls, v: str) -> str:
        v = v.upper()
        if v not in _VALID_LOG_LEVELS:
            raise ValueError(f"logging level must be one of {_VALID_LOG_LEVELS}")
        return v


class AppConfig(BaseModel):
    client: ClientConfig
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(path: str = "config.yaml") -> AppConfig:
    """Load and validate config from YAML file."""
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f)

    expanded = _walk_expand(raw or {})
    return AppConfig.model_validate(expanded)


def config_from_env(environ: Optional[Mapping[str, str]] = None) -> ClientConfig:
    """Build a client config from URL, KEY and optional VERIFY_TLS variables."""
    env = os.environ if environ is None else environ
    url = env.get("URL", "")
    key = env.get("KEY", "")
    if not url:
        raise ConfigError("Missing URL! Please set URL or add it to .env")
    if not key:
        raise ConfigError("Missing API Key! Please set KEY or add it to .env")
    verify = env.get("VERIFY_TLS", "").strip().lower() in _TRUE_STRINGS
    return ClientConfig(url=url, key=key, verify_tls=verify)
