# src/endpointkit/config/settings.py
"""
Library settings (Pydantic).

Settings are loaded from `src/endpointkit/config/defaults.yaml`, then optionally overridden by:
- an external YAML file via `ENDPOINTKIT_CONFIG_PATH`
- environment variables (`ENDPOINTKIT_LOG_LEVEL`, `ENDPOINTKIT_HTTP_TIMEOUT_SECONDS`)

Only transport defaults and logging live here. Request building and decoding never read settings.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from endpointkit.core.env import load_dotenv_if_present


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `endpointkit.config`."""
    text = resources.files("endpointkit.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    log_level: str = "INFO"


class HttpSettings(BaseModel):
    timeout_seconds: float = Field(15, gt=0)
    follow_redirects: bool = False


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    http: HttpSettings = Field(default_factory=HttpSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload."""
    data = dict(data)

    log_level = os.getenv("ENDPOINTKIT_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    timeout = os.getenv("ENDPOINTKIT_HTTP_TIMEOUT_SECONDS")
    if timeout:
        data.setdefault("http", {})["timeout_seconds"] = timeout

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("ENDPOINTKIT_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
