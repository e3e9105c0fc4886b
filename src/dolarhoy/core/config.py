"""Configuration loading, validation, and access."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

from dolarhoy.core.catalog import DOLARHOY_HOST, DOLARHOY_PORT
from dolarhoy.core.exceptions import ConfigError

Precision = Literal["single", "double", "decimal"]

CONFIG_ENV_VAR = "DOLARHOY_CONFIG"
DEFAULT_CONFIG_FILE = "dolarhoy.yml"

_BOOL_WORDS = {"true": True, "false": False}


class ClientConfig(BaseModel):
    """Remote endpoint and TLS trust configuration."""

    model_config = ConfigDict(frozen=True)

    host: str = DOLARHOY_HOST
    port: int = DOLARHOY_PORT
    ca_file: str | None = None

    @field_validator("host")
    @classmethod
    def host_is_bare_name(cls, v: str) -> str:
        """The host goes into both the Host header and SNI; it must be a bare name."""
        v = v.strip()
        if not v:
            raise ValueError("host must not be empty")
        if "://" in v or "/" in v:
            raise ValueError("host must be a bare hostname, without scheme or path")
        return v

    @field_validator("port")
    @classmethod
    def port_in_range(cls, v: int) -> int:
        if v < 1 or v > 65535:
            raise ValueError("port must be between 1 and 65535")
        return v


class OutputConfig(BaseModel):
    """Command line defaults."""

    model_config = ConfigDict(frozen=True)

    precision: Precision = "double"
    timeout_seconds: float | None = None

    @field_validator("timeout_seconds")
    @classmethod
    def timeout_positive(cls, v: float | None) -> float | None:
        if v is not None and v <= 0:
            raise ValueError("timeout_seconds must be > 0")
        return v


class DolarHoyConfig(BaseModel):
    """Root configuration."""

    model_config = ConfigDict(frozen=True)

    client: ClientConfig = ClientConfig()
    output: OutputConfig = OutputConfig()


def load_config(
    config_path: str | None = None,
    env_prefix: str = "DOLARHOY_",
) -> DolarHoyConfig:
    """Load configuration from environment + YAML file + defaults.

    Resolution order (highest priority first):
    1. Environment variables (DOLARHOY_CLIENT__HOST, etc.)
    2. YAML file at config_path
    3. Built-in defaults

    Nested keys use double-underscore in env vars:
        DOLARHOY_OUTPUT__PRECISION=single  ->  output.precision = "single"
    """
    try:
        yaml_path = _resolve_config_path(config_path)
        base: dict = {}
        if yaml_path is not None:
            base = _load_yaml(yaml_path)

        merged = _merge_env_vars(base, env_prefix)
        return DolarHoyConfig.model_validate(merged)
    except Exception as e:
        if isinstance(e, ConfigError):
            raise
        raise ConfigError(str(e), context={"source": "load_config"}) from e


def _resolve_config_path(explicit: str | None) -> Path | None:
    """Pick the YAML file: explicit path, then $DOLARHOY_CONFIG, then ./dolarhoy.yml.

    A path that was asked for and does not exist is an error; a missing
    default file just means "no file".
    """
    candidates = (("config_path", explicit), (CONFIG_ENV_VAR, os.environ.get(CONFIG_ENV_VAR)))
    for source, candidate in candidates:
        if not candidate:
            continue
        path = Path(candidate)
        if not path.is_file():
            raise ConfigError(
                f"Config file not found ({source}): {candidate}",
                context={"field": source, "value": candidate},
            )
        return path

    default = Path(DEFAULT_CONFIG_FILE)
    return default if default.is_file() else None


def _load_yaml(path: Path) -> dict:
    """Read a YAML mapping; an empty file yields {}."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Failed to parse YAML config: {e}",
            context={"field": "config_file", "value": str(path)},
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"YAML config must be a mapping, got {type(data).__name__}",
            context={"field": "config_file", "value": str(path)},
        )
    return data


def _merge_env_vars(base: dict, prefix: str) -> dict:
    """Return a copy of ``base`` with ``PREFIX_SECTION__FIELD`` variables applied.

    ``DOLARHOY_CLIENT__PORT=8443`` sets ``client.port``. The config file
    pointer (``DOLARHOY_CONFIG``) is not a setting and is skipped.
    """
    merged = {k: dict(v) if isinstance(v, dict) else v for k, v in base.items()}

    for name, raw in os.environ.items():
        if not name.startswith(prefix):
            continue
        path = [part.lower() for part in name[len(prefix) :].split("__")]
        if path == ["config"]:
            continue

        section = merged
        for key in path[:-1]:
            if not isinstance(section.get(key), dict):
                section[key] = {}
            section = section[key]
        section[path[-1]] = _auto_cast(raw)

    return merged


def _auto_cast(value: str) -> str | int | float | bool:
    """Turn an env string into a bool, int or float where it reads as one."""
    lowered = value.lower()
    if lowered in _BOOL_WORDS:
        return _BOOL_WORDS[lowered]
    for cast in (int, float):
        try:
            return cast(value)
        except ValueError:
            continue
    return value
