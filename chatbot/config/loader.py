"""Configuration loading utilities."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..constants import DEFAULT_CONFIG_FILE
from ..errors.internal import ConfigError
from ..logs.logger import logger
from .model import AppConfig

# Environment variable -> AppConfig field
ENV_OVERRIDES = {
    "TWITCH_USERNAME": "username",
    "TWITCH_OAUTH_TOKEN": "oauth_token",
    "TWITCH_CHANNEL": "channel",
    "TWITCH_SERVER_URL": "server_url",
}


def config_path(path: str | os.PathLike[str] | None = None) -> Path:
    if path is not None:
        return Path(path)
    return Path(os.environ.get("CHATBOT_CONF_FILE", DEFAULT_CONFIG_FILE))


def load_raw(path: Path) -> dict[str, Any]:
    """Read the JSON config file; a missing file reads as empty.

    Raises:
        ConfigError: If the file cannot be read or is not a JSON object.
    """
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError:
        logger.log_event("config", "file_missing", path=str(path))
        return {}
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(
            f"Cannot read config file {path}: {e}", data={"path": str(path)}
        ) from e
    if not isinstance(raw, dict):
        raise ConfigError(
            f"Config file {path} must contain a JSON object", data={"path": str(path)}
        )
    return raw


def apply_env_overrides(
    data: dict[str, Any], environ: dict[str, str] | None = None
) -> dict[str, Any]:
    environ = dict(os.environ) if environ is None else environ
    merged = dict(data)
    for env_name, field_name in ENV_OVERRIDES.items():
        value = environ.get(env_name)
        if value:
            merged[field_name] = value
    return merged


def load_config(
    path: str | os.PathLike[str] | None = None,
    environ: dict[str, str] | None = None,
) -> AppConfig:
    """Load the bot configuration from file and environment.

    Environment variables win over file values.

    Raises:
        ConfigError: If the resulting configuration is missing values or
            fails validation.
    """
    resolved = config_path(path)
    data = apply_env_overrides(load_raw(resolved), environ)
    try:
        config = AppConfig.from_dict(data)
    except ValidationError as e:
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
        raise ConfigError(
            f"Invalid configuration ({', '.join(fields)})",
            data={"path": str(resolved), "fields": fields},
        ) from e
    logger.log_event(
        "config", "loaded", user=config.username, source=str(resolved)
    )
    return config
