"""Configuration management for bcscout."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from bcscout.config.paths import default_config_path
from bcscout.config.settings import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_MAX_SCORE,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_SEARCH_URL,
)
from bcscout.errors import ConfigError
from bcscout.platform.logging import logger


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Search endpoint; tests point this at a local fixture server
    search_url: str = DEFAULT_SEARCH_URL

    # Results scoring above this are discarded by the CLI
    max_score: int = DEFAULT_MAX_SCORE

    # Seconds before an outbound request is abandoned
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    # User-Agent identity
    app_name: str = APP_NAME
    app_version: str = APP_VERSION
    contact: str = ""

    # Log file path
    log_file: Path | None = _path_field()

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "Config":
        """Build a configuration from a parsed TOML mapping.

        Raises:
            ConfigError: If the mapping holds unknown keys or mistyped values.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        for key in ("search_url", "app_name", "app_version", "contact"):
            if key in data and not isinstance(data[key], str):
                raise ConfigError(f"'{key}' must be a string")
        if "search_url" in data and not data["search_url"].strip():
            raise ConfigError("'search_url' cannot be blank")
        if "max_score" in data and (
            isinstance(data["max_score"], bool) or not isinstance(data["max_score"], int)
        ):
            raise ConfigError("'max_score' must be an integer")
        if "request_timeout" in data:
            timeout = data["request_timeout"]
            if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
                raise ConfigError("'request_timeout' must be a positive number")
            data = {**data, "request_timeout": float(timeout)}
        if "log_file" in data and not isinstance(data["log_file"], str):
            raise ConfigError("'log_file' must be a string path")

        return cls(**data)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file.

        Args:
            path: Explicit config file. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration, or defaults when no file exists.

        Raises:
            ConfigError: If an explicit ``path`` does not exist, or the file
                cannot be read or holds invalid values.
        """
        config_file = path if path is not None else default_config_path()

        if path is not None and not config_file.is_file():
            raise ConfigError(f"Configuration file not found: {config_file}")

        if not config_file.exists():
            logger.debug("No configuration file at %s; using defaults", config_file)
            return cls()

        try:
            with open(config_file, "rb") as f:
                config_dict = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error("Failed to load configuration: %s", e)
            raise ConfigError(f"Failed to read configuration {config_file}: {e}") from e

        instance = cls.from_mapping(config_dict)
        logger.info("Configuration loaded from %s", config_file)
        return instance


__all__ = ["Config"]
