"""Service configuration management for the task manager."""

import json
import tomllib
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Environment(str, Enum):
    """Environment types for configuration management."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class Config(BaseSettings):
    """Task manager server configuration."""

    model_config = SettingsConfigDict(
        env_prefix="TASK_MANAGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="127.0.0.1", description="Bind address for the HTTP listener")
    port: int = Field(default=8001, ge=1, le=65535, description="Bind port for the HTTP listener")
    log_level: str = Field(default="INFO", description="Logging level")
    mcp_path: str = Field(default="/mcp", description="Path of the MCP streamable-HTTP endpoint")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Deployment environment"
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase for logging compatibility."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("mcp_path")
    @classmethod
    def normalize_mcp_path(cls, v: str) -> str:
        """Ensure the MCP path is absolute."""
        return v if v.startswith("/") else f"/{v}"

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment variables and .env files."""
        return cls()


def load_config(config_file: Optional[str] = None, **overrides: Any) -> Config:
    """
    Load configuration from a file, the environment and explicit overrides.

    Precedence, lowest to highest: defaults, config file, environment
    variables (and ``.env``), explicit overrides. Overrides set to ``None``
    are ignored so CLI options can be passed through unconditionally.

    Args:
        config_file: Optional path to a JSON or TOML configuration file
        **overrides: Field values that take precedence over everything else

    Returns:
        Loaded configuration instance

    Raises:
        ConfigError: If the file cannot be read or parsed
    """
    values: Dict[str, Any] = {}
    if config_file:
        values.update(_load_from_file(config_file))

    from_env = Config()
    values.update(from_env.model_dump(include=from_env.model_fields_set))
    values.update({key: value for key, value in overrides.items() if value is not None})

    return Config(**values)


def _load_from_file(config_file: str) -> Dict[str, Any]:
    """Load configuration overrides from JSON or TOML files.

    Args:
        config_file: Path to the configuration file provided by the user.

    Returns:
        Parsed key/value pairs that should override the defaults.

    Raises:
        ConfigError: If the file is missing or cannot be parsed.
    """
    config_path = Path(config_file)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_file}")

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Error reading config file {config_file}: {exc}") from exc

    if config_path.suffix.lower() == ".json":
        return _parse_json_content(content, config_file)

    if config_path.suffix.lower() == ".toml":
        return _parse_toml_content(content, config_file)

    try:
        return _parse_json_content(content, config_file)
    except ConfigError:
        return _parse_toml_content(content, config_file)


def _parse_json_content(content: str, config_file: str) -> Dict[str, Any]:
    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in config file {config_file}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_file} must contain an object at the top level")
    return data


def _parse_toml_content(content: str, config_file: str) -> Dict[str, Any]:
    try:
        return tomllib.loads(content)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in config file {config_file}: {exc}") from exc
