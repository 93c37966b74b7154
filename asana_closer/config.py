"""Configuration loading from YAML and environment.

The Asana token is taken from the action input (INPUT_ASANA-PAT), from
environment variables or from files (Docker secrets). Never put real
tokens in config files committed to the repo.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# GitHub Actions exposes `with: asana-pat:` as this env var (hyphen kept)
ACTION_INPUT_ENV = "INPUT_ASANA-PAT"


class ConfigError(Exception):
    """Raised when required configuration (e.g. the Asana token) is missing
    or unreadable."""

    pass


def _read_secret(env_keys: tuple[str, ...], file_env_key: str) -> str | None:
    """Read secret from the first set env var or from file path in env (e.g.
    Docker secrets)."""
    for key in env_keys:
        value = _current_env.get(key)
        if value and value.strip():
            return value.strip()
    file_path = _current_env.get(file_env_key)
    if file_path:
        try:
            return Path(file_path).read_text().strip() or None
        except OSError as e:
            raise ConfigError(f"Cannot read {file_env_key}={file_path}: {e}") from e
    return None


# Injected by load_config so secret lookups can read env/file
_current_env: dict[str, str] = {}


class AsanaConfig(BaseSettings):
    """Asana REST API settings."""

    model_config = SettingsConfigDict(env_prefix="ASANA_", extra="ignore")

    token: str | None = Field(default=None, description="Personal access token; use action input, env or secret file")
    api_url: str = Field(default="https://app.asana.com/api/1.0", description="API base URL")
    timeout: int = Field(default=30, ge=1, le=300, description="Per-request timeout in seconds")


class GateConfig(BaseSettings):
    """Which pull requests may close tasks."""

    model_config = SettingsConfigDict(env_prefix="GATE_", extra="ignore")

    integration_branches: list[str] = Field(
        default_factory=lambda: ["main", "master"],
        description="Base branches whose merges close referenced tasks",
    )


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="%(message)s", description="Log format")
    # Render ERROR/WARNING as ::error:: / ::warning:: workflow commands
    github_annotations: bool = Field(
        default_factory=lambda: os.environ.get("GITHUB_ACTIONS") == "true",
        description="Emit GitHub Actions annotations for errors and warnings",
    )


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    asana: AsanaConfig = Field(default_factory=AsanaConfig)
    gate: GateConfig = Field(default_factory=GateConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def asana_token_resolved(self) -> str | None:
        """Resolve Asana token from config, action input, env or Docker
        secret file."""
        t = self.asana.token
        if t and t.strip() and not t.startswith("${"):
            return t.strip()
        return _read_secret((ACTION_INPUT_ENV, "ASANA_PAT", "ASANA_TOKEN"), "ASANA_PAT_FILE")

    def require_asana_token(self) -> str:
        """Return the Asana token or raise ConfigError."""
        token = self.asana_token_resolved
        if not token:
            raise ConfigError(f"Input required and not supplied: asana-pat (set {ACTION_INPUT_ENV} or ASANA_PAT)")
        return token


def _substitute_env(value: Any) -> Any:
    """Replace ${VAR} and $VAR in strings with os.environ."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            key = value[2:-1].strip()
            return _current_env.get(key, value)
        if value.startswith("$") and not value.startswith("${"):
            key = value[1:].strip()
            return _current_env.get(key, value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v) for v in value]
    return value


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load config from YAML file and environment.

    Secrets: INPUT_ASANA-PAT, ASANA_PAT or ASANA_PAT_FILE.
    """
    global _current_env

    _current_env = dict(os.environ)

    path = config_path or Path("config.yaml")
    if not path.is_file():
        return AppConfig()

    try:
        raw = yaml.safe_load(path.read_text()) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot load config {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"Config {path} must be a mapping")
    raw = _substitute_env(raw)

    return AppConfig(
        asana=AsanaConfig(**(raw.get("asana") or {})),
        gate=GateConfig(**(raw.get("gate") or {})),
        logging=LoggingConfig(**(raw.get("logging") or {})),
    )
