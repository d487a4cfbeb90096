"""Configuration loading from .env and YAML."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal

import yaml
from dotenv import dotenv_values
from pydantic import BaseModel, Field, ValidationError, field_validator

from seedgen.core.exceptions import ConfigError

log = logging.getLogger(__name__)


def _find_project_root(start: Path | None = None) -> Path:
    """Find project root by looking for pyproject.toml upward."""
    current = Path(start or Path.cwd()).resolve()
    for _ in range(10):
        if (current / "pyproject.toml").exists():
            return current
        parent = current.parent
        if parent == current:
            break
        current = parent
    return Path.cwd().resolve()


class GeneratorConfigModel(BaseModel):
    """Generator section of config."""

    name: str = "rand_bytes"
    max_size: int = Field(default=32, ge=0)
    count: int = Field(default=8, ge=0)
    seed: int | None = None
    dummy: bool = False
    generalized: bool = False


class AppConfig(BaseModel):
    """Full application configuration."""

    generator: GeneratorConfigModel = Field(default_factory=GeneratorConfigModel)
    plugin_dirs: list[str] = Field(default_factory=lambda: ["plugins"])
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


# Environment variable -> (section or None, key)
_ENV_MAPPING: dict[str, tuple[str | None, str]] = {
    "SEEDGEN_GENERATOR": ("generator", "name"),
    "SEEDGEN_MAX_SIZE": ("generator", "max_size"),
    "SEEDGEN_COUNT": ("generator", "count"),
    "SEEDGEN_SEED": ("generator", "seed"),
    "SEEDGEN_LOG_LEVEL": (None, "log_level"),
}


class ConfigManager:
    """Load and merge configuration from .env and YAML."""

    def __init__(
        self,
        project_root: Path | None = None,
        env_path: Path | None = None,
        config_path: Path | None = None,
    ) -> None:
        self._root = Path(project_root or _find_project_root()).resolve()
        self._env_path = Path(env_path) if env_path else self._root / ".env"
        self._config_path = Path(config_path) if config_path else self._root / "config" / "default.yaml"
        self._config: AppConfig | None = None
        self._env: dict[str, str] = {}

    def load_env(self) -> dict[str, str]:
        """Load .env file into a dict (without modifying os.environ)."""
        if not self._env_path.exists():
            self._env = {}
            return self._env
        try:
            self._env = {k: v for k, v in dotenv_values(self._env_path).items() if v is not None}
        except (OSError, PermissionError) as e:
            log.warning("Failed to read .env file %s: %s", self._env_path, e)
            self._env = {}
        return self._env

    def load_yaml(self) -> dict[str, Any]:
        """Load YAML config file if it exists."""
        if not self._config_path.exists():
            return {}
        try:
            with open(self._config_path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, PermissionError) as e:
            log.warning("Failed to read config file %s: %s", self._config_path, e)
            return {}
        except yaml.YAMLError as e:
            log.warning("Malformed YAML in %s: %s", self._config_path, e)
            return {}
        if not isinstance(data, dict):
            log.warning("Ignoring config file %s: top level is not a mapping", self._config_path)
            return {}
        return data

    def load(self) -> AppConfig:
        """Load .env and YAML, merge with defaults, return AppConfig."""
        env = self.load_env()
        yaml_data = self.load_yaml()

        config_dict: dict[str, Any] = {}
        for key in ("plugin_dirs", "log_level"):
            if key in yaml_data:
                config_dict[key] = yaml_data[key]
        generator_dict: dict[str, Any] = dict(yaml_data.get("generator") or {})

        # Environment variables override YAML values
        for env_key, (section, key) in _ENV_MAPPING.items():
            if env.get(env_key):
                target = generator_dict if section == "generator" else config_dict
                target[key] = env[env_key]

        try:
            config_dict["generator"] = GeneratorConfigModel(**generator_dict)
            self._config = AppConfig(**config_dict)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e
        return self._config

    @property
    def config(self) -> AppConfig:
        """Return loaded config; load if not yet loaded."""
        if self._config is None:
            self.load()
        if self._config is None:
            raise RuntimeError("ConfigManager.load() failed to produce a config")
        return self._config

    @property
    def env(self) -> dict[str, str]:
        """Return loaded env dict."""
        if not self._env and self._env_path.exists():
            self.load_env()
        return self._env

    @property
    def project_root(self) -> Path:
        return self._root

    def plugin_paths(self) -> list[Path]:
        """Configured plugin directories, relative ones resolved against the project root."""
        paths = []
        for entry in self.config.plugin_dirs:
            path = Path(entry)
            paths.append(path if path.is_absolute() else self._root / path)
        return paths
