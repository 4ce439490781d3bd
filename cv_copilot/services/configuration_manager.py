"""Application settings: defaults, YAML files, ``.env`` and environment overrides.

Settings are layered in this order, later layers winning:

1. dataclass defaults below
2. ``<config_path>/config.yaml``
3. ``<config_path>/config.<ENVIRONMENT>.yaml``
4. ``CV_COPILOT_LOCALE`` / ``LOG_LEVEL`` (a ``.env`` file is loaded first)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..models.enums import Locale
from ..parsers.file_handlers import DEFAULT_MIN_TEXT_LENGTH
from ..utils.exceptions import ConfigurationError
from ..utils.logging import get_logger

LOCALE_ENV_VAR = "CV_COPILOT_LOCALE"
LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Keys of the ``app:`` YAML section and the AppConfig field each one sets
APP_SECTION_KEYS = {
    "name": "app_name",
    "version": "version",
    "debug": "debug",
    "environment": "environment",
}


@dataclass
class LoggingConfig:
    level: str = "INFO"
    format: str = "text"  # "text" or "json"
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024
    backup_count: int = 5
    console_output: bool = True
    file_output: bool = False


@dataclass
class ExtractionConfig:
    min_text_length: int = DEFAULT_MIN_TEXT_LENGTH
    placeholder_fallback: bool = True
    max_file_size: int = 10 * 1024 * 1024


@dataclass
class AnalysisConfig:
    default_locale: str = Locale.FR.value
    timeout_seconds: float = 30.0


class AppConfig(BaseModel):
    """Root settings object handed to the services and the CLI."""

    model_config = ConfigDict(validate_assignment=True)

    app_name: str = Field(default="CV Copilot", description="Application name")
    version: str = Field(default="1.0.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")
    environment: str = Field(default="development", description="Deployment environment")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)

    @field_validator("environment")
    @classmethod
    def environment_not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("environment must not be blank")
        return value.strip()


def _normalize_locale(config: AppConfig) -> None:
    try:
        config.analysis.default_locale = Locale(config.analysis.default_locale).value
    except ValueError:
        raise ConfigurationError(
            f"Unsupported locale: {config.analysis.default_locale!r} (expected fr or en)",
            config_key="analysis.default_locale",
        ) from None


def _normalize_log_level(config: AppConfig) -> None:
    level = str(config.logging.level).upper()
    if level not in VALID_LOG_LEVELS:
        raise ConfigurationError(f"Invalid log level: {config.logging.level!r}", config_key="logging.level")
    config.logging.level = level


# (setting, predicate, message) triples checked after normalization
RANGE_CHECKS: Tuple[Tuple[str, Callable[[Any], bool], str], ...] = (
    ("extraction.min_text_length", lambda v: v >= 0, "must not be negative"),
    ("extraction.max_file_size", lambda v: v >= 1, "must be at least one byte"),
    ("analysis.timeout_seconds", lambda v: v > 0, "must be positive"),
)


class ConfigurationManager:
    """Loads and serves the application settings."""

    def __init__(self, config_path: str = "config", env_file: str = ".env"):
        """
        Args:
            config_path: Directory holding ``config.yaml`` and per-environment files.
            env_file: ``.env`` file loaded before environment overrides are read.
        """
        self.config_path = Path(config_path)
        self.env_file = Path(env_file)
        self.config: Optional[AppConfig] = None
        self.logger = get_logger("configuration_manager")

    def initialize(self) -> AppConfig:
        """Build the settings from every layer and validate them.

        Raises:
            ConfigurationError: A file is unreadable or a value is out of range.
        """
        try:
            if self.env_file.exists():
                load_dotenv(self.env_file)
                self.logger.debug(f"Loaded environment file {self.env_file}")

            self.config = self._build(self._collect_layers())
            self._apply_environment_overrides(self.config)
            self._validate(self.config)
        except ConfigurationError:
            raise
        except Exception as e:
            self.logger.error(f"Unexpected error while loading configuration: {e}")
            raise ConfigurationError(f"Configuration initialization failed: {e}") from e

        self.logger.info(
            f"Configuration ready (environment={self.config.environment}, "
            f"locale={self.config.analysis.default_locale})"
        )
        return self.config

    def _collect_layers(self) -> Dict[str, Any]:
        data = AppConfig().model_dump()
        data = self._overlay(data, self._read_yaml(self.config_path / "config.yaml"))

        environment = os.getenv("ENVIRONMENT") or data["environment"]
        data = self._overlay(data, self._read_yaml(self.config_path / f"config.{environment}.yaml"))
        data["environment"] = environment
        return data

    def _build(self, data: Dict[str, Any]) -> AppConfig:
        try:
            return AppConfig.model_validate(data)
        except ValidationError as e:
            first = e.errors()[0]
            key = ".".join(str(part) for part in first["loc"])
            raise ConfigurationError(f"Invalid value for {key}: {first['msg']}", config_key=key) from e

    def _overlay(self, base: Dict[str, Any], layer: Dict[str, Any]) -> Dict[str, Any]:
        """Copy of ``base`` with the keys of ``layer`` laid over it."""
        result = dict(base)
        for key, value in layer.items():
            if key == "app" and isinstance(value, dict):
                result.update({APP_SECTION_KEYS[k]: v for k, v in value.items() if k in APP_SECTION_KEYS})
            elif key not in result:
                self.logger.warning(f"Ignoring unknown configuration key: {key}")
            elif isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._overlay(result[key], value)
            else:
                result[key] = value
        return result

    def _read_yaml(self, file_path: Path) -> Dict[str, Any]:
        """Mapping stored in ``file_path``; empty when the file does not exist."""
        if not file_path.exists():
            return {}
        try:
            content = yaml.safe_load(file_path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Could not read {file_path}: {e}", config_key=str(file_path)) from e

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigurationError(f"{file_path} must contain a mapping", config_key=str(file_path))
        self.logger.debug(f"Loaded configuration layer {file_path}")
        return content

    def _apply_environment_overrides(self, config: AppConfig) -> None:
        locale = os.getenv(LOCALE_ENV_VAR)
        if locale:
            config.analysis.default_locale = locale
        log_level = os.getenv(LOG_LEVEL_ENV_VAR)
        if log_level:
            config.logging.level = log_level

    def _validate(self, config: AppConfig) -> None:
        _normalize_locale(config)
        _normalize_log_level(config)
        for key, predicate, message in RANGE_CHECKS:
            value = self.get_setting(key)
            if not predicate(value):
                raise ConfigurationError(f"{key} {message} (got {value!r})", config_key=key)

    def get_config(self) -> AppConfig:
        if not self.config:
            raise ConfigurationError("Configuration not loaded; call initialize() first")
        return self.config

    def get_setting(self, key: str, default: Any = None) -> Any:
        """Look up a setting by dotted path, e.g. ``"analysis.timeout_seconds"``."""
        node: Any = self.config
        if node is None:
            return default
        for part in key.split("."):
            if isinstance(node, dict):
                if part not in node:
                    return default
                node = node[part]
            elif hasattr(node, part):
                node = getattr(node, part)
            else:
                return default
        return node

    def get_logging_config(self) -> Dict[str, Any]:
        """Keyword arguments for :func:`cv_copilot.utils.logging.setup_logging`."""
        settings = self.get_config().logging
        return {
            "level": settings.level,
            "log_file": settings.file_path,
            "enable_console": settings.console_output,
            "enable_file": settings.file_output and bool(settings.file_path),
            "structured": settings.format == "json",
            "max_file_size": settings.max_file_size,
            "backup_count": settings.backup_count,
        }

    def get_locale(self) -> Locale:
        return Locale(self.get_config().analysis.default_locale)
