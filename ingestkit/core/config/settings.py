"""Configuration management for ingestkit."""

import os
import tomllib
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from loguru import logger

from ingestkit.core.exceptions import ConfigurationError
from ingestkit.core.logging import LogConfig
from ingestkit.core.models.formats import DataFormat
from ingestkit.core.options import (
    Option,
    file_format,
    flush_immediately,
    report_result_to_table,
    tags,
)


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "WARNING"
    file: str | None = None

    def to_log_config(self) -> LogConfig:
        return LogConfig(level=self.level, file_output=self.file is not None, file_path=self.file)


@dataclass
class IngestDefaults:
    """Options applied to every ingestion request before the caller's own."""

    flush_immediately: bool = False
    report_to_table: bool = False
    tags: list[str] = field(default_factory=list)
    format: str | None = None

    def to_options(self) -> list[Option]:
        """Build the catalog options these defaults stand for."""
        options: list[Option] = []
        if self.flush_immediately:
            options.append(flush_immediately())
        if self.report_to_table:
            options.append(report_result_to_table())
        if self.tags:
            options.append(tags(self.tags))
        if self.format:
            try:
                data_format = DataFormat.parse(self.format)
            except ValueError as exc:
                raise ConfigurationError(str(exc), setting="defaults.format") from exc
            options.append(file_format(data_format))
        return options


@dataclass
class IngestKitConfig:
    """Top-level ingestkit configuration."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    defaults: IngestDefaults = field(default_factory=IngestDefaults)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "IngestKitConfig":
        try:
            logging_config = LoggingConfig(**config_dict.get("logging", {}))
            defaults = IngestDefaults(**config_dict.get("defaults", {}))
        except TypeError as exc:
            raise ConfigurationError(f"Unknown configuration key: {exc}") from exc
        return cls(logging=logging_config, defaults=defaults)

    def to_dict(self) -> dict[str, Any]:
        """Plain dict form, dropping unset values so it can be written as TOML."""
        return {
            "logging": {k: v for k, v in asdict(self.logging).items() if v is not None},
            "defaults": {k: v for k, v in asdict(self.defaults).items() if v is not None},
        }


class ConfigManager:
    """Loads, updates and saves the ingestkit configuration file."""

    def __init__(self, config_path: Path | None = None, *, use_env: bool = True):
        """Initialise the manager.

        Args:
            config_path: Path of the TOML file, ``~/.ingestkit/config.toml`` by default.
            use_env: Whether ``INGESTKIT_*`` environment variables override the file.
        """
        self.config_path = config_path or Path.home() / ".ingestkit" / "config.toml"
        self.use_env = use_env
        self.config = self._load_config()

    def _load_config(self) -> IngestKitConfig:
        config_dict: dict[str, Any] = {}
        if self.config_path.exists():
            try:
                with open(self.config_path, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.warning("Failed to load config from {path}: {error}", path=str(self.config_path), error=str(e))
                config_dict = {}

        if self.use_env:
            _deep_update(config_dict, load_config_from_env())
        return IngestKitConfig.from_dict(config_dict)

    def get_config(self) -> IngestKitConfig:
        return self.config

    def update_config(self, **updates: Any) -> None:
        """Merge ``updates`` (nested dicts per section) into the current config."""
        config_dict = self.config.to_dict()
        _deep_update(config_dict, updates)
        self.config = IngestKitConfig.from_dict(config_dict)

    def save_config(self) -> None:
        import tomli_w

        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "wb") as f:
            tomli_w.dump(self.config.to_dict(), f)


def _deep_update(d: dict[str, Any], u: dict[str, Any]) -> dict[str, Any]:
    for k, v in u.items():
        if isinstance(v, dict):
            d[k] = _deep_update(d.get(k, {}), v)
        else:
            d[k] = v
    return d


def _env_flag(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def load_config_from_env() -> dict[str, Any]:
    """Read configuration overrides from ``INGESTKIT_*`` environment variables."""
    config: dict[str, Any] = {}

    logging_config: dict[str, Any] = {}
    level = os.getenv("INGESTKIT_LOGGING_LEVEL")
    if level is not None:
        logging_config["level"] = level
    log_file = os.getenv("INGESTKIT_LOGGING_FILE")
    if log_file is not None:
        logging_config["file"] = log_file
    if logging_config:
        config["logging"] = logging_config

    defaults: dict[str, Any] = {}
    default_tags = os.getenv("INGESTKIT_DEFAULT_TAGS")
    if default_tags is not None:
        defaults["tags"] = [tag.strip() for tag in default_tags.split(",") if tag.strip()]
    default_format = os.getenv("INGESTKIT_DEFAULT_FORMAT")
    if default_format is not None:
        defaults["format"] = default_format
    flush = os.getenv("INGESTKIT_FLUSH_IMMEDIATELY")
    if flush is not None:
        defaults["flush_immediately"] = _env_flag(flush)
    report = os.getenv("INGESTKIT_REPORT_TO_TABLE")
    if report is not None:
        defaults["report_to_table"] = _env_flag(report)
    if defaults:
        config["defaults"] = defaults

    return config
