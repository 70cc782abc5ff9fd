"""
System configuration for Chance.

One YAML file configures the whole application:

    journal:
      export_dir: exports
      recent_trades: 5

    analyst:
      api_key_env: ANTHROPIC_API_KEY
      model: claude-sonnet-4-5
      max_tokens: 2048

    logging:
      level: INFO
      format: console

Search order for SystemConfig.load():
1. Explicit path argument
2. CHANCE_CONFIG environment variable
3. config/system.yaml in the current working directory
4. Built-in defaults

Values may reference environment variables as ${VAR}; unset variables keep
their placeholder. Partial files are merged over the defaults.
"""

import os
import re
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Literal, cast

import yaml

from chance.system.log_system import LoggingConfig as LoggerConfig

DEFAULT_CONFIG_PATH = Path("config/system.yaml")
CONFIG_ENV_VAR = "CHANCE_CONFIG"

_ENV_PATTERN = re.compile(r"\$\{([^}]+)\}")


@dataclass
class JournalConfig:
    """Journal session defaults (export location, dashboard sizes)."""

    export_dir: str = "exports"
    recent_trades: int = 5


@dataclass
class AnalystConfig:
    """AI analyst settings. The API key itself is only ever read from the environment."""

    api_key_env: str = "ANTHROPIC_API_KEY"
    model: str = "claude-sonnet-4-5"
    max_tokens: int = 2048
    timeout_seconds: float = 60.0


@dataclass
class LoggingConfig:
    """File-facing logging section; converted to the log_system model at startup."""

    level: str = "INFO"
    format: str = "console"
    timestamp_format: str = "compact"
    enable_file: bool = False
    file_path: str = "logs/chance.log"
    file_level: str = "WARNING"
    file_rotation: bool = True
    max_file_size_mb: int = 10
    backup_count: int = 3

    def to_logger_config(self) -> LoggerConfig:
        """Convert to the pydantic LoggingConfig consumed by LoggerFactory."""
        return LoggerConfig(
            level=cast(Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], self.level.upper()),
            format=cast(Literal["console", "json"], self.format),
            timestamp_format=cast(Literal["iso", "compact", "time", "short"], self.timestamp_format),
            enable_file=self.enable_file,
            file_path=Path(self.file_path),
            file_level=cast(Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], self.file_level.upper()),
            file_rotation=self.file_rotation,
            max_file_size_mb=self.max_file_size_mb,
            backup_count=self.backup_count,
        )


@dataclass
class SystemConfig:
    """Complete application configuration."""

    journal: JournalConfig = field(default_factory=JournalConfig)
    analyst: AnalystConfig = field(default_factory=AnalystConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, path: Path | str | None = None) -> "SystemConfig":
        """
        Load configuration from YAML, merged over built-in defaults.

        Args:
            path: Optional explicit config file. Missing files fall back to defaults.

        Returns:
            SystemConfig instance
        """
        if path is None:
            env_path = os.environ.get(CONFIG_ENV_VAR)
            path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH

        path = Path(path)
        defaults = asdict(cls())

        if not path.exists():
            return cls._from_dict(defaults)

        with open(path, encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}

        merged = _deep_merge(defaults, _substitute_env_vars(loaded))
        return cls._from_dict(merged)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "SystemConfig":
        """Build config from a (possibly partial) dictionary."""
        return cls(
            journal=JournalConfig(**data.get("journal", {})),
            analyst=AnalystConfig(**data.get("analyst", {})),
            logging=LoggingConfig(**data.get("logging", {})),
        )


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into a copy of base. Override wins on conflicts."""
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _substitute_env_vars(value: Any) -> Any:
    """Replace ${VAR} references in strings, recursing into dicts and lists."""
    if isinstance(value, dict):
        return {k: _substitute_env_vars(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env_vars(v) for v in value]
    if isinstance(value, str):
        return _ENV_PATTERN.sub(lambda m: os.environ.get(m.group(1), m.group(0)), value)
    return value


_system_config: SystemConfig | None = None


def get_system_config(path: Path | str | None = None) -> SystemConfig:
    """Return the cached system config, loading it on first use or when a path is given."""
    global _system_config
    if path is not None or _system_config is None:
        _system_config = SystemConfig.load(path)
    return _system_config


def reload_system_config(path: Path | str | None = None) -> SystemConfig:
    """Force a reload of the cached system config."""
    global _system_config
    _system_config = SystemConfig.load(path)
    return _system_config
