"""Configuration management for ExPomo."""

import json
from pathlib import Path
from typing import Any, Optional

from platformdirs import user_config_dir
from pydantic import BaseModel, Field, field_validator

from expomo.models.pomodoro.scheduler import PomodoroDurations


class TimerConfig(BaseModel):
    """Interval durations and tick resolution."""

    work_minutes: int = Field(default=25)
    short_break_minutes: int = Field(default=5)
    long_break_minutes: int = Field(default=15)
    long_break_every: int = Field(default=4)
    tick_seconds: float = Field(default=1.0)

    @field_validator("work_minutes", "short_break_minutes", "long_break_minutes", "long_break_every")
    @classmethod
    def _positive_int(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("must be a positive number")
        return value

    @field_validator("tick_seconds")
    @classmethod
    def _positive_tick(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("must be a positive number")
        return value

    def durations(self, unit_seconds: int = 60) -> PomodoroDurations:
        """Convert to engine durations. ``unit_seconds=1`` reads minutes as seconds."""
        return PomodoroDurations.from_minutes(
            work=self.work_minutes,
            short_break=self.short_break_minutes,
            long_break=self.long_break_minutes,
            long_break_every=self.long_break_every,
            unit_seconds=unit_seconds,
        )


class NotificationConfig(BaseModel):
    """Desktop notification configuration."""

    enabled: bool = Field(default=True)
    title: str = Field(default="ExPomo")


class Config(BaseModel):
    """Main configuration."""

    timer: TimerConfig = Field(default_factory=TimerConfig)
    notifications: NotificationConfig = Field(default_factory=NotificationConfig)


class ConfigManager:
    """Manages ExPomo configuration."""

    def __init__(self, profile: str = "default"):
        self.profile = profile
        self.config_dir = Path(user_config_dir("expomo"))
        self.config_file = self.config_dir / f"{profile}.json"

        self.config_dir.mkdir(parents=True, exist_ok=True)

        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> Config:
        """Load configuration from file."""
        if self.config_file.exists():
            try:
                with open(self.config_file, "r") as f:
                    data = json.load(f)
                return Config(**data)
            except Exception:
                # If config is corrupted, return default
                return Config()
        return Config()

    def save_config(self, config: Optional[Config] = None) -> None:
        """Save configuration to file."""
        if config is None:
            config = self.config

        with open(self.config_file, "w") as f:
            json.dump(config.model_dump(), f, indent=2)

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        return self.get_from_config(self.config, key)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key.

        Raises KeyError for unknown keys and pydantic.ValidationError for
        values the settings model rejects.
        """
        if self.get(key) is None:
            raise KeyError(key)

        keys = key.split(".")
        config_dict = self.config.model_dump()

        current = config_dict
        for k in keys[:-1]:
            current = current[k]
        current[keys[-1]] = value

        self._config = Config(**config_dict)
        self.save_config()

    def reset(self, key: Optional[str] = None) -> None:
        """Reset configuration to defaults."""
        if key is None:
            self._config = Config()
        else:
            default_value = self.get_from_config(Config(), key)
            if default_value is None:
                raise KeyError(key)
            self.set(key, default_value)
        self.save_config()

    @staticmethod
    def get_from_config(config: Config, key: str) -> Any:
        """Get value from a config object using dot notation."""
        value: Any = config
        for k in key.split("."):
            if isinstance(value, BaseModel):
                value = getattr(value, k, None)
            else:
                return None
        return value


# Global config manager instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager(profile: str = "default") -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None or _config_manager.profile != profile:
        _config_manager = ConfigManager(profile)
    return _config_manager
