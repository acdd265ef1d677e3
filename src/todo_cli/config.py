"""Configuration management for todo-cli."""

import json
import os
from pathlib import Path
from typing import Any, Optional

from platformdirs import user_config_dir
from pydantic import BaseModel, Field, ValidationError

FILE_ENV = "TODO_FILE"
NO_COLOR_ENV = "NO_COLOR"

RFC822 = "%d %b %y %H:%M %Z"


class StorageConfig(BaseModel):
    """Where the task list lives."""

    file: str = Field(default=".todos.json")


class OutputConfig(BaseModel):
    """Output configuration."""

    format: str = Field(default="table")
    color: bool = Field(default=True)
    date_format: str = Field(default=RFC822)


class Config(BaseModel):
    """Main configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


class ConfigManager:
    """Loads and saves the todo-cli configuration file."""

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = Path(config_dir or user_config_dir("todo-cli"))
        self.config_file = self.config_dir / "config.json"
        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> Config:
        """Load configuration from file, falling back to defaults."""
        if not self.config_file.exists():
            return Config()
        try:
            with open(self.config_file, "r", encoding="utf-8") as f:
                data = json.load(f)
            return Config(**data)
        except (OSError, ValueError, TypeError, ValidationError):
            # Corrupt or invalid files fall back to defaults
            return Config()

    def save_config(self, config: Optional[Config] = None) -> None:
        """Save configuration to file."""
        if config is None:
            config = self.config

        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w", encoding="utf-8") as f:
            json.dump(config.model_dump(), f, indent=2)

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        return self._lookup(self.config, key)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key and save."""
        keys = key.split(".")
        config_dict = self.config.model_dump()

        current = config_dict
        for k in keys[:-1]:
            if k not in current:
                current[k] = {}
            current = current[k]
        current[keys[-1]] = value

        self._config = Config(**config_dict)
        self.save_config()

    @staticmethod
    def _lookup(config: Config, key: str) -> Any:
        value: Any = config
        for k in key.split("."):
            if isinstance(value, BaseModel):
                value = getattr(value, k, None)
            else:
                return None
        return value

    def resolve_storage_path(self, override: Optional[str] = None) -> Path:
        """Pick the todo file: explicit override, then $TODO_FILE, then config."""
        raw = override or os.environ.get(FILE_ENV) or self.config.storage.file
        return Path(raw).expanduser()

    def use_color(self) -> bool:
        """Colour is on unless disabled in config or via $NO_COLOR."""
        if os.environ.get(NO_COLOR_ENV):
            return False
        return self.config.output.color


_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager
