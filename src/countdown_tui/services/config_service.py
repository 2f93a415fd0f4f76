"""Configuration service for countdown-tui.

Loads ``config.json`` from the platform config directory, writing the
defaults out on first run. An unreadable or unwritable config directory
only costs persistence: the timer runs on in-memory defaults.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from platformdirs import user_config_dir
from pydantic import ValidationError

from countdown_tui.models.config_models import TimerConfig
from countdown_tui.utils.logger import get_logger


class ConfigError(RuntimeError):
    """Raised when the config file cannot be read or is invalid."""


class ConfigService:
    """Service for loading and saving the timer configuration."""

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir("countdown_tui"))
        self.config_path = self.config_dir / "config.json"

        self._config: TimerConfig | None = None

    @property
    def config(self) -> TimerConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> TimerConfig:
        """Load configuration from storage."""
        if self._config is not None:
            return self._config

        logger = get_logger()
        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = TimerConfig.model_validate_json(f.read())
            logger.info("config loaded from %s", self.config_path)
        except FileNotFoundError:
            # First run
            self._config = TimerConfig()
            try:
                self.save_config()
            except ConfigError as e:
                logger.warning("%s; running with defaults", e)
            else:
                logger.info("default config written to %s", self.config_path)
        except ValidationError as e:
            raise ConfigError(f"Invalid config {self.config_path}: {e}") from e
        except OSError as e:
            logger.warning("cannot read %s: %s; running with defaults", self.config_path, e)
            self._config = TimerConfig()

        return self._config

    def save_config(self):
        """Save the current configuration to storage."""
        if self._config is None:
            raise ConfigError("No configuration to save")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self._config.model_dump_json(indent=4))
        except OSError as e:
            raise ConfigError(f"Failed to save config: {e}") from e


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service
