"""Configuration management for WorkWatch."""

import math
import os
from pathlib import Path
from typing import Any, Dict
import toml
from dotenv import load_dotenv

from workwatch.utils.logger import setup_logger

# Load environment variables
load_dotenv()

logger = setup_logger(__name__)

DEFAULT_USERNAME = 'Anonymous'
DEFAULT_POLL_SECONDS = 1.0


class Config:
    """WorkWatch configuration manager."""

    def __init__(self, config_path: str | None = None):
        """Initialize configuration.

        Args:
            config_path: Path to config file. If None, uses default location.
        """
        if config_path is None:
            config_path = self._get_config_path()

        self.config_path = Path(config_path)
        self._config: Dict[str, Any] = self._load_config()
        self.warnings: list[str] = []

    @staticmethod
    def _get_config_path() -> Path:
        """Get config file path with priority order:
        1. Environment variable WORKWATCH_CONFIG
        2. Project directory workwatch.toml (for development)
        3. ~/.config/workwatch/workwatch.toml (default)
        """
        env_config = os.getenv('WORKWATCH_CONFIG')
        if env_config and Path(env_config).exists():
            return Path(env_config)

        project_root = Path(__file__).parent.parent
        dev_config = project_root / 'workwatch.toml'
        if dev_config.exists():
            return dev_config

        config_home = os.getenv('XDG_CONFIG_HOME', str(Path.home() / '.config'))
        return Path(config_home) / 'workwatch' / 'workwatch.toml'

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file, falling back to defaults."""
        defaults = self._get_default_config()
        if not self.config_path.exists():
            logger.debug(f"Config file not found: {self.config_path}, using defaults")
            return defaults

        try:
            loaded = toml.load(self.config_path)
        except (OSError, toml.TomlDecodeError) as e:
            logger.warning(f"Failed to load config from {self.config_path}: {e}")
            return defaults

        for section, values in loaded.items():
            if isinstance(values, dict):
                defaults.setdefault(section, {}).update(values)
        return defaults

    @staticmethod
    def _get_default_config() -> Dict[str, Any]:
        """Get default configuration."""
        return {
            'general': {
                'username': '',
                'data_dir': str(Path.home() / '.local' / 'share' / 'workwatch'),
                'log_level': 'INFO',
            },
            'webhook': {
                'url': '',
                'bot_name': 'WorkWatch',
                'timeout': 10.0,
            },
            'timer': {
                'poll_seconds': DEFAULT_POLL_SECONDS,
            },
        }

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get configuration value.

        Args:
            section: Configuration section name
            key: Configuration key
            default: Default value if not found

        Returns:
            Configuration value
        """
        value = self._config.get(section, {}).get(key, default)

        # Environment wins over the file for identity and destination
        if section == 'general' and key == 'username':
            value = os.getenv('WORKWATCH_USERNAME', value)
        elif section == 'webhook' and key == 'url':
            value = os.getenv('WORKWATCH_WEBHOOK', value)

        return value

    def _warn(self, message: str):
        if message not in self.warnings:
            self.warnings.append(message)
            logger.warning(message)

    @property
    def username(self) -> str:
        """Display name of the person clocking in."""
        username = self.get('general', 'username')
        if not username:
            self._warn(
                "WORKWATCH_USERNAME not found! Will default to Anonymous."
            )
            return DEFAULT_USERNAME
        return username

    @property
    def webhook_url(self) -> str:
        """Webhook destination; empty means posting is disabled."""
        url = self.get('webhook', 'url')
        if not url:
            self._warn(
                "WORKWATCH_WEBHOOK not found! Will not be able to post messages to discord!"
            )
            return ''
        return url

    @property
    def bot_name(self) -> str:
        return self.get('webhook', 'bot_name', 'WorkWatch')

    @property
    def webhook_timeout(self) -> float:
        return float(self.get('webhook', 'timeout', 10.0))

    @property
    def poll_seconds(self) -> float:
        """Seconds to wait for a key before counting a timer tick."""
        value = self.get('timer', 'poll_seconds', DEFAULT_POLL_SECONDS)
        try:
            seconds = float(value)
        except (TypeError, ValueError):
            seconds = 0.0

        # Anything under a millisecond turns the poll non-blocking
        if not math.isfinite(seconds) or int(seconds * 1000) < 1:
            self._warn(
                f"Invalid timer.poll_seconds {value!r}! Will default to {DEFAULT_POLL_SECONDS}."
            )
            return DEFAULT_POLL_SECONDS
        return seconds

    @property
    def log_level(self) -> str:
        return self.get('general', 'log_level', 'INFO')

    @property
    def data_dir(self) -> Path:
        """Get data directory path."""
        path = Path(self.get('general', 'data_dir'))
        path.mkdir(parents=True, exist_ok=True)
        return path


# Global config instance
_config: Config | None = None


def get_config(config_path: str | None = None) -> Config:
    """Get global configuration instance.

    Args:
        config_path: Optional config file path, only honoured on first call
    """
    global _config
    if _config is None:
        _config = Config(config_path)
    return _config
