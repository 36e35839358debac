"""
Configuration Management

Centralized application configuration with YAML file support and
environment variable overrides. Grading content (keyword groups,
behaviour) is not part of this; it is loaded per essay.
"""

import os
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass, field

import yaml
from dotenv import load_dotenv

from .exceptions import ConfigurationError

# Load .env file if it exists
load_dotenv()


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    console_level: str = "WARNING"  # Separate level for console output
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: str = "logs/essay_grader.log"
    max_size: str = "10MB"
    backup_count: int = 5


@dataclass
class MatchingConfig:
    """Keyword matching settings."""
    # None keeps the word-length based tolerance
    fuzzy_threshold: Optional[float] = None


@dataclass
class FeedbackConfig:
    """Feedback rendering settings."""
    line_break: str = "\n"


@dataclass
class StorageConfig:
    """Answer snapshot storage settings."""
    state_dir: str = "state"


@dataclass
class AppConfig:
    """Main application configuration."""
    name: str = "Essay Grader"
    version: str = "1.0.0"
    environment: str = "production"
    debug: bool = False

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    matching: MatchingConfig = field(default_factory=MatchingConfig)
    feedback: FeedbackConfig = field(default_factory=FeedbackConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)

    @classmethod
    def from_yaml(cls, config_path: Path) -> "AppConfig":
        """Load configuration from YAML file."""
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot read configuration {config_path}: {e}")

        if not isinstance(config_data, dict):
            raise ConfigurationError(f"Configuration {config_path} must be a mapping")

        # Handle nested app configuration structure
        if 'app' in config_data:
            app_config = config_data.pop('app')
            config_data.update(app_config)

        # Apply environment variable overrides
        config_data = cls._apply_env_overrides(config_data)

        try:
            if isinstance(config_data.get('logging'), dict):
                config_data['logging'] = LoggingConfig(**config_data['logging'])

            if isinstance(config_data.get('matching'), dict):
                config_data['matching'] = MatchingConfig(**config_data['matching'])

            if isinstance(config_data.get('feedback'), dict):
                config_data['feedback'] = FeedbackConfig(**config_data['feedback'])

            if isinstance(config_data.get('storage'), dict):
                config_data['storage'] = StorageConfig(**config_data['storage'])

            return cls(**config_data)
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration {config_path}: {e}")

    @staticmethod
    def _apply_env_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        env_mappings = {
            'LOG_LEVEL': ['logging', 'level'],
            'DEBUG': ['debug'],
            'ENVIRONMENT': ['environment'],
            'ESSAY_STATE_DIR': ['storage', 'state_dir'],
        }

        for env_var, config_path in env_mappings.items():
            env_value = os.getenv(env_var)
            if env_value:
                current = config_data
                for key in config_path[:-1]:
                    current = current.setdefault(key, {})
                if config_path[-1] == 'debug':
                    env_value = env_value.strip().lower() in ('1', 'true', 'yes', 'on')
                current[config_path[-1]] = env_value

        return config_data


# Global configuration instance
_config: Optional[AppConfig] = None


def get_config(config_path: Optional[Path] = None) -> AppConfig:
    """Get the application configuration instance."""
    global _config

    if _config is None:
        if config_path is None:
            config_path = Path("config/default.yaml")

        if config_path.exists():
            _config = AppConfig.from_yaml(config_path)
        else:
            _config = AppConfig()

    return _config


def set_config(config: AppConfig) -> None:
    """Set the global configuration instance (useful for testing)."""
    global _config
    _config = config


def reload_config(config_path: Optional[Path] = None) -> AppConfig:
    """Reload configuration from file."""
    global _config
    _config = None
    return get_config(config_path)
