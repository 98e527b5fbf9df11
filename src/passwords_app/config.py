"""
User settings for the generator, hasher and analyzer panels.
"""

import os
import json
from typing import Dict, Any, Optional, Tuple

from .errors import ConfigError


# Inclusive bounds for the numeric settings
LIMITS: Dict[str, Tuple[int, int]] = {
    "random_length": (8, 128),
    "memorable_length": (1, 256),
    "pin_length": (4, 32),
    "bcrypt_rounds": (4, 31),
}

SHA_TYPES = ("1", "224", "256", "384", "512")


class Config:
    """Settings manager backed by a JSON file."""

    DEFAULT_CONFIG = {
        "random_length": 20,
        "random_symbols": False,
        "random_numbers": True,
        "random_uppercase": True,
        "random_exclude_similar_characters": False,
        "random_strict": True,
        "memorable_length": 4,
        "memorable_full_words": True,
        "memorable_capitalize": False,
        "memorable_uppercase": False,
        "memorable_separator": "-",
        "pin_length": 6,
        "bcrypt_rounds": 10,
        "sha_type": "256",
        "md5_uppercase": False,
        "log_file": None,
        "verbosity": "info",
    }

    def __init__(self, config_path: Optional[str] = None):
        """Initialize with optional path to config file"""
        self.config = self.DEFAULT_CONFIG.copy()
        self.config_path = config_path or os.path.expanduser("~/.passwords_app.json")

        if os.path.exists(self.config_path):
            self.load()

    def load(self) -> None:
        """Load configuration from file"""
        try:
            with open(self.config_path, 'r') as f:
                user_config = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigError(f"Error loading config file: {e}")
        if not isinstance(user_config, dict):
            raise ConfigError(f"Config file {self.config_path} must hold a JSON object")
        for key, value in user_config.items():
            self.validate(key, value)
        self.config.update(user_config)

    def save(self) -> None:
        """Save current configuration to file"""
        try:
            config_dir = os.path.dirname(self.config_path)
            if config_dir:
                os.makedirs(config_dir, exist_ok=True)

            with open(self.config_path, 'w') as f:
                json.dump(self.config, f, indent=2)
        except OSError as e:
            raise ConfigError(f"Error saving config file: {e}")

    @classmethod
    def validate(cls, key: str, value: Any) -> None:
        """Reject values of the wrong type, out-of-range numbers and unknown SHA types.

        Keys missing from ``DEFAULT_CONFIG`` are not checked.
        """
        if key in LIMITS:
            low, high = LIMITS[key]
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{key} must be an integer, got {value!r}")
            if not low <= value <= high:
                raise ConfigError(f"{key} must be between {low} and {high}, got {value}")
        elif key == "sha_type":
            if isinstance(value, bool) or str(value) not in SHA_TYPES:
                raise ConfigError(f"sha_type must be one of {', '.join(SHA_TYPES)}, got {value!r}")
        elif key == "log_file":
            if value is not None and not isinstance(value, str):
                raise ConfigError(f"log_file must be a path or null, got {value!r}")
        elif key in cls.DEFAULT_CONFIG:
            expected = type(cls.DEFAULT_CONFIG[key])
            if not isinstance(value, expected):
                raise ConfigError(f"{key} must be a {expected.__name__}, got {value!r}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value"""
        return self.config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value"""
        self.validate(key, value)
        self.config[key] = value

    def update(self, config_dict: Dict[str, Any]) -> None:
        """Update multiple configuration values"""
        for key, value in config_dict.items():
            self.validate(key, value)
        self.config.update(config_dict)

    def as_dict(self) -> Dict[str, Any]:
        return self.config.copy()

    def __getitem__(self, key: str) -> Any:
        return self.config[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __contains__(self, key: str) -> bool:
        return key in self.config


def verbosity_to_level(verbosity) -> int:
    """Convert a verbosity name to a logging level, INFO when unknown."""
    if isinstance(verbosity, int):
        return verbosity
    levels = {
        "debug": 10,
        "info": 20,
        "warning": 30,
        "error": 40,
        "critical": 50
    }
    return levels.get(str(verbosity).lower(), 20)
