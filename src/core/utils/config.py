import os
import yaml
import logging

from typing import Any, Optional

logger = logging.getLogger("Config")

DEFAULT_API_URL = "https://discord.com/api/v10"

class Config:
    def __init__(self, config_path: str = "config.yaml"):
        """Load settings for the message store

        Args:
            config_path: Path to the configuration file
        """
        self.config_path = config_path
        self.categories = [
            "adapter",
            "caching",
            "logging",
            "rate_limit"
        ]
        for category in self.categories:
            setattr(self, category, {})

        self.load_config()

    def load_config(self) -> None:
        """Load configuration from YAML file"""
        if os.path.exists(self.config_path):
            with open(self.config_path, "r") as file:
                config = yaml.safe_load(file) or {}
                for category in self.categories:
                    if category in config and isinstance(config[category], dict):
                        setattr(self, category, config[category])
        else:
            raise FileNotFoundError(f"Config file not found: {self.config_path}")

    def add_setting(self, category: str, key: str, value: Any) -> None:
        """Add a specific dynamic setting

        Args:
            category: Configuration category
            key: Setting key
            value: Value to add
        """
        if category in self.categories and key not in getattr(self, category):
            getattr(self, category)[key] = value
        else:
            raise ValueError(f"Invalid attempt to change configuration category: {category}")

    def get_setting(self, category: str, key: str, default=None) -> Any:
        """Get a specific setting

        Args:
            category: Configuration category
            key: Setting key
            default: Default value if key not found
        """
        try:
            return getattr(self, category).get(key, default)
        except (KeyError, AttributeError):
            if default is not None:
                return default
            raise ValueError(f"Setting '{key}' not found in configuration")

    def has_setting(self, category: str, key: str) -> bool:
        """Check if a setting exists

        Args:
            category: Configuration category
            key: Setting key
        """
        try:
            return key in getattr(self, category)
        except (KeyError, AttributeError):
            return False

    def get_token(self) -> Optional[str]:
        """Bot token used to authorize API requests"""
        return self.get_setting("adapter", "bot_token")

    def get_api_url(self) -> str:
        """Base URL of the Discord REST API, without a trailing slash"""
        return self.get_setting("adapter", "api_url", DEFAULT_API_URL).rstrip("/")
