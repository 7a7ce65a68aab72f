"""
Configuration management for setupscan.

Handles loading, merging, and discovery of configuration files.
"""
import os
from typing import Optional

import importlib.resources as importlib_resources

import yaml

from setupscan.utils.exceptions import ConfigurationError

PROJECT_CONFIG_FILE = "setupscan.config.yaml"


class ConfigManager:
    """Manages setupscan configuration loading and merging operations."""

    def load_config(self, path: str) -> dict:
        """Load configuration from YAML file."""
        try:
            with open(path, "r") as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError("Invalid YAML in config file", file_path=path, original_exception=e)
        except OSError as e:
            raise ConfigurationError("Failed to read config file", file_path=path, original_exception=e)

        if loaded is None:
            return {}
        if not isinstance(loaded, dict):
            raise ConfigurationError("Config file must contain a mapping", file_path=path)
        return loaded

    def deep_merge(self, default: dict, user: dict) -> dict:
        """Deep merge user config into default config."""
        result = default.copy()
        for key, value in user.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self.deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def load_package_default_config(self) -> dict:
        """Load default config from package."""
        import setupscan.config
        default_config_path = importlib_resources.files(setupscan.config) / "default.yaml"
        with default_config_path.open("r") as f:
            return yaml.safe_load(f)

    def load_and_merge_config(self, user_config_path: str) -> dict:
        """Load user config and merge with package default."""
        default_config = self.load_package_default_config()
        user_config = self.load_config(user_config_path)
        return self.deep_merge(default_config, user_config)

    def discover_and_load_config(self, config_arg: Optional[str]) -> dict:
        """Discover config file with priority order."""

        # Priority 1: --config argument
        if config_arg:
            if os.path.exists(config_arg):
                return self.load_and_merge_config(config_arg)
            raise ConfigurationError("Config file not found", file_path=config_arg)

        # Priority 2: setupscan.config.yaml in current directory
        if os.path.exists(PROJECT_CONFIG_FILE):
            return self.load_and_merge_config(PROJECT_CONFIG_FILE)

        # Priority 3: Package default config
        return self.load_package_default_config()

    def merge_config_and_args(
        self,
        config: dict,
        output: Optional[str] = None,
        python_path: Optional[str] = None,
        log_level: Optional[str] = None,
    ) -> dict:
        """Merge configuration with CLI arguments."""
        if output is not None:
            config.setdefault("output", {})["dependencies_file"] = output

        if python_path is not None:
            config.setdefault("virtualenv", {})["python"] = python_path

        if log_level is not None:
            config.setdefault("logging", {})["level"] = log_level

        return config
