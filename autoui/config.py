"""
Configuration management system for AutoUI.
Handles YAML configuration loading, validation, and default values.
"""

import os
import yaml
from typing import Any, Dict, Optional

from autoui.exceptions import ConfigurationError
from autoui.interfaces import ConfigurationInterface


class ConfigurationManager(ConfigurationInterface):
    """Manages AutoUI configuration with YAML support."""

    DEFAULT_CONFIG_NAME = "autoui-config.yaml"
    DEFAULT_CONFIG_PATHS = [
        "./autoui-config.yaml",
        "~/.autoui/config.yaml",
    ]

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration manager."""
        self.config_path = config_path
        self._config: Optional[Dict[str, Any]] = None

    def load_config(self, config_path: Optional[str] = None) -> Dict[str, Any]:
        """Load configuration from file."""
        if config_path:
            self.config_path = config_path

        config_file = self._find_config_file()

        if config_file and os.path.exists(config_file):
            try:
                with open(config_file, "r", encoding="utf-8") as f:
                    config = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(
                    f"Invalid YAML in config file {config_file}", str(e)
                )
            except OSError as e:
                raise ConfigurationError(
                    f"Error reading config file {config_file}", str(e)
                )
        else:
            config = {}

        if not isinstance(config, dict):
            raise ConfigurationError(
                "Invalid configuration", "Expected mapping at root level"
            )

        merged_config = self._deep_merge(self.get_default_config(), config)

        if not self.validate_config(merged_config):
            raise ConfigurationError("Configuration validation failed")

        self._config = merged_config
        return merged_config

    def save_config(
        self, config: Dict[str, Any], config_path: Optional[str] = None
    ) -> None:
        """Save configuration to file."""
        if config_path:
            self.config_path = config_path

        if not self.config_path:
            self.config_path = self.DEFAULT_CONFIG_PATHS[0]

        config_dir = os.path.dirname(os.path.expanduser(self.config_path))
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)

        try:
            with open(os.path.expanduser(self.config_path), "w", encoding="utf-8") as f:
                yaml.dump(config, f, default_flow_style=False, indent=2, sort_keys=False)
        except OSError as e:
            raise ConfigurationError(
                f"Error saving config file {self.config_path}", str(e)
            )

    def get_default_config(self) -> Dict[str, Any]:
        """Get default configuration values."""
        return {
            "github": {
                "api_url": "https://api.github.com",
                "repository": None,
                "token_env": "GITHUB_TOKEN",
                "bot_login": "github-actions[bot]",
                "label": "AutoUI",
                "timeout": 30,
                "per_page": 100,
            },
            "questionnaire": {
                "schema_file": None,
                "answers_file": "/tmp/autoui-answers.json",
            },
            "generator": {
                "templates_dir": None,
                "output_dir": "coming-soon",
                "base_path": "/",
            },
            "logging": {"file": None, "level": "INFO"},
        }

    def validate_config(self, config: Dict[str, Any]) -> bool:
        """Validate configuration structure and values."""
        required_sections = ["github", "questionnaire", "generator", "logging"]

        for section in required_sections:
            if not isinstance(config.get(section), dict):
                return False

        github_config = config["github"]
        for key in ("timeout", "per_page"):
            value = github_config.get(key)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                return False

        if not github_config.get("api_url") or not github_config.get("label"):
            return False

        if not config["questionnaire"].get("answers_file"):
            return False

        if not config["generator"].get("output_dir"):
            return False

        return True

    def get_config(self) -> Dict[str, Any]:
        """Get current configuration, loading if necessary."""
        if self._config is None:
            self.load_config()
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot-notation key."""
        config = self.get_config()
        keys = key.split(".")

        current = config
        for k in keys:
            if isinstance(current, dict) and k in current:
                current = current[k]
            else:
                return default

        return current

    def _find_config_file(self) -> Optional[str]:
        """Find configuration file in standard locations."""
        if self.config_path:
            return os.path.expanduser(self.config_path)

        for path in self.DEFAULT_CONFIG_PATHS:
            expanded_path = os.path.expanduser(path)
            if os.path.exists(expanded_path):
                return expanded_path

        return None

    def _deep_merge(
        self, base: Dict[str, Any], override: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
