# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Configuration management utilities for the accessfix package.

This module provides a centralized configuration system that manages default
options, user-provided settings, and environment variables across all modules.
"""

import os
import json
from copy import deepcopy
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

from accessfix.utils.logging_helper import setup_logger, ConfigurationError

# Configure module-level logger
logger = setup_logger(__name__)


class ConfigManager:
    """
    Centralized configuration manager for scanner components.

    This class handles:
    - Default options
    - User-provided options
    - Environment variables
    - Option merging and cascade
    """

    def __init__(
        self, defaults: Optional[Dict[str, Any]] = None, env_prefix: str = "ACCESSFIX_"
    ):
        """
        Initialize a configuration manager.

        Args:
            defaults: Dictionary of default options
            env_prefix: Prefix for environment variables
        """
        self.defaults = defaults or {}
        self.env_prefix = env_prefix
        self.user_config: Dict[str, Any] = {}

    def get_config(
        self, user_options: Optional[Dict[str, Any]] = None, section: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Get the resolved configuration with defaults, environment vars, and user options.

        Args:
            user_options: User-provided option overrides
            section: Optional section name to retrieve (e.g., 'scan', 'scoring', 'report')

        Returns:
            Dict with the resolved configuration options
        """
        # Start with defaults
        if section and section in self.defaults:
            config = deepcopy(self.defaults[section])
        else:
            config = deepcopy(self.defaults)

        # Apply stored user config
        if section and section in self.user_config:
            config.update(self.user_config[section])
        elif not section:
            config.update(self.user_config)

        self._apply_env_vars(config, section)

        # Apply runtime user options (highest precedence)
        if user_options:
            config.update(user_options)

        return config

    def set_user_config(self, config: Dict[str, Any], section: Optional[str] = None) -> None:
        """
        Set persistent user configuration.

        Args:
            config: Dictionary of configuration options
            section: Optional section name
        """
        if section:
            if section not in self.user_config:
                self.user_config[section] = {}
            self.user_config[section].update(config)
        else:
            self.user_config.update(config)

    def reset_user_config(self) -> None:
        """Drop all persistent user configuration."""
        self.user_config = {}

    def _apply_env_vars(self, config: Dict[str, Any], section: Optional[str] = None) -> None:
        """
        Apply relevant environment variables to the configuration.

        Args:
            config: Configuration dictionary to update
            section: Optional section name to scope environment variables
        """
        prefix = self.env_prefix
        if section:
            prefix = f"{prefix}{section.upper()}_"

        for env_var, value in os.environ.items():
            if not env_var.startswith(prefix):
                continue

            option_name = env_var[len(prefix):].lower()

            # Convert value type based on existing config if possible
            if option_name in config and config[option_name] is not None:
                existing_type = type(config[option_name])
                try:
                    if existing_type == bool:
                        value = value.lower() in ("true", "1", "yes", "y")
                    elif existing_type == int:
                        value = int(value)
                    elif existing_type == float:
                        value = float(value)
                    elif existing_type == list:
                        value = [item.strip() for item in value.split(",") if item.strip()]
                except (ValueError, TypeError):
                    logger.warning(
                        "Could not convert environment variable %s to %s",
                        env_var,
                        existing_type.__name__,
                    )

            config[option_name] = value
            logger.debug("Applied environment variable %s", env_var)


def validate_options(
    options: Dict[str, Any],
    optional_fields: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Validate configuration options against expected types.

    Args:
        options: The options dictionary to validate
        optional_fields: Mapping of optional field names to a type or tuple of types

    Raises:
        ConfigurationError: If validation fails
    """
    if not optional_fields:
        return

    for field, field_type in optional_fields.items():
        if field in options and options[field] is not None:
            if not isinstance(options[field], field_type):
                expected = (
                    " or ".join(t.__name__ for t in field_type)
                    if isinstance(field_type, tuple)
                    else field_type.__name__
                )
                raise ConfigurationError(
                    f"Field '{field}' has incorrect type. "
                    f"Expected {expected}, got {type(options[field]).__name__}"
                )


def load_config_file(file_path: str) -> Dict[str, Any]:
    """
    Load configuration from a file.

    Supports YAML (.yaml, .yml) and JSON (.json) formats.

    Args:
        file_path: Path to the configuration file

    Returns:
        Dictionary with configuration options

    Raises:
        ConfigurationError: If file cannot be loaded or parsed
    """
    path = Path(file_path)

    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {file_path}")

    suffix = path.suffix.lower()
    if suffix not in (".yaml", ".yml", ".json"):
        raise ConfigurationError(
            f"Unsupported configuration file format: {path.suffix}. "
            "Supported formats: YAML (.yaml, .yml), JSON (.json)"
        )

    try:
        with open(path, "r", encoding="utf-8") as f:
            if suffix == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f) or {}
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Error parsing configuration file: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Error loading configuration file: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file must contain a mapping, got {type(data).__name__}"
        )
    return data


def save_config(config: Dict[str, Any], file_path: str, file_format: str = "yaml") -> None:
    """
    Save configuration to a file.

    Args:
        config: Configuration dictionary
        file_path: Path to save the configuration file
        file_format: File format ('yaml' or 'json')

    Raises:
        ConfigurationError: If file cannot be written
    """
    if file_format.lower() not in ("yaml", "json"):
        raise ConfigurationError(f"Unsupported format: {file_format}")

    try:
        with open(file_path, "w", encoding="utf-8") as f:
            if file_format.lower() == "yaml":
                yaml.safe_dump(config, f, default_flow_style=False)
            else:
                json.dump(config, f, indent=2)
    except OSError as e:
        raise ConfigurationError(f"Error saving configuration: {e}") from e
    logger.info("Configuration saved to %s", file_path)


# Global instance for shared configuration
config_manager = ConfigManager(
    {
        # Loader, parser and rule engine defaults
        "scan": {
            "parser_backend": "tree",  # tree, text
            "disabled_checks": [],  # check ids to skip, [] = run all
            "max_workers": 1,
            "timeout": 30.0,
            "fetch_timeout": 15.0,
            "github_token": None,
            "github_ref": None,
        },
        # Score deduction per issue
        "scoring": {
            "critical_weight": 10,
            "warning_weight": 5,
            "info_weight": 2,
        },
        "report": {
            "report_format": "json",  # json, text
        },
    }
)
