"""
Configuration management for binding generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .naming import NamingPolicy

DEFAULT_HEADER = "/* eslint-disable */\n"
DO_NOT_EDIT = (
    "// This file was generated by tsbind. Do not edit this file manually."
)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class GeneratorConfig:
    """Configuration for binding generators."""

    # Output settings
    output_file: Optional[str] = None
    header: str = DEFAULT_HEADER
    disclaimer: str = DO_NOT_EDIT

    # Wire naming
    namespace: Optional[str] = None
    command_format: str = "plugin:{namespace}|{name}"
    event_format: str = "plugin:{namespace}:{name}"

    # Error values of fallible commands are annotated `as any`
    error_as_any: bool = True

    # Emit doc comments on generated functions
    add_comments: bool = True

    def __post_init__(self):
        try:
            self.naming_policy()
        except ValueError as e:
            raise ConfigError(str(e)) from e

    def naming_policy(self) -> NamingPolicy:
        """Build the wire naming policy for this configuration."""
        return NamingPolicy(
            namespace=self.namespace,
            command_format=self.command_format,
            event_format=self.event_format,
        )


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._defaults: Dict[str, Any] = {
            "header": DEFAULT_HEADER,
            "disclaimer": DO_NOT_EDIT,
            "error_as_any": True,
            "add_comments": True,
        }

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration.

        Args:
            custom_config: Configuration overrides, applied after the file
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration

        Raises:
            ConfigError: If the file is unusable, a key is unknown or a
                wire-name format is malformed
        """
        base_config = self._defaults.copy()

        if config_file:
            base_config.update(self._load_config_file(config_file))

        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}

        unknown = sorted(key for key in config_dict if key not in known_fields)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        return GeneratorConfig(**config_dict)

    def validate_config(self, config: GeneratorConfig) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        for name in ("command_format", "event_format"):
            template = getattr(config, name)
            if "{name}" not in template:
                warnings.append(f"{name} does not contain '{{name}}': {template}")

        if config.namespace is not None:
            if not config.namespace:
                warnings.append("namespace is empty; wire names are not prefixed")
            elif any(ch.isspace() for ch in config.namespace):
                warnings.append(f"namespace contains whitespace: {config.namespace!r}")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    manager = get_config_manager()
    return manager.get_config(custom_config, config_file)
