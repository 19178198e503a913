"""
Configuration management for code generation.

Handles loading and merging generation options from JSON files,
providing defaults and validation for generator settings.
"""

import copy
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


DEFAULT_OPTIONS: Dict[str, Any] = {
    "output": {
        "templateRoot": None,
        "outputRoot": None,
        "fileSuffix": ".ts",
    },
    "generateIndex": True,
}


@dataclass
class OutputConfig:
    """Where templates come from and where generated files go."""

    template_root: Optional[str] = None
    output_root: Optional[str] = None
    file_suffix: str = ".ts"


@dataclass
class GeneratorConfig:
    """Resolved options for one generation run."""

    output: OutputConfig = field(default_factory=OutputConfig)
    generate_index: bool = True

    # Unrecognised option keys; passed through to templates unchanged
    custom: Dict[str, Any] = field(default_factory=dict)

    def to_context(self) -> Dict[str, Any]:
        """
        Return the options as the template context sees them.

        Keys use the same camelCase names as the JSON configuration file.
        """
        context = copy.deepcopy(self.custom)
        context["output"] = {
            **(context.get("output") or {}),
            "templateRoot": self.output.template_root,
            "outputRoot": self.output.output_root,
            "fileSuffix": self.output.file_suffix,
        }
        context["generateIndex"] = self.generate_index
        return context


def merge_options(base: Dict[str, Any], *overrides: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Deep-merge option dictionaries, later ones winning.

    Nested dictionaries are merged key by key. A ``None`` value in an
    override leaves the existing value in place.

    Args:
        base: Starting options (not modified)
        *overrides: Option dictionaries applied left to right

    Returns:
        New merged dictionary
    """
    result = copy.deepcopy(base)
    for override in overrides:
        if not override:
            continue
        for key, value in override.items():
            if value is None:
                continue
            if isinstance(value, dict) and isinstance(result.get(key), dict):
                result[key] = merge_options(result[key], value)
            else:
                result[key] = copy.deepcopy(value)
    return result


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self, defaults: Optional[Dict[str, Any]] = None):
        self._defaults = copy.deepcopy(defaults or DEFAULT_OPTIONS)

    @property
    def defaults(self) -> Dict[str, Any]:
        return copy.deepcopy(self._defaults)

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration.

        Args:
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        file_config = self._load_config_file(config_file) if config_file else None
        merged = merge_options(self._defaults, file_config, custom_config)
        return self._dict_to_config(merged)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {str(e)}")
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {str(e)}")

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        output = config_dict.get("output") or {}
        if not isinstance(output, dict):
            raise ConfigError("'output' must be an object")

        custom = {
            key: value
            for key, value in config_dict.items()
            if key not in ("output", "generateIndex")
        }
        extra_output = {
            key: value
            for key, value in output.items()
            if key not in ("templateRoot", "outputRoot", "fileSuffix")
        }
        if extra_output:
            custom["output"] = extra_output

        return GeneratorConfig(
            output=OutputConfig(
                template_root=output.get("templateRoot"),
                output_root=output.get("outputRoot"),
                file_suffix=output.get("fileSuffix") or "",
            ),
            generate_index=bool(config_dict.get("generateIndex")),
            custom=custom,
        )

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config.to_context(), f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {str(e)}")


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
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Configuration merged over the defaults
    """
    return get_config_manager().get_config(custom_config, config_file)
