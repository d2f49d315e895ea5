"""
PeerShare - Configuration Management

This module handles loading, merging, and managing configuration from
TOML files and environment variables. Supports default values and
runtime configuration updates.

Author: orpheus497
Version: 1.0.0
"""

import copy
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# Python 3.11+ has tomllib built-in, older versions need tomli
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .constants import (
    CONFIG_FILENAME,
    DEFAULT_DATA_DIR,
    ENV_PREFIX,
    LOG_FILENAME,
    QR_DEFAULT_BORDER,
    QR_DEFAULT_ERROR_CORRECTION,
    QR_DEFAULT_SIZE,
)
from .errors import ConfigError, ErrorCode

# Default configuration dictionary
DEFAULT_CONFIG: Dict[str, Any] = {
    "logging": {
        "level": "WARNING",
        "file_logging": False,
        "console_logging": True,
        "log_file": str(Path(DEFAULT_DATA_DIR) / LOG_FILENAME),
    },
    "qr": {
        "size": QR_DEFAULT_SIZE,
        "border": QR_DEFAULT_BORDER,
        "error_correction": QR_DEFAULT_ERROR_CORRECTION,
    },
    "output": {
        "color": True,
    },
}


class Config:
    """Configuration manager for PeerShare.

    Loads configuration from TOML files, merges with defaults,
    and applies environment variable overrides.

    Attributes:
        config_path: Path to the configuration file
        data: Configuration dictionary
    """

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            config_path: Path to configuration file (optional)
                If not provided, uses default location
        """
        if config_path is None:
            data_dir = Path(DEFAULT_DATA_DIR).expanduser()
            config_path = data_dir / CONFIG_FILENAME

        self.config_path = Path(config_path)
        self.data = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file and merge with defaults.

        Returns:
            Merged configuration dictionary

        Raises:
            ConfigError: If configuration loading or parsing fails
        """
        config = copy.deepcopy(DEFAULT_CONFIG)

        if self.config_path.exists():
            try:
                with open(self.config_path, "rb") as f:
                    file_config = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(
                    ErrorCode.E704_CONFIG_PARSE_ERROR,
                    f"Failed to parse configuration file: {e}",
                    {"path": str(self.config_path), "error": str(e)},
                )
            except OSError as e:
                raise ConfigError(
                    ErrorCode.E701_CONFIG_LOAD_FAILED,
                    f"Failed to read configuration file: {e}",
                    {"path": str(self.config_path), "error": str(e)},
                )

            config = self._merge_config(config, file_config)

        return self._apply_env_overrides(config)

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge override config into base config."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_config(result[key], value)
            else:
                result[key] = value

        return result

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration.

        Environment variables follow the pattern: PEERSHARE_SECTION_KEY
        For example: PEERSHARE_LOGGING_LEVEL=DEBUG

        Args:
            config: Base configuration dictionary

        Returns:
            Configuration with environment overrides applied
        """
        result = copy.deepcopy(config)

        for section, settings in config.items():
            if not isinstance(settings, dict):
                continue

            for key in settings:
                env_var = f"{ENV_PREFIX}_{section.upper()}_{key.upper()}"
                env_value = os.environ.get(env_var)

                if env_value is not None:
                    original_type = type(settings[key])
                    try:
                        if original_type == bool:
                            result[section][key] = env_value.lower() in ("true", "1", "yes")
                        elif original_type == int:
                            result[section][key] = int(env_value)
                        elif original_type == float:
                            result[section][key] = float(env_value)
                        else:
                            result[section][key] = env_value
                    except ValueError:
                        raise ConfigError(
                            ErrorCode.E703_INVALID_CONFIG,
                            f"Invalid value for {env_var}: expected {original_type.__name__}",
                            {"variable": env_var},
                        )

        return result

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        return self.data.get(section, {}).get(key, default)

    def set(self, section: str, key: str, value: Any) -> None:
        """Set a configuration value."""
        if section not in self.data:
            self.data[section] = {}

        self.data[section][key] = value

    def save(self) -> None:
        """Save current configuration to file.

        Raises:
            ConfigError: If saving fails
        """
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)

            with open(self.config_path, "w") as f:
                self._write_toml(f, self.data)

        except OSError as e:
            raise ConfigError(
                ErrorCode.E702_CONFIG_SAVE_FAILED,
                f"Failed to save configuration: {e}",
                {"path": str(self.config_path), "error": str(e)},
            )

    @staticmethod
    def _write_toml(file, data: Dict[str, Any]) -> None:
        """Write configuration data as TOML format."""
        for section, settings in data.items():
            if isinstance(settings, dict):
                file.write(f"[{section}]\n")
                for key, value in settings.items():
                    if isinstance(value, bool):
                        file.write(f"{key} = {str(value).lower()}\n")
                    elif isinstance(value, (int, float)):
                        file.write(f"{key} = {value}\n")
                    elif isinstance(value, str):
                        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
                        file.write(f'{key} = "{escaped}"\n')
                file.write("\n")

    def to_dict(self) -> Dict[str, Any]:
        """Get configuration as dictionary."""
        return copy.deepcopy(self.data)

    @classmethod
    def create_example(cls, path: Path) -> None:
        """Create an example configuration file.

        Args:
            path: Path where to create the example config

        Raises:
            ConfigError: If file creation fails
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)

            with open(path, "w") as f:
                f.write("# PeerShare Configuration File\n")
                f.write("# Generated example configuration\n\n")
                cls._write_toml(f, DEFAULT_CONFIG)

        except OSError as e:
            raise ConfigError(
                ErrorCode.E702_CONFIG_SAVE_FAILED,
                f"Failed to create example configuration: {e}",
                {"path": str(path), "error": str(e)},
            )
