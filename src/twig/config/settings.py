"""
Configuration management for Twig.

Hierarchical settings loading: defaults → config file → environment variables

Modified: 2026-10-19
"""

import logging
import os
import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, Optional

from twig.core.exceptions import ConfigurationError


@dataclass
class EditorSettings:
    """Outline editor settings."""

    placeholder_name: str = "new node"
    indent_width: int = 2
    folder_marker: str = "▸"
    leaf_marker: str = "•"


@dataclass
class KeySettings:
    """Key binding overrides, command name -> key sequence (e.g. go_last: "g e")."""

    bindings: Dict[str, str] = field(default_factory=dict)


@dataclass
class LoggingSettings:
    """Logging settings. The terminal belongs to the TUI, so logs go to a file."""

    level: str = "WARNING"
    file: str = "~/.cache/twig/twig.log"


@dataclass
class Settings:
    """Main settings container."""

    editor: EditorSettings = field(default_factory=EditorSettings)
    keys: KeySettings = field(default_factory=KeySettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """
        Load settings from file and environment variables.

        Priority:
        1. Default values (defined in dataclasses)
        2. Config file (~/.config/twig/config.yaml)
        3. Environment variables (override everything)

        Args:
            config_path: Optional path to config file

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If the config file is malformed
        """
        settings = cls()

        if config_path is None:
            config_path = Path.home() / ".config" / "twig" / "config.yaml"

        if config_path.exists():
            try:
                with open(config_path) as f:
                    config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

            if not isinstance(config_data, dict):
                raise ConfigurationError(f"{config_path} must contain a mapping")

            # Editor settings
            if "editor" in config_data:
                editor = _section(config_data, "editor")
                try:
                    indent_width = int(editor.get("indent_width", 2))
                except (TypeError, ValueError):
                    raise ConfigurationError(
                        f"editor.indent_width must be a whole number, got {editor['indent_width']!r}"
                    ) from None
                settings.editor = EditorSettings(
                    placeholder_name=editor.get("placeholder_name", "new node"),
                    indent_width=indent_width,
                    folder_marker=editor.get("folder_marker", "▸"),
                    leaf_marker=editor.get("leaf_marker", "•"),
                )

            # Key bindings
            if "keys" in config_data:
                keys = _section(config_data, "keys")
                bindings = keys.get("bindings") or {}
                if not isinstance(bindings, dict):
                    raise ConfigurationError("keys.bindings must be a mapping")
                settings.keys = KeySettings(
                    bindings={str(name): _key_sequence(seq) for name, seq in bindings.items()}
                )

            # Logging settings
            if "logging" in config_data:
                log = _section(config_data, "logging")
                settings.logging = LoggingSettings(
                    level=log.get("level", "WARNING"),
                    file=log.get("file", "~/.cache/twig/twig.log"),
                )

        # Override with environment variables
        log_level_env = os.getenv("TWIG_LOG_LEVEL")
        if log_level_env:
            settings.logging.level = log_level_env

        log_file_env = os.getenv("TWIG_LOG_FILE")
        if log_file_env:
            settings.logging.file = log_file_env

        placeholder_env = os.getenv("TWIG_PLACEHOLDER_NAME")
        if placeholder_env:
            settings.editor.placeholder_name = placeholder_env

        return settings

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            "editor": {
                "placeholder_name": self.editor.placeholder_name,
                "indent_width": self.editor.indent_width,
                "folder_marker": self.editor.folder_marker,
                "leaf_marker": self.editor.leaf_marker,
            },
            "keys": {"bindings": dict(self.keys.bindings)},
            "logging": {
                "level": self.logging.level,
                "file": self.logging.file,
            },
        }


def _key_sequence(value: Any) -> str:
    """Keys may be written as "g g" or as a list such as [g, g]."""
    if isinstance(value, list):
        return " ".join(str(key) for key in value)
    return str(value)


def _section(config_data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config_data[name] or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"Config section '{name}' must be a mapping")
    return section


def configure_logging(settings: LoggingSettings) -> Path:
    """
    Send log records to the configured file.

    Args:
        settings: LoggingSettings to apply

    Returns:
        Resolved log file path

    Raises:
        ConfigurationError: If the level name is not a logging level
    """
    level = logging.getLevelName(settings.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {settings.level}")

    log_path = Path(settings.file).expanduser()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=log_path,
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )
    return log_path


def get_config_dir() -> Path:
    """Get configuration directory, creating if needed."""
    config_dir = Path.home() / ".config" / "twig"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir

