"""
Tests for configuration settings.

Modified: 2026-10-19
"""

import logging

import pytest
import yaml
from pathlib import Path

from twig.config.settings import (
    Settings,
    EditorSettings,
    KeySettings,
    LoggingSettings,
    configure_logging,
    get_config_dir,
)
from twig.core.exceptions import ConfigurationError


@pytest.fixture
def restore_logging():
    """Put the root logger back the way pytest set it up."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


def write_config(path: Path, data) -> Path:
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


class TestSettings:
    """Test Settings class."""

    def test_default_settings(self):
        """Test default settings initialization."""
        settings = Settings()

        assert settings.editor.placeholder_name == "new node"
        assert settings.editor.indent_width == 2
        assert settings.keys.bindings == {}
        assert settings.logging.level == "WARNING"

    def test_load_from_file(self, tmp_path):
        """Test loading settings from YAML file."""
        config_file = write_config(tmp_path / "config.yaml", {
            "editor": {
                "placeholder_name": "untitled",
                "indent_width": 4,
            },
            "keys": {
                "bindings": {"add_child": "a"},
            },
            "logging": {
                "level": "DEBUG",
            },
        })

        settings = Settings.load(config_file)

        assert settings.editor.placeholder_name == "untitled"
        assert settings.editor.indent_width == 4
        assert settings.editor.folder_marker == "▸"
        assert settings.keys.bindings == {"add_child": "a"}
        assert settings.logging.level == "DEBUG"
        assert settings.logging.file == "~/.cache/twig/twig.log"

    def test_load_with_missing_file(self):
        """Test loading with non-existent config file."""
        # Should return defaults
        settings = Settings.load(Path("/nonexistent/config.yaml"))

        assert settings.editor.placeholder_name == "new node"
        assert settings.keys.bindings == {}

    def test_load_default_location(self, monkeypatch, tmp_path):
        """Without a path the file under the home directory is read."""
        monkeypatch.setenv("HOME", str(tmp_path))
        config_dir = tmp_path / ".config" / "twig"
        config_dir.mkdir(parents=True)
        write_config(config_dir / "config.yaml", {"editor": {"leaf_marker": "-"}})

        settings = Settings.load()

        assert settings.editor.leaf_marker == "-"

    def test_empty_file_gives_defaults(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        assert Settings.load(config_file).editor.indent_width == 2

    def test_empty_section_gives_defaults(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("editor:\nkeys:\n")

        settings = Settings.load(config_file)

        assert settings.editor.placeholder_name == "new node"
        assert settings.keys.bindings == {}

    def test_environment_variable_override(self, monkeypatch, tmp_path):
        """Test that environment variables override config file."""
        config_file = write_config(tmp_path / "config.yaml", {
            "logging": {"level": "INFO"},
            "editor": {"placeholder_name": "from file"},
        })

        monkeypatch.setenv("TWIG_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("TWIG_LOG_FILE", "/tmp/other.log")
        monkeypatch.setenv("TWIG_PLACEHOLDER_NAME", "from env")

        settings = Settings.load(config_file)

        # Env var should override file
        assert settings.logging.level == "DEBUG"
        assert settings.logging.file == "/tmp/other.log"
        assert settings.editor.placeholder_name == "from env"

    def test_invalid_yaml(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("editor: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            Settings.load(config_file)

    def test_top_level_must_be_mapping(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- just\n- a list\n")

        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            Settings.load(config_file)

    def test_section_must_be_mapping(self, tmp_path):
        config_file = write_config(tmp_path / "config.yaml", {"editor": "wide"})

        with pytest.raises(ConfigurationError, match="'editor' must be a mapping"):
            Settings.load(config_file)

    def test_bindings_must_be_mapping(self, tmp_path):
        config_file = write_config(tmp_path / "config.yaml", {"keys": {"bindings": ["a"]}})

        with pytest.raises(ConfigurationError, match="keys.bindings"):
            Settings.load(config_file)

    def test_indent_width_must_be_a_number(self, tmp_path):
        config_file = write_config(tmp_path / "config.yaml", {"editor": {"indent_width": "wide"}})

        with pytest.raises(ConfigurationError, match="indent_width"):
            Settings.load(config_file)

    def test_bindings_as_key_lists(self, tmp_path):
        """A binding may list its keys instead of spacing them."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("keys:\n  bindings:\n    go_first: [g, g]\n    move_down: down\n")

        settings = Settings.load(config_file)

        assert settings.keys.bindings == {"go_first": "g g", "move_down": "down"}

    def test_to_dict(self):
        """Test converting settings to dictionary."""
        settings = Settings()
        settings.keys.bindings["quit"] = "Q"
        settings_dict = settings.to_dict()

        assert set(settings_dict) == {"editor", "keys", "logging"}
        assert settings_dict["editor"]["indent_width"] == 2
        assert settings_dict["keys"]["bindings"] == {"quit": "Q"}
        assert settings_dict["logging"]["level"] == "WARNING"

    def test_to_dict_reloads(self, tmp_path):
        """A dumped config loads back to the same settings."""
        settings = Settings()
        settings.editor.indent_width = 3
        settings.keys.bindings["go_last"] = "g e"
        config_file = write_config(tmp_path / "config.yaml", settings.to_dict())

        assert Settings.load(config_file) == settings

    def test_get_config_dir(self, monkeypatch, tmp_path):
        """Test getting config directory."""
        monkeypatch.setenv("HOME", str(tmp_path))

        config_dir = get_config_dir()

        assert config_dir.exists()
        assert config_dir.is_dir()
        assert config_dir == tmp_path / ".config" / "twig"


class TestIndividualSettings:
    """Test individual settings dataclasses."""

    def test_editor_settings(self):
        settings = EditorSettings(placeholder_name="item", folder_marker="+")

        assert settings.placeholder_name == "item"
        assert settings.folder_marker == "+"
        assert settings.leaf_marker == "•"

    def test_key_settings_not_shared(self):
        """Each instance gets its own bindings dict."""
        first = KeySettings()
        first.bindings["quit"] = "Q"

        assert KeySettings().bindings == {}


class TestConfigureLogging:
    """Test configure_logging()."""

    def test_writes_to_file(self, tmp_path, restore_logging):
        log_file = tmp_path / "logs" / "twig.log"

        path = configure_logging(LoggingSettings(level="debug", file=str(log_file)))
        logging.getLogger("twig.test").debug("hello from the test")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert path == log_file
        assert logging.getLogger().level == logging.DEBUG
        assert "hello from the test" in log_file.read_text()

    def test_unknown_level(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Unknown log level"):
            configure_logging(LoggingSettings(level="LOUD", file=str(tmp_path / "x.log")))
