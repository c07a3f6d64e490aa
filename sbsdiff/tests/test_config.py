# sbsdiff/tests/test_config.py
"""Tests for display settings loading and saving."""

import json
import os

import pytest

from ..config import (
    ENV_KEYS,
    DisplaySettings,
    load_display_settings,
    parse_bool,
    parse_int,
    save_display_settings,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep SBSDIFF_* variables from leaking in or out of a test."""
    for name in ENV_KEYS:
        monkeypatch.delenv(name, raising=False)
    yield
    # load_dotenv writes straight to os.environ
    for name in ENV_KEYS:
        os.environ.pop(name, None)


@pytest.fixture
def config_file(tmp_path):
    def write(data):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return write


class TestParsers:
    """Tests for value parsing."""

    @pytest.mark.parametrize("value", ["true", "Yes", "1", "ON", True])
    def test_true_values(self, value):
        assert parse_bool(value) is True

    @pytest.mark.parametrize("value", ["false", "No", "0", "off", False])
    def test_false_values(self, value):
        assert parse_bool(value) is False

    def test_unknown_bool(self):
        assert parse_bool("maybe") is None

    def test_int_values(self):
        assert parse_int("42") == 42
        assert parse_int(7) == 7
        assert parse_int(" 10 ") == 10

    def test_invalid_int(self):
        assert parse_int("wide") is None
        assert parse_int(True) is None


class TestLoadDisplaySettings:
    """Tests for layered settings resolution."""

    def test_defaults_when_file_missing(self, tmp_path):
        settings = load_display_settings(tmp_path / "missing.json")
        assert settings == DisplaySettings()

    def test_defaults(self):
        settings = DisplaySettings()
        assert settings.use_colors is True
        assert settings.side_by_side is True
        assert settings.show_line_numbers is True
        assert settings.syntax_highlighting is True
        assert settings.context_lines == 3
        assert settings.terminal_width == 120

    def test_file_values(self, config_file):
        path = config_file({"display": {
            "use_colors": False,
            "side_by_side_diff": False,
            "diff_context_lines": 5,
            "terminal_width": 100,
            "show_line_numbers": "no",
            "syntax_highlighting": "false",
        }})
        settings = load_display_settings(path)

        assert settings == DisplaySettings(
            use_colors=False,
            side_by_side=False,
            show_line_numbers=False,
            syntax_highlighting=False,
            context_lines=5,
            terminal_width=100,
        )

    def test_unknown_keys_ignored(self, config_file):
        path = config_file({"display": {"theme": "dark"}, "other": 1})
        assert load_display_settings(path) == DisplaySettings()

    def test_invalid_value_keeps_default(self, config_file, caplog):
        path = config_file({"display": {"terminal_width": "wide"}})
        settings = load_display_settings(path)

        assert settings.terminal_width == 120
        assert "terminal_width" in caplog.text

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        assert load_display_settings(path) == DisplaySettings()

    def test_display_not_an_object(self, config_file):
        path = config_file({"display": [1, 2]})
        assert load_display_settings(path) == DisplaySettings()

    def test_environment_overrides_file(self, config_file, monkeypatch):
        path = config_file({"display": {"terminal_width": 100, "use_colors": True}})
        monkeypatch.setenv("SBSDIFF_TERMINAL_WIDTH", "90")
        monkeypatch.setenv("SBSDIFF_USE_COLORS", "off")

        settings = load_display_settings(path)
        assert settings.terminal_width == 90
        assert settings.use_colors is False

    def test_invalid_environment_value_ignored(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SBSDIFF_CONTEXT_LINES", "lots")
        settings = load_display_settings(tmp_path / "missing.json")
        assert settings.context_lines == 3

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("SBSDIFF_SIDE_BY_SIDE=false\nSBSDIFF_TERMINAL_WIDTH=70\n")

        settings = load_display_settings(tmp_path / "missing.json", env_file)
        assert settings.side_by_side is False
        assert settings.terminal_width == 70

    def test_env_file_does_not_override_environment(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("SBSDIFF_TERMINAL_WIDTH=70\n")
        monkeypatch.setenv("SBSDIFF_TERMINAL_WIDTH", "150")

        settings = load_display_settings(tmp_path / "missing.json", env_file)
        assert settings.terminal_width == 150


class TestSaveDisplaySettings:
    """Tests for writing the settings file."""

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "nested" / "config.json"
        settings = DisplaySettings(use_colors=False, terminal_width=88)

        assert save_display_settings(settings, path) is True
        assert load_display_settings(path) == settings

    def test_file_keys_written(self, tmp_path):
        path = tmp_path / "config.json"
        save_display_settings(DisplaySettings(side_by_side=False), path)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["display"]["side_by_side_diff"] is False
        assert data["display"]["diff_context_lines"] == 3

    def test_preserves_other_keys(self, config_file):
        path = config_file({"version": 2, "display": {"use_colors": True}})
        save_display_settings(DisplaySettings(use_colors=False), path)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["version"] == 2
        assert data["display"]["use_colors"] is False
