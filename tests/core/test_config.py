"""Tests for config loading, saving, and defaults."""

import json

import pytest

from swaydgets.core.config import CalendarConfig, Config, DockConfig
from swaydgets.core.edge import Edge


class TestConfigDefaults:
    def test_defaults(self):
        # Given / When
        c = Config()
        # Then
        assert c.dock.enabled is False
        assert c.dock.edge == "bottom"
        assert c.dock.hide_timeout == 300
        assert c.calendar.enabled is True
        assert (c.calendar.x, c.calendar.y) == (25, 25)
        assert (c.calendar.width, c.calendar.height) == (300, 250)

    def test_edge_enum(self):
        assert DockConfig(edge="left").edge_enum is Edge.LEFT

    def test_dock_config_is_immutable(self):
        # Given
        dock = DockConfig()
        # When / Then
        with pytest.raises(AttributeError):
            dock.hide_timeout = 10


class TestConfigLoad:
    def test_load_missing_file_creates_default(self, tmp_path):
        # Given
        path = tmp_path / "config.json"
        # When
        config = Config.load(path)
        # Then
        assert config.dock == DockConfig()
        assert path.exists()
        data = json.loads(path.read_text())
        assert data["dock"]["edge"] == "bottom"

    def test_load_valid_file(self, tmp_path):
        # Given
        path = tmp_path / "config.json"
        data = {
            "dock": {"enabled": True, "edge": "left", "hide_timeout": 500},
            "calendar": {"enabled": False},
        }
        path.write_text(json.dumps(data))
        # When
        config = Config.load(path)
        # Then
        assert config.dock == DockConfig(enabled=True, edge="left", hide_timeout=500)
        assert config.calendar.enabled is False
        # Unspecified keys use defaults
        assert config.calendar.width == 300

    def test_load_ignores_unknown_keys(self, tmp_path):
        # Given
        path = tmp_path / "config.json"
        data = {"dock": {"edge": "top", "unknown_key": 1}, "scripts": []}
        path.write_text(json.dumps(data))
        # When
        config = Config.load(path)
        # Then
        assert config.dock.edge == "top"
        assert not hasattr(config.dock, "unknown_key")

    def test_load_empty_json_uses_defaults(self, tmp_path):
        # Given
        path = tmp_path / "config.json"
        path.write_text("{}")
        # When
        config = Config.load(path)
        # Then
        assert config.dock == DockConfig()
        assert config.calendar == CalendarConfig()

    def test_invalid_edge_falls_back_to_bottom(self, tmp_path):
        # Given
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"dock": {"edge": "diagonal"}}))
        # When
        config = Config.load(path)
        # Then
        assert config.dock.edge == "bottom"

    @pytest.mark.parametrize("raw, edge", [("Left", "left"), ("TOP", "top")])
    def test_capitalised_edge_is_accepted(self, tmp_path, raw, edge):
        # Given -- edges as written by older configs
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"dock": {"edge": raw}}))
        # When
        config = Config.load(path)
        # Then
        assert config.dock.edge == edge
        assert config.dock.edge_enum is Edge(edge)

    @pytest.mark.parametrize("timeout", [-1, "300", 1.5, True])
    def test_invalid_hide_timeout_falls_back(self, tmp_path, timeout):
        # Given
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"dock": {"hide_timeout": timeout}}))
        # When
        config = Config.load(path)
        # Then
        assert config.dock.hide_timeout == 300

    def test_malformed_json_uses_defaults_without_overwriting(self, tmp_path):
        # Given
        path = tmp_path / "config.json"
        path.write_text("{not json")
        # When
        config = Config.load(path)
        # Then
        assert config.dock == DockConfig()
        assert path.read_text() == "{not json"

    def test_non_object_sections_are_ignored(self, tmp_path):
        # Given
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"dock": "yes", "calendar": [1, 2]}))
        # When
        config = Config.load(path)
        # Then
        assert config.dock == DockConfig()
        assert config.calendar == CalendarConfig()


class TestConfigSave:
    def test_save_creates_parent_dirs(self, tmp_path):
        # Given
        path = tmp_path / "sub" / "dir" / "config.json"
        config = Config(dock=DockConfig(enabled=True))
        # When
        config.save(path)
        # Then
        data = json.loads(path.read_text())
        assert data["dock"]["enabled"] is True

    def test_save_then_load_keeps_values(self, tmp_path):
        # Given
        path = tmp_path / "config.json"
        original = Config(
            dock=DockConfig(enabled=True, edge="right", hide_timeout=150),
            calendar=CalendarConfig(x=40, y=60),
        )
        # When
        original.save(path)
        loaded = Config.load(path)
        # Then
        assert loaded.dock == original.dock
        assert loaded.calendar == original.calendar
