"""Configuration loading, saving, and defaults for the widgets."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

from swaydgets.core.edge import Edge
from swaydgets.log import get_logger

log = get_logger(name="config")

DEFAULT_CONFIG_DIR = (
    Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")) / "swaydgets"
)
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.json"

DEFAULT_EDGE = "bottom"
DEFAULT_HIDE_TIMEOUT_MS = 300


def _known_keys(cls: type, data: dict[str, Any]) -> dict[str, Any]:
    """Drop keys that are not fields of the dataclass `cls`."""
    valid_fields = {f.name for f in fields(cls)}
    return {k: v for k, v in data.items() if k in valid_fields}


@dataclass(frozen=True)
class DockConfig:
    """Dock settings; immutable once loaded."""

    # The dock is opt-in
    enabled: bool = False
    # Screen edge the dock and its detector strip attach to
    edge: str = DEFAULT_EDGE
    # Delay in ms between the pointer leaving the dock and the dock hiding
    hide_timeout: int = DEFAULT_HIDE_TIMEOUT_MS

    @property
    def edge_enum(self) -> Edge:
        """Edge as enum."""
        return Edge(self.edge)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DockConfig:
        values = _known_keys(cls, data)
        edge = values.get("edge", DEFAULT_EDGE)
        if isinstance(edge, str):
            # Accept "Left" as well as "left"
            values["edge"] = edge = edge.lower()
        try:
            Edge(edge)
        except ValueError:
            log.warning("Unknown dock edge %r, using %s", values["edge"], DEFAULT_EDGE)
            values["edge"] = DEFAULT_EDGE
        timeout = values.get("hide_timeout", DEFAULT_HIDE_TIMEOUT_MS)
        if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout < 0:
            log.warning(
                "Invalid hide_timeout %r, using %d", timeout, DEFAULT_HIDE_TIMEOUT_MS
            )
            values["hide_timeout"] = DEFAULT_HIDE_TIMEOUT_MS
        return cls(**values)


@dataclass(frozen=True)
class CalendarConfig:
    """Calendar panel settings; immutable once loaded."""

    enabled: bool = True
    # Margins from the top-left corner of the output
    x: int = 25
    y: int = 25
    width: int = 300
    height: int = 250

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CalendarConfig:
        return cls(**_known_keys(cls, data))


@dataclass
class Config:
    """Top-level configuration with sensible defaults."""

    dock: DockConfig = field(default_factory=DockConfig)
    calendar: CalendarConfig = field(default_factory=CalendarConfig)

    def __post_init__(self) -> None:
        self._path: Path = DEFAULT_CONFIG_FILE

    @classmethod
    def load(cls, path: Path | str | None = None) -> Config:
        """Load config from JSON file, falling back to defaults for missing keys.

        A missing file is created with defaults. An unreadable or malformed
        file is left untouched and defaults are used.
        """
        path = Path(path) if path else DEFAULT_CONFIG_FILE
        if not path.exists():
            config = cls()
            config._path = path
            try:
                config.save(path)
            except OSError as exc:
                log.error("Failed to write default config to %s: %s", path, exc)
            return config

        try:
            with open(path) as f:
                data: dict[str, Any] = json.load(f)
        except (OSError, ValueError) as exc:
            log.error("Failed to read config file %s: %s", path, exc)
            config = cls()
            config._path = path
            return config

        if not isinstance(data, dict):
            log.error("Config file %s does not hold a JSON object", path)
            data = {}

        config = cls(
            dock=DockConfig.from_dict(_section(data, "dock")),
            calendar=CalendarConfig.from_dict(_section(data, "calendar")),
        )
        config._path = path
        log.info("Configuration loaded from %s", path)
        return config

    def save(self, path: Path | str | None = None) -> None:
        """Save config to JSON file."""
        path = Path(path) if path else self._path
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(asdict(self), f, indent=2)
            f.write("\n")
        log.info("Configuration saved to %s", path)


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key, {})
    return value if isinstance(value, dict) else {}
