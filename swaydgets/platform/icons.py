"""Launcher icon lookup from a window's application identifier."""

from __future__ import annotations

FALLBACK_ICON = "application-x-executable"

# (substring of the lowercased app identifier, icon name); first match wins
ICON_TABLE: tuple[tuple[str, str], ...] = (
    ("firefox", "firefox"),
    ("chrome", "google-chrome"),
    ("terminal", "terminal"),
    ("code", "visual-studio-code"),
)


def resolve_icon(app_id: str) -> str:
    """Return the themed icon name for an app identifier.

    Case-insensitive substring match against ICON_TABLE; anything
    unmatched gets the generic executable icon.
    """
    app_lower = app_id.lower()
    for needle, icon_name in ICON_TABLE:
        if needle in app_lower:
            return icon_name
    return FALLBACK_ICON
