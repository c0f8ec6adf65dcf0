#!/usr/bin/env python3
"""TUI themes and styling."""

from typing import Dict

from prompt_toolkit.styles import Style


THEMES: Dict[str, Dict[str, str]] = {
    "dark-olive": {
        "": "#d7dfe6",  # no forced background
        "status.ok": "#9ad974 bold",
        "status.warn": "#e5c07b bold",
        "status.pending": "#7a7f85",
        "text": "#d7dfe6",
        "text.dim": "#97a0a9",
        "selected": "bg:#3b3b3b #d7dfe6 bold",
        "title": "#ffb347 bold",
        "header": "#ffb347 bold",
        "group": "#61afef bold",
        "bar.empty": "#6d717a",
        "help": "#6d717a",
        "border": "#4b525a",
    },
    "dark-contrast": {
        "": "#e8eaec",
        "status.ok": "#b8f171 bold",
        "status.warn": "#f0c674 bold",
        "status.pending": "#8a9097",
        "text": "#e8eaec",
        "text.dim": "#a7b0ba",
        "selected": "bg:#3d4047 #e8eaec bold",
        "title": "#ffb347 bold",
        "header": "#ffb347 bold",
        "group": "#7cc4ff bold",
        "bar.empty": "#6f757d",
        "help": "#6f757d",
        "border": "#5a6169",
    },
}

DEFAULT_THEME = "dark-olive"


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Get theme palette, falling back to default if theme not found."""
    base = THEMES.get(theme)
    if not base:
        base = THEMES[DEFAULT_THEME]
    return dict(base)


def build_style(theme: str) -> Style:
    """Build Style object from theme name."""
    palette = get_theme_palette(theme)
    return Style.from_dict(palette)


__all__ = ["THEMES", "DEFAULT_THEME", "get_theme_palette", "build_style"]
