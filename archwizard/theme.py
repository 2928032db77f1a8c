"""Shared console instance, color palettes, and questionary style."""

from enum import Enum
from typing import NamedTuple

from questionary import Style as QStyle
from rich.console import Console

# ── Console (single instance used everywhere) ────────────────
console = Console()

# ── Rich color tokens (plain console output) ─────────────────
ACCENT  = "green"
OK      = "green"
WARN    = "yellow"
ERR     = "red"
MUTED   = "dim white"
BRAND   = "bold bright_cyan"


# ── Wizard palettes ──────────────────────────────────────────

class Theme(Enum):
    DEFAULT = "default"
    DARK = "dark"
    LIGHT = "light"


class Palette(NamedTuple):
    """Color roles used by the wizard screen.

    Every value is a rich color name or hex string.
    """
    background: str
    foreground: str
    highlight: str
    accent: str
    muted: str


PALETTES: dict[Theme, Palette] = {
    Theme.DEFAULT: Palette("default", "white", "yellow", "green", "bright_black"),
    Theme.DARK:    Palette("#1e1e2e", "#cdd6f4", "#f9e2af", "#89b4fa", "#6c7086"),
    Theme.LIGHT:   Palette("#fafafa", "#1f2328", "#b35900", "#1f6feb", "#6e7781"),
}

_CYCLE = [Theme.DEFAULT, Theme.DARK, Theme.LIGHT]


def next_theme(theme: Theme) -> Theme:
    """Return the theme after *theme* in the fixed cycle."""
    return _CYCLE[(_CYCLE.index(theme) + 1) % len(_CYCLE)]


def palette_for(theme: Theme) -> Palette:
    return PALETTES[theme]


# ── Questionary prompt style ─────────────────────────────────
Q_STYLE = QStyle([
    ("qmark",       "fg:ansigreen bold"),
    ("question",    "fg:ansiwhite bold"),
    ("answer",      "fg:ansigreen bold"),
    ("pointer",     "fg:ansigreen bold"),
    ("highlighted", "fg:ansigreen bold"),
    ("instruction", "fg:ansibrightblack"),
    ("text",        "fg:ansiwhite"),
])
