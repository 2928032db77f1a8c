"""UI primitives: banner art, status messages, configuration summary."""

from rich.markup import escape
from rich.table import Table
from rich.text import Text
from rich import box

from .theme import console, ACCENT, OK, ERR, MUTED, BRAND
from .record import ArchConfig, FIELD_NAMES
from .questions import find_question
from .i18n import t


# ── Banner ───────────────────────────────────────────────────

LOGO = [
    r"    _____                .__      .____    .__                     ",
    r"   /  _  \   _______  __ |  |__   |    |   |__| ____  __ _____  ___",
    r"  /  /_\  \ /___/  / |  ||  |  \  |    |   |  |/    \|  |  \  \/  /",
    r" /    |    <  /\  /_/  ||   Y  \ |    |___|  |   |  \  |  />    < ",
    r"/\____|__  /\___  /|____|___|  / |_______ \__|___|  /____//__/\_ \ ",
    r"        \/     \/           \/          \/       \/            \/ ",
]


def banner_art() -> Text:
    """The splash logo with subtitle, ready to be centered."""
    art = Text()
    for line in LOGO:
        art.append(line + "\n", style=BRAND)
    art.append("\n")
    art.append(t("banner.subtitle"), style="bright_white")
    art.append("\n")
    art.append(t("banner.hint"), style=MUTED)
    return art


# ── Status messages ──────────────────────────────────────────

def step(text: str):
    console.print(f"  [bold {ACCENT}]⟐[/]  {escape(text)}")


def ok(text: str):
    console.print(f"  [bold {OK}]✔[/]  [green]{escape(text)}[/green]")


def fail(text: str):
    console.print(f"  [bold {ERR}]✘[/]  [red]{escape(text)}[/red]")


def info(text: str):
    console.print(f"  [{MUTED}]   ↳ {escape(text)}[/]")


# ── Summary ──────────────────────────────────────────────────

def _display_value(key: str, value) -> Text:
    """Table cell for one answer; typed text is shown literally."""
    if value is None:
        return Text("-")
    if key == "password":
        return Text("•" * 8)
    if isinstance(value, bool):
        return Text(t("summary.yes") if value else t("summary.no"))
    if not value:
        return Text("''", style="dim")
    return Text(value)


def summary_table(cfg: ArchConfig) -> Table:
    """Two-column table of every field, password masked."""
    table = Table(
        title=t("setup.summary_title"),
        box=box.ROUNDED,
        border_style=ACCENT,
    )
    table.add_column(t("summary.field"), style="bold")
    table.add_column(t("summary.value"))
    for key in FIELD_NAMES:
        table.add_row(find_question(key).prompt, _display_value(key, getattr(cfg, key)))
    return table


def print_summary(cfg: ArchConfig):
    console.print()
    console.print(summary_table(cfg))
    console.print()
