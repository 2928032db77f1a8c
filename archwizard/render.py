"""Turn declarative views into rich renderables."""

from rich.align import Align
from rich.console import Group
from rich.layout import Layout
from rich.panel import Panel
from rich.text import Text
from rich import box

from .theme import Palette
from .ui import banner_art
from .view import View


def _base_style(palette: Palette) -> str:
    return f"{palette.foreground} on {palette.background}"


def _body(view: View) -> Text | Group:
    palette = view.palette
    if view.text_line is not None:
        return Text(view.text_line, style=f"bold {palette.highlight}")

    if view.empty_message is not None:
        return Text(view.empty_message, style=f"italic {palette.muted}")

    rows = []
    for row in view.options or ():
        marker = "> " if row.selected else "  "
        rows.append(Text.assemble((marker, f"bold {palette.accent}"), (row.label, row.style)))
    return Group(*rows)


def _footer(view: View) -> Text:
    palette = view.palette
    text = Text(view.footer.help_text, style=palette.muted)
    if view.footer.filter_text is not None:
        text.append(view.footer.filter_text, style=f"bold {palette.highlight}")
    return text


def render(view: View) -> Panel:
    """Build the full-screen layout for one frame."""
    palette = view.palette
    base = _base_style(palette)

    question = Panel(
        Group(Text(view.prompt, style=f"bold {palette.accent}"), Text(""), _body(view)),
        title=view.prompt,
        subtitle=view.progress,
        subtitle_align="right",
        box=box.ROUNDED,
        border_style=palette.accent,
        style=base,
        padding=(1, 2),
    )
    footer = Panel(_footer(view), box=box.ROUNDED, border_style=palette.muted, style=base)

    layout = Layout()
    layout.split_column(
        Layout(question, name="question", ratio=1),
        Layout(footer, name="footer", size=3),
    )
    return Panel(layout, title=view.title, box=box.DOUBLE_EDGE, border_style=palette.accent, style=base)


def splash() -> Panel:
    """Centered logo shown before the first question."""
    return Panel(
        Align.center(banner_art(), vertical="middle"),
        box=box.DOUBLE_EDGE,
        border_style="green",
    )
