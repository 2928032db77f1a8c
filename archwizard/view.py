"""Pure projection from session state to a declarative screen description.

Nothing here draws or mutates; render.py turns a View into rich
renderables.
"""

from dataclasses import dataclass

from .i18n import t
from .questions import CATALOG, FreeText, MultipleChoice, visible_options
from .session import SessionState
from .theme import Palette, palette_for


@dataclass(frozen=True)
class OptionRow:
    label: str
    selected: bool
    style: str


@dataclass(frozen=True)
class Footer:
    help_text: str
    filter_text: str | None = None


@dataclass(frozen=True)
class View:
    """Everything needed to draw one frame.

    Exactly one of ``text_line`` and ``options`` is set.
    """
    title: str
    progress: str
    prompt: str
    palette: Palette
    footer: Footer
    text_line: str | None = None
    options: tuple[OptionRow, ...] | None = None
    empty_message: str | None = None


def highlight_style(palette: Palette) -> str:
    return f"bold {palette.highlight}"


def normal_style(palette: Palette) -> str:
    return palette.foreground


def project(state: SessionState, catalog=CATALOG) -> View | None:
    """Describe the frame for the active question, or None when finished."""
    question = state.current_question(catalog)
    if question is None:
        return None

    palette = palette_for(state.theme)
    kind = question.kind
    common = dict(
        title=t("screen.title"),
        progress=t("screen.progress", current=state.current_index + 1, total=len(catalog)),
        prompt=question.prompt,
        palette=palette,
    )

    if isinstance(kind, FreeText):
        return View(
            text_line=f"{question.prompt}: {state.free_text_buffer}",
            footer=Footer(t("screen.help_text")),
            **common,
        )

    rows = tuple(
        OptionRow(
            label=label,
            selected=i == state.selected_option,
            style=highlight_style(palette) if i == state.selected_option else normal_style(palette),
        )
        for i, label in enumerate(visible_options(question, state.filter_buffer))
    )

    if isinstance(kind, MultipleChoice):
        return View(
            options=rows,
            empty_message=t("screen.no_matches") if not rows else None,
            footer=Footer(t("screen.help_filter"), filter_text=state.filter_buffer),
            **common,
        )

    return View(options=rows, footer=Footer(t("screen.help_select")), **common)
