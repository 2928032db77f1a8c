"""Navigation state machine for the question sequence.

All transient UI state lives in one SessionState value. apply_event() is
the only thing that changes it; the projection in view.py only reads it.
"""

from dataclasses import dataclass

from loguru import logger

from .events import Char, Event, Key
from .questions import CATALOG, Boolean, FreeText, MultipleChoice, QuestionSpec, visible_options
from .record import ArchConfig
from .theme import Theme, next_theme


@dataclass
class SessionState:
    current_index: int = 0
    selected_option: int = 0
    free_text_buffer: str = ""
    filter_buffer: str = ""
    theme: Theme = Theme.DEFAULT
    quit_requested: bool = False

    def is_done(self, catalog=CATALOG) -> bool:
        """True once every question has been confirmed."""
        return self.current_index >= len(catalog)

    def is_finished(self, catalog=CATALOG) -> bool:
        return self.quit_requested or self.is_done(catalog)

    def current_question(self, catalog=CATALOG) -> QuestionSpec | None:
        if self.is_finished(catalog):
            return None
        return catalog[self.current_index]


def resolve_answer(question: QuestionSpec, state: SessionState) -> str | bool | None:
    """Compute the value Confirm would commit, or None if there is none.

    None only happens for a MultipleChoice question whose filter matches
    no option.
    """
    kind = question.kind
    if isinstance(kind, FreeText):
        return state.free_text_buffer
    if isinstance(kind, Boolean):
        return state.selected_option == 0
    if isinstance(kind, MultipleChoice):
        options = visible_options(question, state.filter_buffer)
        if not options:
            return None
        return options[min(state.selected_option, len(options) - 1)]
    raise TypeError(f"unknown question kind: {kind!r}")


def _reset_input(state: SessionState) -> None:
    state.selected_option = 0
    state.free_text_buffer = ""
    state.filter_buffer = ""


def _confirm(state: SessionState, record: ArchConfig, question: QuestionSpec, catalog) -> None:
    value = resolve_answer(question, state)
    if value is None:
        logger.debug("confirm ignored: no option matches filter {!r}", state.filter_buffer)
        return
    record.answer(question.key, value)
    state.current_index += 1
    _reset_input(state)
    logger.info("answered {} ({}/{})", question.key, state.current_index, len(catalog))


def apply_event(state: SessionState, event: Event, record: ArchConfig, catalog=CATALOG) -> None:
    """Apply one input event to *state*, committing into *record* on Confirm.

    Events arriving after the session finished are ignored, as are events
    that make no sense for the current question kind.
    """
    question = state.current_question(catalog)
    if question is None:
        return

    if event is Key.QUIT:
        state.quit_requested = True
        logger.info("quit requested at question {}", state.current_index + 1)
        return

    if event is Key.THEME_CYCLE:
        state.theme = next_theme(state.theme)
        logger.debug("theme -> {}", state.theme.value)
        return

    if event is Key.CONFIRM:
        _confirm(state, record, question, catalog)
        return

    kind = question.kind

    if event is Key.MOVE_UP or event is Key.MOVE_DOWN:
        count = len(visible_options(question, state.filter_buffer))
        if count == 0:
            return
        if event is Key.MOVE_UP and state.selected_option > 0:
            state.selected_option -= 1
        elif event is Key.MOVE_DOWN and state.selected_option < count - 1:
            state.selected_option += 1
        return

    if isinstance(event, Char):
        if isinstance(kind, FreeText):
            state.free_text_buffer += event.value
        elif isinstance(kind, MultipleChoice):
            state.filter_buffer += event.value
            state.selected_option = 0
        return

    if event is Key.BACKSPACE:
        if isinstance(kind, FreeText):
            state.free_text_buffer = state.free_text_buffer[:-1]
        elif isinstance(kind, MultipleChoice):
            state.filter_buffer = state.filter_buffer[:-1]
            state.selected_option = 0
        return
