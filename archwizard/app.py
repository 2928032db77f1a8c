"""Session driver: splash, event loop, and saving the result."""

import time
from pathlib import Path

from loguru import logger

from .persistence import save_config
from .questions import CATALOG
from .record import ArchConfig
from .render import render, splash
from .session import SessionState, apply_event
from .terminal import TerminalScreen
from .theme import Theme
from .view import project

SPLASH_SECONDS = 3


def show_splash(screen, seconds: float = SPLASH_SECONDS) -> None:
    """Draw the logo and hold it for *seconds*."""
    screen.draw(splash())
    if seconds > 0:
        time.sleep(seconds)


def run_session(screen, state: SessionState | None = None, catalog=CATALOG) -> ArchConfig | None:
    """Drive the question loop until every answer is in or the user quits.

    Returns the filled record, or None when the session was quit.
    """
    state = state or SessionState()
    record = ArchConfig()
    logger.info("session started ({} questions, theme {})", len(catalog), state.theme.value)

    while not state.is_finished(catalog):
        screen.draw(render(project(state, catalog)))
        apply_event(state, screen.read_event(), record, catalog)

    if state.quit_requested:
        logger.info("session quit after {} answers, discarding", state.current_index)
        return None
    return record


def run_wizard(
    output: str | Path,
    theme: Theme = Theme.DEFAULT,
    splash_seconds: float = SPLASH_SECONDS,
    screen_factory=TerminalScreen,
    save=save_config,
) -> ArchConfig | None:
    """Run one full session and persist the record if it completed.

    The screen is released before anything is written, so a failing
    save leaves the terminal usable.
    """
    with screen_factory() as screen:
        show_splash(screen, splash_seconds)
        record = run_session(screen, SessionState(theme=theme))

    if record is None:
        return None
    save(record, output)
    return record
