"""Full-screen terminal handling: alternate screen, raw keys, key bindings."""

import select
import sys
from collections import deque
from contextlib import ExitStack

from prompt_toolkit.input import create_input
from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys
from rich.live import Live

from .events import Char, Event, Key
from .theme import console


class DisplayError(Exception):
    """The terminal could not be switched into wizard mode."""


# ── Key bindings ─────────────────────────────────────────────

BINDINGS: dict[Keys, Key] = {
    Keys.Enter: Key.CONFIRM,
    Keys.ControlJ: Key.CONFIRM,
    Keys.Up: Key.MOVE_UP,
    Keys.Down: Key.MOVE_DOWN,
    Keys.Backspace: Key.BACKSPACE,
    Keys.Tab: Key.THEME_CYCLE,
    Keys.Escape: Key.QUIT,
    Keys.ControlC: Key.QUIT,
}


def key_to_event(key_press: KeyPress) -> Event | None:
    """Translate a prompt_toolkit key press, or None for unbound keys."""
    key = key_press.key
    if isinstance(key, Keys):
        return BINDINGS.get(key)
    if len(key) == 1 and key.isprintable():
        return Char(key)
    return None


# ── Screen ───────────────────────────────────────────────────

class TerminalScreen:
    """Owns the alternate screen and raw input mode for one session.

    Use as a context manager; both are restored on every exit path.
    """

    def __init__(self, stdin=None, key_input=None):
        self._stdin = stdin or sys.stdin
        self._stack: ExitStack | None = None
        self._live: Live | None = None
        self._input = key_input
        self._pending: deque[KeyPress] = deque()

    def __enter__(self) -> "TerminalScreen":
        if not self._stdin.isatty():
            raise DisplayError("standard input is not a terminal")

        stack = ExitStack()
        try:
            if self._input is None:
                self._input = create_input(self._stdin)
            stack.enter_context(self._input.raw_mode())
            self._live = stack.enter_context(
                Live(
                    console=console,
                    screen=True,
                    auto_refresh=False,
                    redirect_stdout=False,
                    redirect_stderr=False,
                )
            )
        except OSError as e:
            stack.close()
            raise DisplayError(str(e)) from e
        self._stack = stack
        return self

    def __exit__(self, *exc_info) -> None:
        if self._stack is not None:
            self._stack.close()
            self._stack = None
        self._live = None

    def draw(self, renderable) -> None:
        self._live.update(renderable, refresh=True)

    def read_event(self) -> Event:
        """Block until a bound key is pressed and return its event."""
        while True:
            while self._pending:
                event = key_to_event(self._pending.popleft())
                if event is not None:
                    return event
            select.select([self._input.fileno()], [], [])
            self._pending.extend(self._input.read_keys())
            self._pending.extend(self._input.flush_keys())
