"""Line-mode prompts asked before the full-screen session starts."""

import sys

import questionary
from rich.markup import escape

from .theme import console, WARN, Q_STYLE
from .i18n import t


def _cancelled(path: str):
    console.print(f"\n  [{WARN}]{escape(t('setup.cancelled', path=path))}[/]")
    sys.exit(0)


def confirm_overwrite(path: str) -> bool:
    """Ask before replacing an existing configuration file.

    Defaults to No; Ctrl-C leaves *path* untouched and exits cleanly.
    """
    console.print()
    result = questionary.confirm(
        message=t("setup.overwrite", path=path),
        default=False,
        qmark="  ▸",
        style=Q_STYLE,
    ).ask()

    if result is None:
        _cancelled(path)
    return result
