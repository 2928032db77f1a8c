"""Run the interactive wizard and save its answers."""

import os
import sys

from loguru import logger

from ..app import SPLASH_SECONDS, run_wizard
from ..i18n import t
from ..log import setup_logging
from ..persistence import DEFAULT_OUTPUT, PersistenceError, save_config
from ..prompts import confirm_overwrite
from ..terminal import DisplayError, TerminalScreen
from ..theme import Theme
from ..ui import step, ok, fail, info, print_summary


def run_setup(args, screen_factory=TerminalScreen, save=save_config):
    """Ask every question full-screen, then write the configuration file."""
    output = getattr(args, "output", None) or DEFAULT_OUTPUT
    theme = Theme(getattr(args, "theme", None) or Theme.DEFAULT.value)
    splash_seconds = 0 if getattr(args, "no_splash", False) else SPLASH_SECONDS

    setup_logging(getattr(args, "log_file", None), getattr(args, "verbose", False))

    if os.path.exists(output) and not getattr(args, "yes", False):
        if not confirm_overwrite(output):
            info(t("setup.kept", path=output))
            return None

    def _save(record, path):
        step(t("setup.saving", path=path))
        return save(record, path)

    try:
        record = run_wizard(
            output,
            theme=theme,
            splash_seconds=splash_seconds,
            screen_factory=screen_factory,
            save=_save,
        )
    except DisplayError as e:
        logger.error("display setup failed: {}", e)
        fail(t("setup.display_failed", error=str(e)))
        sys.exit(1)
    except PersistenceError as e:
        logger.error("save failed: {}", e)
        fail(t("setup.save_failed", error=str(e)))
        sys.exit(1)

    if record is None:
        info(t("setup.quit"))
        return None

    ok(t("setup.saved", path=output))
    print_summary(record)
    return record
