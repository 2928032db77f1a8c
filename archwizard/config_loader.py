"""Command-line options for the wizard."""

import argparse

from .persistence import DEFAULT_OUTPUT
from .theme import Theme


# ── Shared argument helpers ─────────────────────────────────────

def _add_lang_arg(parser: argparse.ArgumentParser) -> None:
    """Add --lang to a subparser so it works in any position.

    Uses SUPPRESS default so the subparser does not override a value
    already set by the root parser when --lang appears before the subcommand.
    """
    parser.add_argument("--lang", type=str, default=argparse.SUPPRESS,
                        help="Language code (e.g., en)")


def _add_setup_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--output", type=str, default=DEFAULT_OUTPUT,
                        help="File the configuration is written to (default: %(default)s)")
    parser.add_argument("--theme", choices=[theme.value for theme in Theme],
                        default=Theme.DEFAULT.value,
                        help="Starting color theme; Tab cycles it (default: %(default)s)")
    parser.add_argument("--no-splash", action="store_true",
                        help="Skip the logo screen")
    parser.add_argument("--yes", "-y", action="store_true",
                        help="Overwrite an existing output file without asking")

    logging = parser.add_argument_group("Logging options")
    logging.add_argument("--log-file", type=str,
                         help="Write a session log to this file")
    logging.add_argument("--verbose", "-v", action="store_true",
                         help="Include debug messages in the log")


# ── Parser builder ──────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with subcommands.

    Global flag:  --lang
    Subcommands:  setup (default), show
    """
    parser = argparse.ArgumentParser(
        description="Arch Linux Setup Wizard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--lang", type=str, help="Language code (e.g., en)")

    subparsers = parser.add_subparsers(dest="command")

    # ── setup ────────────────────────────────────────────────
    setup_p = subparsers.add_parser(
        "setup", help="Run the interactive setup wizard (default)",
    )
    _add_lang_arg(setup_p)
    _add_setup_args(setup_p)

    # ── show ─────────────────────────────────────────────────
    show_p = subparsers.add_parser(
        "show", help="Print a saved configuration",
    )
    _add_lang_arg(show_p)
    show_p.add_argument("--file", type=str, default=DEFAULT_OUTPUT,
                        help="Configuration file to read (default: %(default)s)")

    return parser
