"""Command-line entry point and subcommand dispatch."""

import sys

from rich.markup import escape

from .config_loader import build_parser
from .i18n import init as i18n_init


# ── Subcommand handlers ────────────────────────────────────────


def _run_setup(args) -> None:
    """Run the interactive setup wizard."""
    from .commands.setup import run_setup
    run_setup(args)


def _run_show(args) -> None:
    """Print a saved configuration."""
    from .commands.show import run_show
    run_show(args)


# ── Main dispatch ───────────────────────────────────────────────


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    i18n_init(getattr(args, "lang", None) or "en")

    # Default to setup when no subcommand is given
    command = args.command or "setup"

    if command == "setup":
        _run_setup(args)
    elif command == "show":
        _run_show(args)
    else:
        parser.print_help()
        sys.exit(1)


def run():
    """main() with interrupt and last-resort error reporting."""
    try:
        main()
    except KeyboardInterrupt:
        from .theme import console
        from .i18n import t
        console.print(f"\n  [yellow]{escape(t('common.interrupted'))}[/yellow]")
        sys.exit(130)
    except SystemExit:
        raise
    except Exception as e:
        from .theme import console
        from .i18n import t
        console.print(f"\n  [red]{escape(t('common.unexpected_error', error=str(e)))}[/red]")
        sys.exit(1)
