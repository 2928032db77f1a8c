#!/usr/bin/env python3
# /// script
# requires-python = ">=3.10"
# dependencies = ["rich>=13.9.0", "questionary>=2.1.0", "prompt_toolkit>=3.0.36", "pyyaml>=6.0", "loguru>=0.7.0"]
# ///
"""
Arch Linux Setup Wizard
Full-screen terminal UI powered by Rich + prompt_toolkit

Usage:
    uv run arch-setup-wizard.py                          # interactive setup (default)
    uv run arch-setup-wizard.py setup --theme dark
    uv run arch-setup-wizard.py setup --output my.yaml --no-splash
    uv run arch-setup-wizard.py setup --log-file wizard.log --verbose
    uv run arch-setup-wizard.py show --file my.yaml

Keys: Enter confirms, Up/Down move, typing filters choices,
Tab cycles the color theme, Esc quits without saving.
"""

from archwizard.cli import run


if __name__ == "__main__":
    run()
