"""Subcommand handlers."""
