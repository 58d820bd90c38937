"""Command line interface for orgscribe."""

from orgscribe.cli.main import cli, main

__all__ = ["cli", "main"]
