"""Command-line interface."""

from ef80escape.cli.app import main

__all__ = ["main"]
