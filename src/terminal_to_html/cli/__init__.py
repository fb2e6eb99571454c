"""Command line interface."""

from terminal_to_html.cli.app import create_app
from terminal_to_html.cli.main import main

__all__ = ["create_app", "main"]
