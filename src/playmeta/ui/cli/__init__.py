"""Command line interface package."""

from playmeta.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
