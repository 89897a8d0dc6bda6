"""Display management for CLI interface."""

from playmeta.ui.cli.display.result import ResultDisplay

__all__ = ["ResultDisplay"]
