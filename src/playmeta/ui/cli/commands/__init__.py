"""Command execution package for CLI."""

from playmeta.ui.cli.commands.parse import (
    CommandExecutor,
    DescriptionCommand,
    TimeCommand,
    TitleCommand,
    VideoIdCommand,
)

__all__ = [
    "CommandExecutor",
    "DescriptionCommand",
    "TimeCommand",
    "TitleCommand",
    "VideoIdCommand",
]
