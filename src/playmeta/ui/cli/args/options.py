"""Command line argument options."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, final

from playmeta.config.config import AppConfig

TitleStyle = Literal["video", "track-list"]


@final
@dataclass(slots=True)
class TitleArgs:
    """Command line arguments for the ``title`` subcommand."""

    command: Literal["title"]
    text: str
    style: TitleStyle
    config: AppConfig = field(default_factory=AppConfig)


@final
@dataclass(slots=True)
class DescriptionArgs:
    """Command line arguments for the ``description`` subcommand."""

    command: Literal["description"]
    source: Path | None
    config: AppConfig = field(default_factory=AppConfig)


@final
@dataclass(slots=True)
class TimeArgs:
    """Command line arguments for the ``time`` subcommand."""

    command: Literal["time"]
    text: str
    config: AppConfig = field(default_factory=AppConfig)


@final
@dataclass(slots=True)
class VideoIdArgs:
    """Command line arguments for the ``video-id`` subcommand."""

    command: Literal["video-id"]
    url: str
    config: AppConfig = field(default_factory=AppConfig)


CLIArgs = TitleArgs | DescriptionArgs | TimeArgs | VideoIdArgs

__all__ = ["CLIArgs", "DescriptionArgs", "TimeArgs", "TitleArgs", "TitleStyle", "VideoIdArgs"]
