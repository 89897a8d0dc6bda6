"""src/playmeta/ui/cli/commands/parse.py
What: Run the normalizers and primitives behind each CLI subcommand.
Why: Keep argument handling separate from parsing and presentation.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Generic, TypeVar, final

from typing_extensions import override

from playmeta.features.parsing import (
    get_video_id_from_url,
    parse_video_description,
    process_track_list_title,
    process_video_title,
    split_time_info,
    string_to_seconds,
)
from playmeta.ui.cli.args.options import DescriptionArgs, TimeArgs, TitleArgs, VideoIdArgs
from playmeta.ui.cli.display.result import ResultDisplay

ArgsT = TypeVar("ArgsT", TitleArgs, DescriptionArgs, TimeArgs, VideoIdArgs)


class CommandExecutor(ABC, Generic[ArgsT]):
    """Base class for command execution."""

    args: ArgsT
    result_display: ResultDisplay

    def __init__(self, args: ArgsT, *, result_display: ResultDisplay | None = None) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            result_display: Optional display, mainly for tests.
        """
        self.args = args
        self.result_display = result_display or ResultDisplay()

    @abstractmethod
    def execute(self) -> bool:
        """Execute the command.

        Returns:
            bool: Whether the input was recognised.
        """
        ...


@final
class TitleCommand(CommandExecutor[TitleArgs]):
    """Split a title into artist and track."""

    @override
    def execute(self) -> bool:
        parser_config = self.args.config.parser
        if self.args.style == "track-list":
            pair = process_track_list_title(self.args.text, config=parser_config)
        else:
            pair = process_video_title(self.args.text, config=parser_config)

        self.result_display.show_fields(
            "Title", [("Artist", pair.artist), ("Track", pair.track)]
        )
        return pair.track is not None


@final
class DescriptionCommand(CommandExecutor[DescriptionArgs]):
    """Parse a release description block."""

    @override
    def execute(self) -> bool:
        if self.args.source is None:
            text = sys.stdin.read()
        else:
            text = self.args.source.read_text(encoding="utf-8")

        info = parse_video_description(text, config=self.args.config.parser)
        if info is None:
            self.result_display.show_unrecognised("Description")
            return False

        self.result_display.show_fields(
            "Description",
            [("Artist", info.artist), ("Track", info.track), ("Album", info.album)],
        )
        return True


@final
class TimeCommand(CommandExecutor[TimeArgs]):
    """Convert time strings to seconds."""

    @override
    def execute(self) -> bool:
        separators = self.args.config.parser.time_separators
        if any(separator in self.args.text for separator in separators):
            info = split_time_info(self.args.text, separators)
            self.result_display.show_fields(
                "Time", [("Current time", info.current_time), ("Duration", info.duration)]
            )
            return info.duration is not None

        self.result_display.show_fields(
            "Time", [("Seconds", string_to_seconds(self.args.text))]
        )
        return True


@final
class VideoIdCommand(CommandExecutor[VideoIdArgs]):
    """Extract a video identifier from a URL."""

    @override
    def execute(self) -> bool:
        video_id = get_video_id_from_url(self.args.url)
        if video_id is None:
            self.result_display.show_unrecognised("Video URL")
            return False

        self.result_display.show_fields("Video", [("Video ID", video_id)])
        return True


__all__ = ["CommandExecutor", "DescriptionCommand", "TimeCommand", "TitleCommand", "VideoIdCommand"]
