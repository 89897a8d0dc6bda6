"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from playmeta.config.config import AppConfig, load_config
from playmeta.platform.logging import logger, setup_logger
from playmeta.ui.cli.args.options import (
    CLIArgs,
    DescriptionArgs,
    TimeArgs,
    TitleArgs,
    VideoIdArgs,
)


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            description="playmeta - Extract artist, track and album data from media page text.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "--config",
            type=str,
            help="Path to a TOML configuration file",
            metavar="CONFIG_PATH",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show which parsing rules matched",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all log output except errors",
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        title_parser = subparsers.add_parser(
            "title",
            help="Split a title into artist and track",
        )
        _ = title_parser.add_argument("text", type=str, metavar="TEXT")
        _ = title_parser.add_argument(
            "--style",
            choices=("video", "track-list"),
            default="video",
            help="Title convention: video titles or dash-separated track lists",
        )

        description_parser = subparsers.add_parser(
            "description",
            help="Parse an auto-generated release description",
        )
        _ = description_parser.add_argument(
            "source",
            nargs="?",
            type=str,
            help="File holding the description (reads stdin when omitted)",
            metavar="FILE",
        )

        time_parser = subparsers.add_parser(
            "time",
            help="Convert a time string, or a 'current / total' pair, to seconds",
        )
        _ = time_parser.add_argument("text", type=str, metavar="TEXT")

        video_parser = subparsers.add_parser(
            "video-id",
            help="Extract the video identifier from a video URL",
        )
        _ = video_parser.add_argument("url", type=str, metavar="URL")

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            ConfigError: If the configuration file is invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        configuration = load_config(path=parsed_args.config)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = configuration.console_level
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        command: str = parsed_args.command

        if command == "title":
            return TitleArgs(
                command="title",
                text=parsed_args.text,
                style=parsed_args.style,
                config=configuration,
            )

        if command == "description":
            return ArgumentParser._process_description(parsed_args, configuration)

        if command == "time":
            return TimeArgs(command="time", text=parsed_args.text, config=configuration)

        if command == "video-id":
            return VideoIdArgs(command="video-id", url=parsed_args.url, config=configuration)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _process_description(
        parsed_args: argparse.Namespace, configuration: AppConfig
    ) -> DescriptionArgs:
        source: Path | None = None
        if parsed_args.source:
            source = Path(parsed_args.source).expanduser().resolve()
            if not source.is_file():
                logger.error("Description file does not exist: %s", source)
                sys.exit(1)
        return DescriptionArgs(command="description", source=source, config=configuration)
