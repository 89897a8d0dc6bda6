"""Command line interface for playmeta."""

import sys
from typing import final

from playmeta.config.config import ConfigError
from playmeta.platform.logging import logger
from playmeta.ui.cli.args import ArgumentParser
from playmeta.ui.cli.args.options import CLIArgs, DescriptionArgs, TimeArgs, TitleArgs
from playmeta.ui.cli.commands import (
    CommandExecutor,
    DescriptionCommand,
    TimeCommand,
    TitleCommand,
    VideoIdCommand,
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            command = CommandProcessor._build_command(args)
            if not command.execute():
                sys.exit(1)

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except ConfigError as e:
            logger.error("Configuration error: %s", str(e))
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)

    @staticmethod
    def _build_command(args: CLIArgs) -> CommandExecutor:  # pyright: ignore[reportMissingTypeArgument]
        if isinstance(args, TitleArgs):
            return TitleCommand(args)
        if isinstance(args, DescriptionArgs):
            return DescriptionCommand(args)
        if isinstance(args, TimeArgs):
            return TimeCommand(args)
        return VideoIdCommand(args)


def main(args_list: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command(args_list)
    return 0
