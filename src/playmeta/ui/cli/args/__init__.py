"""Command line argument handling package."""

from playmeta.ui.cli.args.parser import ArgumentParser
from playmeta.ui.cli.args.options import (
    CLIArgs,
    DescriptionArgs,
    TimeArgs,
    TitleArgs,
    VideoIdArgs,
)

__all__ = ["ArgumentParser", "CLIArgs", "DescriptionArgs", "TimeArgs", "TitleArgs", "VideoIdArgs"]
