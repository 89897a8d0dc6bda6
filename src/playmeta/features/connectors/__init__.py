# Where: playmeta.features.connectors.__init__
# What: Expose connector definitions and the raw scrape record.
# Why: Producers describe sites here and hand scrapes to the song feature.

from .definitions import (
    BUILTIN_CONNECTORS,
    THE_MUSIC_NINJA,
    ConnectorDefinition,
    RawScrape,
    get_connector,
)

__all__ = [
    "BUILTIN_CONNECTORS",
    "ConnectorDefinition",
    "RawScrape",
    "THE_MUSIC_NINJA",
    "get_connector",
]
