# Where: playmeta.features.song.__init__
# What: Expose the song entity, its field layers and the connector port.
# Why: Consumers read songs through one import surface.

from .domain import (
    BASE_FIELDS,
    USER_FIELDS,
    ParsedData,
    ProcessedData,
    ProcessedFieldError,
    Song,
    SongFlags,
    SongMetadata,
)
from .ports import ConnectorPort

__all__ = [
    "BASE_FIELDS",
    "ConnectorPort",
    "ParsedData",
    "ProcessedData",
    "ProcessedFieldError",
    "Song",
    "SongFlags",
    "SongMetadata",
    "USER_FIELDS",
]
