"""
Summary: Song entity and its layered field structures.
Why: Consumers import songs and their field layers from one place.
"""

from .models import (
    BASE_FIELDS,
    USER_FIELDS,
    ParsedData,
    ProcessedData,
    ProcessedFieldError,
    SongFlags,
    SongMetadata,
)
from .song import Song

__all__ = [
    "BASE_FIELDS",
    "ParsedData",
    "ProcessedData",
    "ProcessedFieldError",
    "Song",
    "SongFlags",
    "SongMetadata",
    "USER_FIELDS",
]
