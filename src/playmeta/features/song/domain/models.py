"""
Summary: Data structures that hold the layered fields of a song.
Why: Parsed, processed and metadata values change at different times and need separate homes.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Final


class ProcessedFieldError(ValueError):
    """Raised when a processed field would be cleared or is not writable."""


@dataclass(slots=True, frozen=True)
class ParsedData:
    """Fields exactly as a producer supplied them when the song was created."""

    artist: str | None = None
    track: str | None = None
    album: str | None = None
    album_artist: str | None = None
    unique_id: str | None = None
    duration: int | None = None
    current_time: int | None = None
    is_playing: bool | None = None
    is_podcast: bool | None = None
    is_scrobbling_allowed: bool | None = None
    origin_url: str | None = None
    track_art: str | None = None


@dataclass(slots=True)
class ProcessedData:
    """Sparse corrections applied after construction.

    Fields can be set or replaced but never cleared back to None; use
    ``Song.reset_info`` to drop every correction at once.
    """

    artist: str | None = None
    track: str | None = None
    album: str | None = None
    album_artist: str | None = None
    duration: int | None = None

    def __setattr__(self, name: str, value: object) -> None:
        if value is None and getattr(self, name, None) is not None:
            raise ProcessedFieldError(f"Processed field '{name}' cannot be cleared")
        object.__setattr__(self, name, value)


@dataclass(slots=True)
class SongFlags:
    """Validation state set by collaborators."""

    is_valid: bool = False
    is_corrected_by_user: bool = False


@dataclass(slots=True)
class SongMetadata:
    """Runtime-only data that never takes part in identity."""

    label: str | None = None
    start_timestamp: int | None = None
    userloved: bool | None = None
    track_art_url: str | None = None
    notification_id: str | None = None
    artist_url: str | None = None
    track_url: str | None = None
    album_url: str | None = None


BASE_FIELDS: Final[tuple[str, ...]] = tuple(f.name for f in fields(ParsedData))

USER_FIELDS: Final[tuple[str, ...]] = ("artist", "track", "album", "album_artist")


__all__ = [
    "BASE_FIELDS",
    "ParsedData",
    "ProcessedData",
    "ProcessedFieldError",
    "SongFlags",
    "SongMetadata",
    "USER_FIELDS",
]
