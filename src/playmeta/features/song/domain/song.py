"""
Summary: Canonical song entity layering as-received data, corrections and runtime metadata.
Why: Give identification and reporting one stable read API and identity contract.
"""

from __future__ import annotations

import hashlib
import json
import time
from dataclasses import asdict
from typing import Any, ClassVar, final

from playmeta.features.song.ports import ConnectorPort

from .models import (
    BASE_FIELDS,
    USER_FIELDS,
    ParsedData,
    ProcessedData,
    ProcessedFieldError,
    SongFlags,
    SongMetadata,
)


@final
class Song:
    """A track being played, assembled from several sources over time.

    Reads go through the getters: corrections in ``processed`` win for
    artist, track, album and album artist, while the as-received duration
    and artwork win over anything written later.
    """

    BASE_FIELDS: ClassVar[tuple[str, ...]] = BASE_FIELDS
    USER_FIELDS: ClassVar[tuple[str, ...]] = USER_FIELDS

    processed: ProcessedData
    flags: SongFlags
    metadata: SongMetadata

    def __init__(self, parsed: ParsedData, connector: ConnectorPort) -> None:
        """Initialize the song.

        Args:
            parsed: As-received fields from a normalizer or connector.
            connector: Producer the data came from.
        """
        self._parsed = parsed
        self._connector = connector
        self.processed = ProcessedData()
        self.flags = SongFlags()
        self.metadata = self._default_metadata()
        self._unique_id = self._generate_unique_id()

    @property
    def parsed(self) -> ParsedData:
        """As-received layer; never replaced after construction."""
        return self._parsed

    @property
    def connector(self) -> ConnectorPort:
        return self._connector

    def get_artist(self) -> str | None:
        return self.processed.artist or self._parsed.artist or None

    def get_track(self) -> str | None:
        return self.processed.track or self._parsed.track or None

    def get_album(self) -> str | None:
        return self.processed.album or self._parsed.album or None

    def get_album_artist(self) -> str | None:
        return self.processed.album_artist or self._parsed.album_artist or None

    def get_duration(self) -> int | None:
        """Return the duration, preferring the player-reported value."""

        if self._parsed.duration is not None:
            return self._parsed.duration
        return self.processed.duration

    def get_track_art(self) -> str | None:
        """Return artwork, preferring the as-received URL over a discovered one."""

        return self._parsed.track_art or self.metadata.track_art_url or None

    def get_origin_url(self) -> str | None:
        return self._parsed.origin_url

    def get_unique_id(self) -> str | None:
        """Return the identity fixed at construction time."""

        return self._unique_id

    def get_artist_track_string(self) -> str | None:
        """Return ``"Artist — Track"`` or None when either part is missing."""

        artist = self.get_artist()
        track = self.get_track()
        if artist and track:
            return f"{artist} — {track}"
        return None

    def is_valid(self) -> bool:
        return self.flags.is_corrected_by_user or self.flags.is_valid

    def is_empty(self) -> bool:
        return not (self.get_artist() and self.get_track())

    def equals(self, other: object) -> bool:
        """Return True when ``other`` is a song with the same identity."""

        if not isinstance(other, Song):
            return False
        return self.get_unique_id() == other.get_unique_id()

    def set_love_status(self, is_loved: bool, *, force: bool = False) -> None:
        """Record a love status reported by a service.

        Without ``force`` the stored status is combined with AND, so a single
        ``False`` sticks until a forced update.
        """
        if force or self.metadata.userloved is None:
            self.metadata.userloved = is_loved
            return
        self.metadata.userloved = self.metadata.userloved and is_loved

    def correct_by_user(self, **values: str) -> None:
        """Apply a human correction to user-editable fields.

        Raises:
            ProcessedFieldError: If a field outside ``USER_FIELDS`` is given.
        """
        disallowed = sorted(set(values) - set(USER_FIELDS))
        if disallowed:
            raise ProcessedFieldError(f"Fields not editable by users: {', '.join(disallowed)}")

        for name, value in values.items():
            if value:
                setattr(self.processed, name, value)
        self.flags.is_corrected_by_user = True

    def reset_data(self) -> None:
        """Clear flags and runtime metadata, keeping parsed and processed fields."""

        self.flags = SongFlags()
        self.metadata = self._default_metadata()

    def reset_info(self) -> None:
        """Drop every correction so reads fall back to the parsed layer."""

        self.processed = ProcessedData()

    def get_cloneable_data(self) -> dict[str, dict[str, Any]]:
        """Return an independent copy of all layers."""

        return {
            "parsed": asdict(self._parsed),
            "processed": asdict(self.processed),
            "flags": asdict(self.flags),
            "metadata": asdict(self.metadata),
        }

    def _default_metadata(self) -> SongMetadata:
        return SongMetadata(label=self._connector.label, start_timestamp=int(time.time()))

    def _generate_unique_id(self) -> str | None:
        if self._parsed.unique_id:
            return self._parsed.unique_id

        if not (self._parsed.artist and self._parsed.track):
            return None

        parts = (self._parsed.artist, self._parsed.track, self._parsed.album or "")
        return hashlib.md5("".join(parts).encode("utf-8"), usedforsecurity=False).hexdigest()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Song):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self._unique_id)

    def __str__(self) -> str:
        return json.dumps(self.get_cloneable_data(), ensure_ascii=False)

    def __repr__(self) -> str:
        return f"Song(unique_id={self._unique_id!r}, label={self._connector.label!r})"


__all__ = ["Song"]
