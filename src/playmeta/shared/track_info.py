# Where: playmeta.shared.track_info
# What: Record dataclasses produced by the parsing primitives and normalizers.
# Why: Give every producer and consumer one definition of the draft track shapes.

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class SeparatorMatch:
    """Position and length of a separator found inside a string."""

    index: int
    length: int


@dataclass(slots=True)
class ArtistTrackPair:
    """Artist and track title; both ``None`` means no structure was recognised."""

    artist: str | None = None
    track: str | None = None


@dataclass(slots=True)
class TimeInfo:
    """Playback position and total length, in whole seconds."""

    current_time: int | None = None
    duration: int | None = None


@dataclass(slots=True)
class TrackInfo:
    """Artist, track and album drafted from a structured description."""

    artist: str | None = None
    track: str | None = None
    album: str | None = None


@dataclass(slots=True)
class MediaInfo:
    """Track data read from a platform media session object."""

    artist: str | None = None
    track: str | None = None
    album: str | None = None
    track_art: str | None = None


__all__ = ["ArtistTrackPair", "MediaInfo", "SeparatorMatch", "TimeInfo", "TrackInfo"]
