"""
Summary: Source-specific normalizers turning raw titles, descriptions and media sessions into draft records.
Why: Each source follows its own formatting convention but must yield the same record shapes.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any, Final, cast

from playmeta.config.config import DEFAULT_PARSER_CONFIG, ParserConfig
from playmeta.features.parsing.domain.separators import split_artist_track
from playmeta.platform.logging import logger
from playmeta.shared.track_info import ArtistTrackPair, MediaInfo, TrackInfo

from .title_rules import DEFAULT_TITLE_RULES, TitleRule, strip_genre_tag

_SIZE: Final[re.Pattern[str]] = re.compile(r"(\d+)\s*[xX×]\s*(\d+)")


def process_video_title(
    title: str | None,
    *,
    config: ParserConfig = DEFAULT_PARSER_CONFIG,
    rules: Sequence[TitleRule] = DEFAULT_TITLE_RULES,
) -> ArtistTrackPair:
    """Extract artist and track from a video title.

    The leading genre tag is stripped first, then ``rules`` are tried in
    order and the first match wins. Without a match the whole cleaned
    title becomes the track.

    Args:
        title: Raw video title.
        config: Separator lists used by the separator rule.
        rules: Ordered matchers; defaults to inverted, quoted, bracketed
            and separator rules.

    Returns:
        ArtistTrackPair: Both fields None only for empty input.
    """
    if not title:
        return ArtistTrackPair()

    cleaned = strip_genre_tag(title)
    for rule in rules:
        result = rule.match(cleaned, config)
        if result is None:
            continue
        logger.debug(
            "Title matched by %s rule",
            result.rule,
            extra={
                "parsing_event": "parsing.title.match",
                "rule": result.rule,
                "artist": result.pair.artist,
                "track": result.pair.track,
                "source_text": title,
            },
        )
        return result.pair

    logger.debug(
        "No title rule matched",
        extra={"parsing_event": "parsing.title.fallback", "track": cleaned, "source_text": title},
    )
    return ArtistTrackPair(artist=None, track=cleaned or None)


def process_track_list_title(
    title: str | None, *, config: ParserConfig = DEFAULT_PARSER_CONFIG
) -> ArtistTrackPair:
    """Split a track-list style title on dash separators only.

    Unmatched input becomes the track with no artist.
    """
    if not title:
        return ArtistTrackPair()

    pair = split_artist_track(title, config.dash_separators)
    if pair.artist and pair.track:
        return pair
    return ArtistTrackPair(artist=None, track=title.strip() or None)


def parse_video_description(
    description: str | None, *, config: ParserConfig = DEFAULT_PARSER_CONFIG
) -> TrackInfo | None:
    """Parse an auto-generated release description block.

    The first meaningful line reads ``Track · Artist[ · Featured ...]`` and
    the next one holds the album. Preamble, copyright, release date, credit
    and disclaimer lines are skipped wherever they appear.

    Args:
        description: Multi-line description text.
        config: Middle-dot separator, ignored line prefixes and ignored marks.

    Returns:
        TrackInfo | None: None when the text is missing or has no track line.
    """
    if not description:
        return None

    lines = [
        line
        for line in (raw.strip() for raw in description.splitlines())
        if line and not _is_ignored_line(line, config)
    ]
    if not lines:
        logger.debug(
            "Description has no track line",
            extra={"parsing_event": "parsing.description.skip", "source_text": description},
        )
        return None

    segments = [
        segment.strip()
        for segment in lines[0].split(config.description_separator)
        if segment.strip()
    ]
    if not segments:
        return None

    track = segments[0]
    artist = segments[1] if len(segments) > 1 else None
    featured = segments[2:]
    if featured:
        track = f"{track} (feat. {', '.join(featured)})"

    album = lines[1] if len(lines) > 1 else None
    logger.debug(
        "Description parsed",
        extra={
            "parsing_event": "parsing.description.match",
            "artist": artist,
            "track": track,
        },
    )
    return TrackInfo(artist=artist, track=track, album=album)


def _is_ignored_line(line: str, config: ParserConfig) -> bool:
    if line.startswith(config.description_ignored_prefixes):
        return True
    return any(marker in line for marker in config.description_ignored_markers)


def get_media_session_info(media_session: Mapping[str, Any] | None) -> MediaInfo | None:
    """Read artist, track, album and artwork from a media session object.

    Expects ``{"metadata": {"artist", "title", "album", "artwork": [...]}}``.
    The artwork entry with the largest ``sizes`` value is used; ties and
    unreadable sizes resolve to the later entry.

    Returns:
        MediaInfo | None: None when the object or its metadata is missing.
    """
    if not media_session:
        return None

    metadata = media_session.get("metadata")
    if not isinstance(metadata, Mapping):
        return None

    fields = cast(Mapping[str, Any], metadata)
    info = MediaInfo(
        artist=fields.get("artist") or None,
        track=fields.get("title") or None,
        album=fields.get("album") or None,
        track_art=_largest_artwork(fields.get("artwork")),
    )
    logger.debug(
        "Media session read",
        extra={
            "parsing_event": "parsing.media_session.match",
            "artist": info.artist,
            "track": info.track,
        },
    )
    return info


def _largest_artwork(artwork: object) -> str | None:
    if not isinstance(artwork, Sequence) or isinstance(artwork, str) or not artwork:
        return None

    best_src: str | None = None
    best_area = -1
    for entry in cast(Sequence[object], artwork):
        if not isinstance(entry, Mapping):
            continue
        item = cast(Mapping[str, Any], entry)
        src = item.get("src")
        if not isinstance(src, str) or not src:
            continue
        area = _artwork_area(item.get("sizes"))
        if area >= best_area:
            best_src, best_area = src, area
    return best_src


def _artwork_area(sizes: object) -> int:
    if not isinstance(sizes, str):
        return 0
    areas = [int(width) * int(height) for width, height in _SIZE.findall(sizes)]
    return max(areas, default=0)


__all__ = [
    "get_media_session_info",
    "parse_video_description",
    "process_track_list_title",
    "process_video_title",
]
