"""
Summary: Declarative connector definitions and conversion of raw scrapes into songs.
Why: Keep site knowledge as data while parsing goes through the shared primitives.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any, Final

from playmeta.config.config import DEFAULT_PARSER_CONFIG, ParserConfig
from playmeta.features.parsing.domain import (
    extract_url_from_css_property,
    fill_empty_fields,
    split_artist_track,
    split_time_info,
    string_to_seconds,
)
from playmeta.features.song import ParsedData, Song
from playmeta.platform.logging import logger


@dataclass(slots=True, frozen=True)
class RawScrape:
    """Raw strings a scraper collected from a page using a definition's selectors."""

    artist_text: str | None = None
    track_text: str | None = None
    artist_track_text: str | None = None
    album_text: str | None = None
    current_time_text: str | None = None
    duration_text: str | None = None
    time_info_text: str | None = None
    track_art_url: str | None = None
    track_art_style: str | None = None
    playing_element_classes: tuple[str, ...] = ()
    origin_url: str | None = None
    unique_id: str | None = None


@dataclass(slots=True, frozen=True)
class ConnectorDefinition:
    """Selectors and rules describing one media site."""

    label: str
    player_selector: str | None = None
    artist_selector: str | None = None
    track_selector: str | None = None
    artist_track_selector: str | None = None
    album_selector: str | None = None
    current_time_selector: str | None = None
    duration_selector: str | None = None
    time_info_selector: str | None = None
    track_art_selector: str | None = None
    playing_selector: str | None = None
    playing_class: str | None = None

    def is_playing(self, raw: RawScrape) -> bool | None:
        """Return the playing state, or None when the site exposes none."""

        if not self.playing_class:
            return None
        return self.playing_class in raw.playing_element_classes

    def parse(self, raw: RawScrape, *, config: ParserConfig = DEFAULT_PARSER_CONFIG) -> ParsedData:
        """Turn a raw scrape into the as-received layer of a song.

        Separate artist and track texts take precedence; a combined
        artist-track text only fills whichever of them is missing. The same
        applies to separate time texts over a combined time-info text.
        """
        draft: dict[str, Any] = {
            "artist": _clean(raw.artist_text),
            "track": _clean(raw.track_text),
            "current_time": _seconds(raw.current_time_text),
            "duration": _seconds(raw.duration_text),
        }

        if raw.artist_track_text:
            pair = split_artist_track(raw.artist_track_text, config.separators)
            _ = fill_empty_fields(draft, asdict(pair), ("artist", "track"))

        if raw.time_info_text:
            info = split_time_info(raw.time_info_text, config.time_separators)
            _ = fill_empty_fields(draft, asdict(info), ("current_time", "duration"))

        parsed = ParsedData(
            artist=draft["artist"] or None,
            track=draft["track"] or None,
            album=_clean(raw.album_text),
            duration=draft["duration"],
            current_time=draft["current_time"],
            is_playing=self.is_playing(raw),
            origin_url=raw.origin_url,
            track_art=raw.track_art_url or extract_url_from_css_property(raw.track_art_style),
            unique_id=raw.unique_id,
        )
        logger.debug(
            "Scrape parsed for %s",
            self.label,
            extra={
                "parsing_event": "parsing.connector.scrape",
                "rule": self.label,
                "artist": parsed.artist,
                "track": parsed.track,
            },
        )
        return parsed

    def create_song(
        self, raw: RawScrape, *, config: ParserConfig = DEFAULT_PARSER_CONFIG
    ) -> Song:
        """Build a song whose as-received layer comes from ``raw``."""

        return Song(self.parse(raw, config=config), self)


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


def _seconds(value: str | None) -> int | None:
    if value is None or not value.strip():
        return None
    return string_to_seconds(value)


THE_MUSIC_NINJA: Final[ConnectorDefinition] = ConnectorDefinition(
    label="The Music Ninja",
    player_selector="#player_inside_wrapper",
    artist_selector="#track_title .artist",
    track_selector="#track_title .title",
    current_time_selector="#player-features .sm2_position",
    duration_selector="#player-features .sm2_total",
    playing_selector="#player-features",
    playing_class="tmn_playing",
)

BUILTIN_CONNECTORS: Final[Mapping[str, ConnectorDefinition]] = {
    definition.label.casefold(): definition for definition in (THE_MUSIC_NINJA,)
}


def get_connector(label: str) -> ConnectorDefinition | None:
    """Look up a built-in definition by label, ignoring case."""

    return BUILTIN_CONNECTORS.get(label.strip().casefold())


__all__ = [
    "BUILTIN_CONNECTORS",
    "ConnectorDefinition",
    "RawScrape",
    "THE_MUSIC_NINJA",
    "get_connector",
]
