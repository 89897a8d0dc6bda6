"""
Summary: Ordered title-matching rules for video-title style artist/track text.
Why: Keep each formatting convention an isolated, individually testable matcher.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final, Protocol, final

from playmeta.config.config import ParserConfig
from playmeta.features.parsing.domain.separators import split_artist_track
from playmeta.shared.track_info import ArtistTrackPair

# Leading "[Genre]" or "【Genre】" tag, with any dashes that follow it.
GENRE_TAG: Final[re.Pattern[str]] = re.compile(r"^(?:\[[^\]]+\]|【[^】]+】)\s*-*\s*")


@dataclass(slots=True, frozen=True)
class TitleMatch:
    """Artist/track pair tagged with the name of the rule that produced it."""

    rule: str
    pair: ArtistTrackPair


class TitleRule(Protocol):
    """A single title-matching strategy."""

    @property
    def name(self) -> str:
        """Identifier used in logs and match results."""
        ...

    def match(self, title: str, config: ParserConfig) -> TitleMatch | None:
        """Return a match for ``title`` or None when the rule does not apply."""
        ...


@final
@dataclass(slots=True, frozen=True)
class RegexTitleRule:
    """Rule backed by a regex with ``artist`` and ``track`` named groups."""

    name: str
    pattern: re.Pattern[str]

    def match(self, title: str, config: ParserConfig) -> TitleMatch | None:
        found = self.pattern.search(title)
        if found is None:
            return None

        artist = found.group("artist").strip()
        track = found.group("track").strip()
        if not artist or not track:
            return None
        return TitleMatch(rule=self.name, pair=ArtistTrackPair(artist=artist, track=track))


@final
@dataclass(slots=True, frozen=True)
class SeparatorTitleRule:
    """Rule splitting on the configured separator list."""

    name: str = "separator"

    def match(self, title: str, config: ParserConfig) -> TitleMatch | None:
        pair = split_artist_track(title, config.separators)
        if not pair.artist or not pair.track:
            return None
        return TitleMatch(rule=self.name, pair=pair)


# "Track (by Artist)" and "Track (cover by Artist) notes".
INVERTED_RULE: Final[RegexTitleRule] = RegexTitleRule(
    name="inverted",
    pattern=re.compile(
        r"(?P<track>\w[\w\s']*?)\s+\((?:[^()]*\s)?(?i:by)\s+(?P<artist>[^()]+?)\s*\)"
    ),
)

# 'Artist "Track"', 'Artist: "Track"', 'Artist - "Track"'.
QUOTED_RULE: Final[RegexTitleRule] = RegexTitleRule(
    name="quoted",
    pattern=re.compile(r"(?P<artist>.+?)[\s:—-]+\s*[\"“](?P<track>.+?)[\"”]"),
)

# Artist「Track」, common for Japanese releases.
BRACKETED_RULE: Final[RegexTitleRule] = RegexTitleRule(
    name="bracketed",
    pattern=re.compile(r"(?P<artist>.+?)\s*[『｢「](?P<track>.+?)[」｣』]"),
)

SEPARATOR_RULE: Final[SeparatorTitleRule] = SeparatorTitleRule()

DEFAULT_TITLE_RULES: Final[tuple[TitleRule, ...]] = (
    INVERTED_RULE,
    QUOTED_RULE,
    BRACKETED_RULE,
    SEPARATOR_RULE,
)


def strip_genre_tag(title: str) -> str:
    """Remove a leading bracketed genre tag."""

    return GENRE_TAG.sub("", title, count=1).strip()


__all__ = [
    "BRACKETED_RULE",
    "DEFAULT_TITLE_RULES",
    "GENRE_TAG",
    "INVERTED_RULE",
    "QUOTED_RULE",
    "RegexTitleRule",
    "SEPARATOR_RULE",
    "SeparatorTitleRule",
    "TitleMatch",
    "TitleRule",
    "strip_genre_tag",
]
