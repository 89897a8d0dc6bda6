"""
Summary: Locate separators inside raw strings and split them into artist/track pairs.
Why: Share one deterministic tie-break rule between every title normalizer.
"""

from __future__ import annotations

from collections.abc import Sequence

from playmeta.config.config import DEFAULT_PARSER_CONFIG
from playmeta.shared.track_info import ArtistTrackPair, SeparatorMatch


def find_separator(
    text: str | None, separators: Sequence[str] | None = None
) -> SeparatorMatch | None:
    """Find the earliest separator occurring in ``text``.

    Among candidates starting at the same index the longest one wins, so
    ``" - "`` is preferred over ``"-"`` when both would match.

    Args:
        text: String to scan.
        separators: Candidate separators. Defaults to the configured list.

    Returns:
        SeparatorMatch | None: Index and length of the winning separator, or
        None for empty input or when nothing matches.
    """
    if not text:
        return None

    candidates = separators if separators else DEFAULT_PARSER_CONFIG.separators
    best: SeparatorMatch | None = None
    for separator in candidates:
        if not separator:
            continue
        index = text.find(separator)
        if index < 0:
            continue
        if (
            best is None
            or index < best.index
            or (index == best.index and len(separator) > best.length)
        ):
            best = SeparatorMatch(index=index, length=len(separator))
    return best


def split_string(
    text: str | None,
    separators: Sequence[str] | None = None,
    *,
    swap: bool = False,
) -> tuple[str | None, str | None]:
    """Split ``text`` around its earliest separator.

    Returns:
        tuple: The untrimmed parts before and after the separator, swapped on
        request, or ``(None, None)`` when no separator is present.
    """
    match = find_separator(text, separators)
    if text is None or match is None:
        return None, None

    first = text[: match.index]
    second = text[match.index + match.length :]
    if swap:
        return second, first
    return first, second


def split_artist_track(
    text: str | None,
    separators: Sequence[str] | None = None,
    *,
    swap: bool = False,
) -> ArtistTrackPair:
    """Split ``"Artist - Track"`` style text into a trimmed pair.

    Args:
        text: Raw string.
        separators: Candidate separators. Defaults to the configured list.
        swap: Treat the text as ``"Track - Artist"``.

    Returns:
        ArtistTrackPair: Both fields None when no separator was found.
    """
    first, second = split_string(text, separators, swap=swap)
    if first is None or second is None:
        return ArtistTrackPair()
    return ArtistTrackPair(artist=first.strip(), track=second.strip())


def is_artist_track_empty(pair: ArtistTrackPair | None) -> bool:
    """Return True when the pair is missing or lacks artist or track."""

    return pair is None or not pair.artist or not pair.track


__all__ = ["find_separator", "is_artist_track_empty", "split_artist_track", "split_string"]
