"""
Summary: Pull URLs out of CSS property values and video identifiers out of video URLs.
Why: Artwork and video identity often arrive embedded in larger strings.
"""

from __future__ import annotations

import re
from typing import Final
from urllib.parse import parse_qs, urlsplit

_CSS_URL: Final[re.Pattern[str]] = re.compile(r"""url\(\s*(['"]?)(.+?)\1\s*\)""")
_VIDEO_ID: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9_-]+")

_SHORT_LINK_HOSTS: Final[frozenset[str]] = frozenset({"youtu.be", "www.youtu.be"})
_VIDEO_HOSTS: Final[tuple[str, ...]] = ("youtube.com", "youtube-nocookie.com")
_PATH_PREFIXES: Final[tuple[str, ...]] = ("embed", "v", "shorts")


def extract_url_from_css_property(value: str | None) -> str | None:
    """Return the argument of the first ``url(...)`` token in a CSS value.

    Single quotes, double quotes and bare arguments are accepted, and the
    token may sit anywhere in a shorthand value such as ``background``.
    """
    if not value:
        return None

    match = _CSS_URL.search(value)
    if match is None:
        return None
    return match.group(2)


def get_video_id_from_url(url: str | None) -> str | None:
    """Extract a video identifier from a watch, short-link or embed URL.

    Supported shapes:
        - ``https://www.youtube.com/watch?v=ID&t=1`` (``v`` anywhere in the query)
        - ``https://youtu.be/ID``
        - ``https://www.youtube.com/embed/ID?autoplay=1`` and the
          ``youtube-nocookie.com`` embed host

    The scheme may be missing (``youtu.be/ID``), and a path-only href such
    as ``/watch?v=ID`` is read as a link on the video site itself.

    Returns:
        str | None: The identifier, or None for any other input.
    """
    if not url:
        return None

    text = url.strip()
    if not text.startswith("/") and "://" not in text:
        text = "//" + text

    try:
        parts = urlsplit(text)
    except ValueError:
        return None
    host = (parts.hostname or "").lower()

    segments = [segment for segment in parts.path.split("/") if segment]

    if host in _SHORT_LINK_HOSTS:
        return _valid_id(segments[0] if segments else None)

    if host and not _is_video_host(host):
        return None

    if len(segments) >= 2 and segments[0] in _PATH_PREFIXES:
        return _valid_id(segments[1])

    values = parse_qs(parts.query).get("v")
    return _valid_id(values[0] if values else None)


def _is_video_host(host: str) -> bool:
    return any(host == domain or host.endswith("." + domain) for domain in _VIDEO_HOSTS)


def _valid_id(candidate: str | None) -> str | None:
    if candidate and _VIDEO_ID.fullmatch(candidate):
        return candidate
    return None


__all__ = ["extract_url_from_css_property", "get_video_id_from_url"]
