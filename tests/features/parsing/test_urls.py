"""
Summary: Tests for CSS URL and video identifier extraction.
Why: Pages hand over URLs in several forms and each one must resolve to the same id.
"""

from __future__ import annotations

import pytest

from playmeta.features.parsing.domain.urls import (
    extract_url_from_css_property,
    get_video_id_from_url,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ('url("http://example.com/image.png")', "http://example.com/image.png"),
        ("url('http://example.com/image.png')", "http://example.com/image.png"),
        ("url(http://example.com/image.png)", "http://example.com/image.png"),
        (
            '#ffffff url("http://example.com/image.png") no-repeat right top;',
            "http://example.com/image.png",
        ),
        ("whatever", None),
        (None, None),
    ],
    ids=["double-quotes", "single-quotes", "no-quotes", "shorthand", "malformed", "none"],
)
def test_extract_url_from_css_property(value: str | None, expected: str | None) -> None:
    assert extract_url_from_css_property(value) == expected


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        (None, None),
        ("", None),
        ("Invalid input", None),
        ("https://www.youtube.com/watch?v=JJYxNSRX6Oc", "JJYxNSRX6Oc"),
        ("https://www.youtube.com/watch?v=JJYxNSRX6Oc&t=92s", "JJYxNSRX6Oc"),
        (
            "https://www.youtube.com/watch?list=PLjTdkvaV6GM-J-6PHx9Cw5Cg2tI5utWe7&v=ALZHF5UqnU4",
            "ALZHF5UqnU4",
        ),
        ("https://youtu.be/Mssm8Ml5sOo", "Mssm8Ml5sOo"),
        (
            "https://www.youtube.com/embed/M7lc1UVf-VE?autoplay=1&origin=http://example.com",
            "M7lc1UVf-VE",
        ),
        ("https://example.com/watch?v=JJYxNSRX6Oc", None),
        ("https://www.youtube.com/feed/subscriptions", None),
        ("/watch?v=JJYxNSRX6Oc&t=1", "JJYxNSRX6Oc"),
        ("youtu.be/Mssm8Ml5sOo", "Mssm8Ml5sOo"),
        ("www.youtube.com/watch?v=JJYxNSRX6Oc", "JJYxNSRX6Oc"),
        ("https://www.youtube-nocookie.com/embed/M7lc1UVf-VE", "M7lc1UVf-VE"),
        ("/feed/subscriptions", None),
        ("https://[not-an-ip]/watch?v=JJYxNSRX6Oc", None),
    ],
    ids=[
        "none",
        "empty",
        "invalid",
        "watch",
        "watch-extra-params",
        "v-last",
        "short-link",
        "embed",
        "other-host",
        "no-video",
        "relative-watch",
        "short-link-without-scheme",
        "watch-without-scheme",
        "nocookie-embed",
        "relative-no-video",
        "malformed-host",
    ],
)
def test_get_video_id_from_url(url: str | None, expected: str | None) -> None:
    assert get_video_id_from_url(url) == expected


def test_video_id_is_stable_across_url_shapes() -> None:
    """Equivalent watch, short and embed URLs resolve to one identifier."""

    urls = [
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ&t=3",
        "https://m.youtube.com/watch?t=3&v=dQw4w9WgXcQ",
        "https://youtu.be/dQw4w9WgXcQ?t=3",
        "https://www.youtube.com/embed/dQw4w9WgXcQ",
    ]

    assert {get_video_id_from_url(url) for url in urls} == {"dQw4w9WgXcQ"}
