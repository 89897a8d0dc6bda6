"""
Summary: Export the string, time, URL and record primitives of the parsing feature.
Why: Normalizers and producers import primitives from one stable location.
"""

from .records import TextNode, fill_empty_fields, join_artists
from .separators import find_separator, is_artist_track_empty, split_artist_track, split_string
from .time_values import escape_bad_time_values, split_time_info, string_to_seconds
from .urls import extract_url_from_css_property, get_video_id_from_url

__all__ = [
    "TextNode",
    "escape_bad_time_values",
    "extract_url_from_css_property",
    "fill_empty_fields",
    "find_separator",
    "get_video_id_from_url",
    "is_artist_track_empty",
    "join_artists",
    "split_artist_track",
    "split_string",
    "split_time_info",
    "string_to_seconds",
]
