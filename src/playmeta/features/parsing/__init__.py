# Where: playmeta.features.parsing.__init__
# What: Expose parsing primitives and normalizers.
# Why: Provide a cohesive import surface for producers and the CLI.

from .domain import (
    TextNode,
    escape_bad_time_values,
    extract_url_from_css_property,
    fill_empty_fields,
    find_separator,
    get_video_id_from_url,
    is_artist_track_empty,
    join_artists,
    split_artist_track,
    split_time_info,
    string_to_seconds,
)
from .usecases import (
    get_media_session_info,
    parse_video_description,
    process_track_list_title,
    process_video_title,
)

__all__ = [
    "TextNode",
    "escape_bad_time_values",
    "extract_url_from_css_property",
    "fill_empty_fields",
    "find_separator",
    "get_media_session_info",
    "get_video_id_from_url",
    "is_artist_track_empty",
    "join_artists",
    "parse_video_description",
    "process_track_list_title",
    "process_video_title",
    "split_artist_track",
    "split_time_info",
    "string_to_seconds",
]
