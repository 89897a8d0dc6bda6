"""
Summary: Export the title rule engine and the source-specific normalizers.
Why: Producers pick the normalizer matching their source from one module.
"""

from .normalizers import (
    get_media_session_info,
    parse_video_description,
    process_track_list_title,
    process_video_title,
)
from .title_rules import DEFAULT_TITLE_RULES, RegexTitleRule, SeparatorTitleRule, TitleMatch, TitleRule

__all__ = [
    "DEFAULT_TITLE_RULES",
    "RegexTitleRule",
    "SeparatorTitleRule",
    "TitleMatch",
    "TitleRule",
    "get_media_session_info",
    "parse_video_description",
    "process_track_list_title",
    "process_video_title",
]
