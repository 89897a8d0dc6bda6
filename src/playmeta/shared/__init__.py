# Where: playmeta.shared.__init__
# What: Provide a concise import surface for shared record dataclasses.
# Why: Encourage consistent reuse of the draft track shapes across features.

"""Shared cross-cutting dataclasses exposed at the package level."""

from .track_info import ArtistTrackPair, MediaInfo, SeparatorMatch, TimeInfo, TrackInfo

__all__ = ["ArtistTrackPair", "MediaInfo", "SeparatorMatch", "TimeInfo", "TrackInfo"]
