"""playmeta: artist, track and album extraction for media pages.

Parsing primitives and normalizers live in ``playmeta.features.parsing``;
the canonical song entity lives in ``playmeta.features.song``.
"""

__version__ = "0.1.0"
