"""
Summary: Port describing the connector a song was produced by.
Why: Let songs hold their producer without depending on its internal shape.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConnectorPort(Protocol):
    """Minimal surface a connector exposes to the song entity."""

    @property
    def label(self) -> str:
        """Human readable name of the site or player."""
        ...


__all__ = ["ConnectorPort"]
