"""
Summary: Record helpers used by producers while assembling draft track data.
Why: Producers merge partial scrapes and must only fill fields that are still missing.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, MutableMapping
from typing import Any, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class TextNode(Protocol):
    """Anything exposing a textual label, such as a scraped DOM node."""

    @property
    def text_content(self) -> str:
        """Visible text of the element."""
        ...


TargetT = TypeVar("TargetT", bound=MutableMapping[str, Any])


def fill_empty_fields(
    target: TargetT,
    source: Mapping[str, Any] | None,
    fields: Iterable[str] | None,
) -> TargetT:
    """Copy ``fields`` from ``source`` into ``target`` where ``target`` has no value.

    Existing non-None values in ``target`` are never replaced, and a field
    missing from ``source`` is never introduced.

    Returns:
        The same ``target`` mapping, updated in place.
    """
    if source is None or not fields:
        return target

    for name in fields:
        if target.get(name) is not None:
            continue
        value = source.get(name)
        if value is not None:
            target[name] = value
    return target


def join_artists(artists: Iterable[TextNode] | None) -> str | None:
    """Join artist element labels with ``", "`` in input order."""

    if artists is None:
        return None

    labels = [artist.text_content for artist in artists]
    if not labels:
        return None
    return ", ".join(labels)


__all__ = ["TextNode", "fill_empty_fields", "join_artists"]
