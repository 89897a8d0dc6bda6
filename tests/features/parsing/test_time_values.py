"""
Summary: Tests for time string and numeric time helpers.
Why: Players report times in many shapes and invalid numbers must not leak through.
"""

from __future__ import annotations

import math
from fractions import Fraction

import pytest

from playmeta.features.parsing.domain.time_values import (
    escape_bad_time_values,
    split_time_info,
    string_to_seconds,
)
from playmeta.shared.track_info import TimeInfo


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("01:10:30 ", 4230),
        ("01:10:30", 4230),
        ("-01:10", -70),
        ("05:20", 320),
        ("20", 20),
        ("", 0),
        (None, 0),
        (math.nan, 0),
        ("1:2:3:4", 0),
        ("ab:cd", 0),
        ("--10", 0),
        ("10:", 0),
    ],
    ids=[
        "trailing-space",
        "hh-mm-ss",
        "negative",
        "mm-ss",
        "ss",
        "empty",
        "none",
        "nan",
        "too-many-parts",
        "non-numeric",
        "double-sign",
        "empty-component",
    ],
)
def test_string_to_seconds(value: object, expected: int) -> None:
    assert string_to_seconds(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (3.25, 3),
        (3, 3),
        (2.5, 3),
        (math.nan, None),
        (math.inf, None),
        (-math.inf, None),
        ([], None),
        ("3", None),
        (True, None),
        (10**400, 10**400),
        (Fraction(7, 2), 4),
        (Fraction(10**400, 3), None),
    ],
    ids=[
        "float",
        "int",
        "half",
        "nan",
        "inf",
        "-inf",
        "list",
        "string",
        "bool",
        "int-beyond-float-range",
        "fraction",
        "fraction-beyond-float-range",
    ],
)
def test_escape_bad_time_values(value: object, expected: int | None) -> None:
    assert escape_bad_time_values(value) == expected


class TestSplitTimeInfo:
    """Tests for ``split_time_info``."""

    def test_default_separator(self) -> None:
        assert split_time_info("01:00 / 03:00") == TimeInfo(current_time=60, duration=180)

    def test_explicit_separator(self) -> None:
        assert split_time_info("01:00 / 03:00", ["/"], swap=False) == TimeInfo(60, 180)

    def test_swapped_values(self) -> None:
        assert split_time_info("03:00 / 01:00", ["/"], swap=True) == TimeInfo(60, 180)

    def test_malformed_text(self) -> None:
        assert split_time_info("01:10:30", ["/"]) == TimeInfo(None, None)
