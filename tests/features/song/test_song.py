"""
Summary: Exercise the song entity's layered reads, identity and lifecycle resets.
Why: Every consumer relies on these getters and on ids staying stable.
"""

from __future__ import annotations

import json
from dataclasses import dataclass

import pytest

from playmeta.features.song import (
    ConnectorPort,
    ParsedData,
    ProcessedFieldError,
    Song,
)


@dataclass(frozen=True)
class _Connector:
    label: str = "Example"


CONNECTOR = _Connector()


def make_song(**fields: object) -> Song:
    return Song(ParsedData(**fields), CONNECTOR)  # pyright: ignore[reportArgumentType]


class TestFieldPrecedence:
    """Processed values win for text fields, parsed values win for duration and artwork."""

    def test_parsed_values_are_read_back(self) -> None:
        song = make_song(artist="Artist", track="Track", album="Album", album_artist="AA")

        assert song.get_artist() == "Artist"
        assert song.get_track() == "Track"
        assert song.get_album() == "Album"
        assert song.get_album_artist() == "AA"

    def test_processed_text_fields_override_parsed(self) -> None:
        song = make_song(artist="Artist", track="Track", album="Album")
        song.processed.artist = "Fixed Artist"
        song.processed.track = "Fixed Track"
        song.processed.album = "Fixed Album"
        song.processed.album_artist = "Fixed AA"

        assert song.get_artist() == "Fixed Artist"
        assert song.get_track() == "Fixed Track"
        assert song.get_album() == "Fixed Album"
        assert song.get_album_artist() == "Fixed AA"

    def test_empty_strings_read_as_none(self) -> None:
        song = make_song(artist="", track="", album="")

        assert song.get_artist() is None
        assert song.get_track() is None
        assert song.get_album() is None

    def test_parsed_duration_beats_processed(self) -> None:
        song = make_song(duration=100)
        song.processed.duration = 250

        assert song.get_duration() == 100

    def test_processed_duration_fills_missing_parsed(self) -> None:
        song = make_song()
        song.processed.duration = 250

        assert song.get_duration() == 250

    def test_track_art_prefers_parsed(self) -> None:
        song = make_song(track_art="parsed.png")
        song.metadata.track_art_url = "found.png"

        assert song.get_track_art() == "parsed.png"

    def test_track_art_falls_back_to_metadata(self) -> None:
        song = make_song()
        song.metadata.track_art_url = "found.png"

        assert song.get_track_art() == "found.png"

    def test_static_fields(self) -> None:
        song = make_song(origin_url="https://example.com/", unique_id="id-1")

        assert song.get_origin_url() == "https://example.com/"
        assert song.get_unique_id() == "id-1"
        assert song.metadata.label == "Example"
        assert isinstance(song.metadata.start_timestamp, int)

    def test_artist_track_string(self) -> None:
        assert make_song(artist="A", track="T").get_artist_track_string() == "A — T"
        assert make_song(artist="A").get_artist_track_string() is None


class TestProcessedLayer:
    """The processed layer can be written but never cleared field by field."""

    def test_clearing_a_set_field_raises(self) -> None:
        song = make_song()
        song.processed.artist = "Artist"

        with pytest.raises(ProcessedFieldError):
            song.processed.artist = None

    def test_unknown_field_is_rejected(self) -> None:
        song = make_song()

        with pytest.raises(AttributeError):
            song.processed.genre = "Rock"  # pyright: ignore[reportAttributeAccessIssue]

    def test_parsed_layer_is_immutable(self) -> None:
        song = make_song(artist="Artist")

        with pytest.raises(AttributeError):
            song.parsed.artist = "Other"  # pyright: ignore[reportAttributeAccessIssue]


class TestIdentity:
    """Unique id generation and equality."""

    def test_hash_of_artist_track_album(self) -> None:
        song = make_song(artist="Artist", track="Title", album="Album")

        assert song.get_unique_id() == "8021e94350ed56f71a673b08eaea0888"

    def test_explicit_id_is_kept(self) -> None:
        song = make_song(artist="Artist", track="Title", unique_id="explicit")

        assert song.get_unique_id() == "explicit"

    def test_no_id_without_artist_or_track(self) -> None:
        assert make_song(track="Title").get_unique_id() is None

    def test_id_does_not_follow_corrections(self) -> None:
        song = make_song(artist="Artist", track="Title", album="Album")
        song.processed.artist = "Someone Else"

        assert song.get_unique_id() == "8021e94350ed56f71a673b08eaea0888"

    def test_equal_songs(self) -> None:
        first = make_song(artist="Artist", track="Title", album="Album")
        second = make_song(artist="Artist", track="Title", album="Album")

        assert first.equals(second)
        assert first == second
        assert hash(first) == hash(second)

    def test_different_songs(self) -> None:
        first = make_song(artist="Artist", track="Title")
        second = make_song(artist="Artist", track="Other")

        assert not first.equals(second)

    def test_same_explicit_id_is_equal(self) -> None:
        first = make_song(artist="Artist", track="Title", album="Album", unique_id="uniqueId1")
        second = make_song(artist="Artist", track="Title", album="Album", unique_id="uniqueId1")

        assert first.equals(second)
        assert first == second

    def test_explicit_id_alone_tells_songs_apart(self) -> None:
        first = make_song(artist="Artist", track="Title", album="Album", unique_id="uniqueId1")
        second = make_song(artist="Artist", track="Title", album="Album", unique_id="uniqueId3")

        assert not first.equals(second)
        assert first != second

    def test_song_equals_itself(self) -> None:
        song = make_song(artist="Artist", track="Title")

        assert song.equals(song)
        assert song == song

    @pytest.mark.parametrize("other", [None, "song", 42], ids=["none", "str", "int"])
    def test_not_equal_to_other_types(self, other: object) -> None:
        song = make_song(artist="Artist", track="Title")

        assert not song.equals(other)
        assert song != other


class TestValidity:
    """Tests for ``is_valid`` and ``is_empty``."""

    def test_new_song_is_not_valid(self) -> None:
        assert not make_song(artist="Artist", track="Track").is_valid()

    def test_valid_flag(self) -> None:
        song = make_song()
        song.flags.is_valid = True

        assert song.is_valid()

    def test_user_correction_makes_valid(self) -> None:
        song = make_song()
        song.flags.is_corrected_by_user = True

        assert song.is_valid()

    @pytest.mark.parametrize(
        ("fields", "expected"),
        [
            ({}, True),
            ({"artist": "Artist"}, True),
            ({"track": "Track"}, True),
            ({"artist": "Artist", "track": "Track"}, False),
        ],
        ids=["nothing", "artist-only", "track-only", "complete"],
    )
    def test_is_empty(self, fields: dict[str, str], expected: bool) -> None:
        assert make_song(**fields).is_empty() is expected

    def test_corrections_fill_empty_song(self) -> None:
        song = make_song(track="Track")
        song.processed.artist = "Artist"

        assert not song.is_empty()


class TestLoveStatus:
    """Tests for ``set_love_status``."""

    def test_initially_unknown(self) -> None:
        assert make_song().metadata.userloved is None

    def test_first_value_is_stored(self) -> None:
        song = make_song()
        song.set_love_status(True)

        assert song.metadata.userloved is True

    def test_false_sticks_without_force(self) -> None:
        song = make_song()
        song.set_love_status(False)
        song.set_love_status(True)

        assert song.metadata.userloved is False

    def test_true_then_false_ends_false(self) -> None:
        song = make_song()
        song.set_love_status(True)
        song.set_love_status(False)

        assert song.metadata.userloved is False

    def test_force_overrides(self) -> None:
        song = make_song()
        song.set_love_status(False)
        song.set_love_status(True, force=True)

        assert song.metadata.userloved is True


class TestCorrections:
    """Tests for ``correct_by_user``."""

    def test_applies_values_and_flag(self) -> None:
        song = make_song(artist="Artist", track="Track")
        song.correct_by_user(artist="Fixed", album="Album")

        assert song.get_artist() == "Fixed"
        assert song.get_album() == "Album"
        assert song.flags.is_corrected_by_user
        assert song.is_valid()

    def test_empty_value_is_skipped(self) -> None:
        song = make_song(artist="Artist", track="Track")
        song.correct_by_user(artist="")

        assert song.get_artist() == "Artist"

    def test_rejects_non_user_fields(self) -> None:
        song = make_song()

        with pytest.raises(ProcessedFieldError):
            song.correct_by_user(duration="10")

        assert not song.flags.is_corrected_by_user


class TestResets:
    """Tests for ``reset_data`` and ``reset_info``."""

    def test_reset_data_clears_flags_and_metadata(self) -> None:
        song = make_song(artist="Artist", track="Track")
        song.processed.album = "Album"
        song.flags.is_valid = True
        song.metadata.userloved = True
        song.metadata.track_art_url = "found.png"

        song.reset_data()

        assert not song.flags.is_valid
        assert song.metadata.userloved is None
        assert song.metadata.track_art_url is None
        assert song.metadata.label == "Example"
        assert song.get_album() == "Album"

    def test_reset_info_drops_corrections(self) -> None:
        song = make_song(artist="Artist", track="Track")
        song.processed.artist = "Fixed"

        song.reset_info()

        assert song.get_artist() == "Artist"
        assert song.processed.artist is None


class TestSerialization:
    """Tests for cloneable data and string output."""

    def test_cloneable_data_is_independent(self) -> None:
        song = make_song(artist="Artist", track="Track")
        data = song.get_cloneable_data()

        data["processed"]["artist"] = "Changed"
        data["metadata"]["label"] = "Changed"

        assert song.get_artist() == "Artist"
        assert song.metadata.label == "Example"

    def test_cloneable_data_layers(self) -> None:
        data = make_song(artist="Artist").get_cloneable_data()

        assert set(data) == {"parsed", "processed", "flags", "metadata"}
        assert data["parsed"]["artist"] == "Artist"

    def test_str_is_json_of_layers(self) -> None:
        song = make_song(artist="Åsa", track="Track")

        decoded = json.loads(str(song))

        assert decoded == song.get_cloneable_data()
        assert "Åsa" in str(song)

    def test_repr_mentions_id(self) -> None:
        song = make_song(unique_id="abc")

        assert "abc" in repr(song)


def test_field_name_lists() -> None:
    assert Song.USER_FIELDS == ("artist", "track", "album", "album_artist")
    assert "unique_id" in Song.BASE_FIELDS
    assert "track_art" in Song.BASE_FIELDS


def test_connector_satisfies_port() -> None:
    assert isinstance(CONNECTOR, ConnectorPort)
