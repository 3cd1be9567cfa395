from datetime import timedelta

import pytest

from obswire.codecs import (
    CodecError,
    Rgba,
    audio_tracks_from_json,
    audio_tracks_to_json,
    json_string_from_json,
    json_string_to_json,
    millis_from_json,
    millis_to_json,
    optional_millis_from_json,
    optional_millis_to_json,
    rgba_from_abgr,
    rgba_to_abgr,
    timecode_from_json,
    timecode_to_json,
)

U64_MAX = 2**64 - 1


# audio tracks


def test_audio_tracks_serialize_skips_unset():
    encoded = audio_tracks_to_json([True, True, None, None, False, True])
    assert encoded == {"1": True, "2": True, "5": False, "6": True}
    assert list(encoded) == ["1", "2", "5", "6"]


def test_audio_tracks_deserialize_mixed():
    mapping = {"1": True, "2": True, "3": False, "4": False, "5": False, "6": True}
    assert audio_tracks_from_json(mapping) == [True, True, False, False, False, True]


def test_audio_tracks_deserialize_all_true():
    mapping = {str(i): True for i in range(1, 7)}
    assert audio_tracks_from_json(mapping) == [True] * 6


def test_audio_tracks_missing_keys_default_false():
    assert audio_tracks_from_json({"3": True}) == [False, False, True, False, False, False]


def test_audio_tracks_out_of_range():
    with pytest.raises(CodecError, match="track index `10` is out of range"):
        audio_tracks_from_json({"10": True})


def test_audio_tracks_wrong_length():
    with pytest.raises(CodecError):
        audio_tracks_to_json([True, False])


# milliseconds


def test_millis_roundtrip():
    assert millis_to_json(timedelta(milliseconds=150)) == 150
    assert millis_from_json(150) == timedelta(milliseconds=150)


def test_millis_truncates_sub_millisecond():
    assert millis_to_json(timedelta(microseconds=1999)) == 1
    assert millis_to_json(timedelta(microseconds=-1999)) == -1


def test_millis_too_large():
    with pytest.raises(CodecError) as info:
        millis_from_json(U64_MAX)
    assert str(info.value) == (
        "value is too large for an i64: out of range integral type conversion attempted"
    )


def test_millis_rejects_non_integer():
    with pytest.raises(CodecError):
        millis_from_json("150")


def test_optional_millis_roundtrip():
    assert optional_millis_to_json(timedelta(milliseconds=150)) == 150
    assert optional_millis_from_json(150) == timedelta(milliseconds=150)
    assert optional_millis_to_json(None) is None
    assert optional_millis_from_json(None) is None


# time codes


def test_timecode_roundtrip():
    value = (
        timedelta(hours=2)
        + timedelta(minutes=15)
        + timedelta(seconds=4)
        + timedelta(milliseconds=310)
    )
    assert timecode_to_json(value) == "02:15:04.310"
    assert timecode_from_json("02:15:04.310") == value


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("02", "minutes missing"),
        ("02:15", "seconds missing"),
        ("02:15:04", "milliseconds missing"),
        ("aa:15:04.310", "invalid integer"),
        ("", "invalid integer"),
    ],
)
def test_timecode_errors(text, message):
    with pytest.raises(CodecError, match=message):
        timecode_from_json(text)


# JSON strings


def test_json_string_roundtrip():
    assert json_string_to_json({"value": 5}) == '{"value":5}'
    assert json_string_from_json('{"value":5}') == {"value": 5}


def test_json_string_invalid():
    with pytest.raises(CodecError, match="failed deserializing JSON string"):
        json_string_from_json("")


# colours


def test_rgba_roundtrip():
    color = Rgba(1, 2, 3, 4)
    assert rgba_to_abgr(color) == 0x04030201
    assert rgba_from_abgr(0x04030201) == color


def test_rgba_too_large():
    with pytest.raises(CodecError, match="value is too large for an u32"):
        rgba_from_abgr(2**32)


def test_rgba_channel_range():
    with pytest.raises(CodecError):
        Rgba(256, 0, 0, 0)