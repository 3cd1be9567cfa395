"""Value codecs for fields whose wire form differs from their Python form.

Durations travel as whole milliseconds or as ``HH:MM:SS.mmm`` time codes,
audio track states as a mapping of track numbers to booleans, nested
objects as strings holding JSON, and colours as a single ABGR integer.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

__all__ = [
    "CodecError",
    "Rgba",
    "millis_to_json",
    "millis_from_json",
    "optional_millis_to_json",
    "optional_millis_from_json",
    "timecode_to_json",
    "timecode_from_json",
    "audio_tracks_to_json",
    "audio_tracks_from_json",
    "json_string_to_json",
    "json_string_from_json",
    "rgba_to_abgr",
    "rgba_from_abgr",
]

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_U32_MAX = 2**32 - 1
_CONVERSION_FAILED = "out of range integral type conversion attempted"
_TRACK_KEYS = ("1", "2", "3", "4", "5", "6")
_INTEGER = re.compile(r"[+-]?[0-9]+")


class CodecError(ValueError):
    """Raised when a value cannot be encoded or decoded."""


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


def _trunc_rem(numerator: int, denominator: int) -> int:
    """Remainder matching division rounded toward zero."""
    return numerator - denominator * _trunc_div(numerator, denominator)


def _total_microseconds(value: timedelta) -> int:
    if not isinstance(value, timedelta):
        raise CodecError(f"invalid type: expected a duration, got {type(value).__name__}")
    return (value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds


def _whole_millis(value: timedelta) -> int:
    return _trunc_div(_total_microseconds(value), 1_000)


def millis_to_json(value: timedelta) -> int:
    """Encode a duration as whole milliseconds."""
    millis = _whole_millis(value)
    if not _I64_MIN <= millis <= _I64_MAX:
        raise CodecError(f"value is too large for an i64: {_CONVERSION_FAILED}")
    return millis


def millis_from_json(value: Any) -> timedelta:
    """Decode a duration given in whole milliseconds."""
    if not _is_int(value):
        raise CodecError(
            f"invalid type: {type(value).__name__}, expected a duration in milliseconds"
        )
    if not _I64_MIN <= value <= _I64_MAX:
        raise CodecError(f"value is too large for an i64: {_CONVERSION_FAILED}")
    try:
        return timedelta(milliseconds=value)
    except OverflowError as exc:
        raise CodecError(f"duration out of range: {value} ms") from exc


def optional_millis_to_json(value: timedelta | None) -> int | None:
    """Encode an optional duration as whole milliseconds or ``None``."""
    return None if value is None else millis_to_json(value)


def optional_millis_from_json(value: Any) -> timedelta | None:
    """Decode an optional duration given in whole milliseconds."""
    return None if value is None else millis_from_json(value)


def timecode_to_json(value: timedelta) -> str:
    """Encode a duration as ``HH:MM:SS.mmm``."""
    micros = _total_microseconds(value)
    whole_secs = _trunc_div(micros, 1_000_000)
    millis = _trunc_div(_trunc_rem(micros, 1_000_000), 1_000)
    hours = _trunc_div(whole_secs, 3600)
    minutes = _trunc_div(_trunc_rem(whole_secs, 3600), 60)
    seconds = _trunc_rem(_trunc_rem(whole_secs, 3600), 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise CodecError("invalid integer")
    number = int(text)
    if not _I64_MIN <= number <= _I64_MAX:
        raise CodecError("invalid integer")
    return number


def timecode_from_json(text: Any) -> timedelta:
    """Decode a duration formatted as ``HH:MM:SS.mmm``."""
    if not isinstance(text, str):
        raise CodecError(
            f"invalid type: {type(text).__name__}, "
            "expected a duration formatted as 'HH:MM:SS.mmm'"
        )
    parts = text.split(":", 2)
    hours = _parse_int(parts[0])
    if len(parts) < 2:
        raise CodecError("minutes missing")
    minutes = _parse_int(parts[1])
    if len(parts) < 3:
        raise CodecError("seconds missing")
    sub = parts[2].split(".", 1)
    seconds = _parse_int(sub[0])
    if len(sub) < 2:
        raise CodecError("milliseconds missing")
    millis = _parse_int(sub[1])
    try:
        return (
            timedelta(hours=hours)
            + timedelta(minutes=minutes)
            + timedelta(seconds=seconds)
            + timedelta(milliseconds=millis)
        )
    except OverflowError as exc:
        raise CodecError(f"duration out of range: {text}") from exc


def audio_tracks_to_json(tracks: Sequence[bool | None]) -> dict[str, bool]:
    """Encode six optional track states, leaving out the unset ones."""
    if len(tracks) != len(_TRACK_KEYS):
        raise CodecError(f"expected {len(_TRACK_KEYS)} audio tracks, got {len(tracks)}")
    return {key: bool(state) for key, state in zip(_TRACK_KEYS, tracks) if state is not None}


def audio_tracks_from_json(mapping: Any) -> list[bool]:
    """Decode a mapping of track numbers ``"1"`` to ``"6"`` into six states."""
    if not isinstance(mapping, Mapping):
        raise CodecError(
            f"invalid type: {type(mapping).__name__}, expected audio tracks as key-value pairs"
        )
    tracks = [False] * len(_TRACK_KEYS)
    for key, state in mapping.items():
        if key not in _TRACK_KEYS:
            raise CodecError(f"track index `{key}` is out of range")
        if not isinstance(state, bool):
            raise CodecError(f"invalid type: {type(state).__name__}, expected a boolean")
        tracks[int(key) - 1] = state
    return tracks


def json_string_to_json(value: Any) -> str:
    """Encode a value as a compact JSON string."""
    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise CodecError(str(exc)) from exc


def json_string_from_json(text: Any) -> Any:
    """Decode a string that holds JSON."""
    if not isinstance(text, str):
        raise CodecError(
            f"invalid type: {type(text).__name__}, expected string value that contains JSON"
        )
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise CodecError("failed deserializing JSON string") from exc


@dataclass(frozen=True)
class Rgba:
    """An 8-bit-per-channel colour with alpha."""

    r: int
    g: int
    b: int
    a: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            channel = getattr(self, name)
            if not _is_int(channel) or not 0 <= channel <= 255:
                raise CodecError(f"colour channel {name} must be in 0..=255, got {channel!r}")


def rgba_to_abgr(color: Rgba) -> int:
    """Pack a colour into an integer with red in the lowest byte."""
    return color.a << 24 | color.b << 16 | color.g << 8 | color.r


def rgba_from_abgr(value: Any) -> Rgba:
    """Unpack an integer with red in the lowest byte into a colour."""
    if not _is_int(value):
        raise CodecError(
            f"invalid type: {type(value).__name__}, "
            "expected RGBA color encoded as u32 integer in reverse order"
        )
    if not 0 <= value <= _U32_MAX:
        raise CodecError(f"value is too large for an u32: {_CONVERSION_FAILED}")
    return Rgba(
        r=value & 0xFF,
        g=value >> 8 & 0xFF,
        b=value >> 16 & 0xFF,
        a=value >> 24 & 0xFF,
    )