"""Response values for output, recording, replay buffer, streaming, virtual
camera, media input and transition requests."""

from __future__ import annotations

import enum
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from .codecs import CodecError, millis_from_json, optional_millis_from_json, timecode_from_json
from .protocol import ProtocolError

__all__ = [
    "OutputFlags",
    "Output",
    "OutputStatus",
    "RecordStatus",
    "StreamStatus",
    "MediaState",
    "MediaStatus",
    "Transition",
    "SceneTransitionList",
    "CurrentSceneTransition",
    "parse_output_list",
    "parse_output_active",
    "parse_output_settings",
    "parse_output_path",
    "parse_output_paused",
    "parse_saved_replay_path",
    "parse_transition_kinds",
    "parse_transition_cursor",
]

_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1


def _object(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ProtocolError(f"invalid type: {type(data).__name__}, expected {what}")
    return data


def _field(data: Mapping[str, Any], key: str) -> Any:
    if key not in data:
        raise ProtocolError(f"missing field `{key}`")
    return data[key]


def _string(data: Mapping[str, Any], key: str) -> str:
    value = _field(data, key)
    if not isinstance(value, str):
        raise ProtocolError(f"field `{key}`: expected a string")
    return value


def _optional_string(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ProtocolError(f"field `{key}`: expected a string")
    return value


def _boolean(data: Mapping[str, Any], key: str) -> bool:
    value = _field(data, key)
    if not isinstance(value, bool):
        raise ProtocolError(f"field `{key}`: expected a boolean")
    return value


def _number(data: Mapping[str, Any], key: str) -> float:
    value = _field(data, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ProtocolError(f"field `{key}`: expected a number")
    return float(value)


def _unsigned(data: Mapping[str, Any], key: str, maximum: int) -> int:
    value = _field(data, key)
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= maximum:
        raise ProtocolError(f"field `{key}`: expected an integer in 0..={maximum}")
    return value


def _sequence(data: Mapping[str, Any], key: str) -> list[Any]:
    value = _field(data, key)
    if not isinstance(value, list):
        raise ProtocolError(f"field `{key}`: expected a sequence")
    return value


def _decode(data: Mapping[str, Any], key: str, decoder: Callable[[Any], Any]) -> Any:
    value = _field(data, key)
    try:
        return decoder(value)
    except CodecError as exc:
        raise ProtocolError(f"field `{key}`: {exc}") from exc


@dataclass(frozen=True)
class OutputFlags:
    """Capabilities of an output."""

    audio: bool = False
    video: bool = False
    encoded: bool = False
    multi_track: bool = False
    service: bool = False

    @classmethod
    def from_json(cls, data: Any) -> OutputFlags:
        data = _object(data, "struct OutputFlags")
        return cls(
            audio=_boolean(data, "OBS_OUTPUT_AUDIO"),
            video=_boolean(data, "OBS_OUTPUT_VIDEO"),
            encoded=_boolean(data, "OBS_OUTPUT_ENCODED"),
            multi_track=_boolean(data, "OBS_OUTPUT_MULTI_TRACK"),
            service=_boolean(data, "OBS_OUTPUT_SERVICE"),
        )


@dataclass(frozen=True)
class Output:
    """An output as listed by the server."""

    name: str
    kind: str
    width: int
    height: int
    active: bool
    flags: OutputFlags

    @classmethod
    def from_json(cls, data: Any) -> Output:
        data = _object(data, "struct Output")
        return cls(
            name=_string(data, "outputName"),
            kind=_string(data, "outputKind"),
            width=_unsigned(data, "outputWidth", _U32_MAX),
            height=_unsigned(data, "outputHeight", _U32_MAX),
            active=_boolean(data, "outputActive"),
            flags=OutputFlags.from_json(_field(data, "outputFlags")),
        )


@dataclass(frozen=True)
class OutputStatus:
    """Running state of an output."""

    active: bool
    reconnecting: bool
    timecode: timedelta
    duration: timedelta
    congestion: float
    bytes: int
    skipped_frames: int
    total_frames: int

    @classmethod
    def from_json(cls, data: Any) -> OutputStatus:
        data = _object(data, "struct OutputStatus")
        return cls(**_running_status(data))


def _running_status(data: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "active": _boolean(data, "outputActive"),
        "reconnecting": _boolean(data, "outputReconnecting"),
        "timecode": _decode(data, "outputTimecode", timecode_from_json),
        "duration": _decode(data, "outputDuration", millis_from_json),
        "congestion": _number(data, "outputCongestion"),
        "bytes": _unsigned(data, "outputBytes", _U64_MAX),
        "skipped_frames": _unsigned(data, "outputSkippedFrames", _U32_MAX),
        "total_frames": _unsigned(data, "outputTotalFrames", _U32_MAX),
    }


@dataclass(frozen=True)
class RecordStatus:
    """Running state of the recording output."""

    active: bool
    paused: bool
    timecode: timedelta
    duration: timedelta
    bytes: int

    @classmethod
    def from_json(cls, data: Any) -> RecordStatus:
        data = _object(data, "struct RecordStatus")
        return cls(
            active=_boolean(data, "outputActive"),
            paused=_boolean(data, "outputPaused"),
            timecode=_decode(data, "outputTimecode", timecode_from_json),
            duration=_decode(data, "outputDuration", millis_from_json),
            bytes=_unsigned(data, "outputBytes", _U64_MAX),
        )


@dataclass(frozen=True)
class StreamStatus:
    """Running state of the stream output."""

    active: bool
    reconnecting: bool
    timecode: timedelta
    duration: timedelta
    congestion: float
    bytes: int
    skipped_frames: int
    total_frames: int

    @classmethod
    def from_json(cls, data: Any) -> StreamStatus:
        data = _object(data, "struct StreamStatus")
        return cls(**_running_status(data))


class MediaState(str, enum.Enum):
    """Playback state of a media input; unknown identifiers map to ``UNKNOWN``."""

    NONE = "OBS_MEDIA_STATE_NONE"
    PLAYING = "OBS_MEDIA_STATE_PLAYING"
    OPENING = "OBS_MEDIA_STATE_OPENING"
    BUFFERING = "OBS_MEDIA_STATE_BUFFERING"
    PAUSED = "OBS_MEDIA_STATE_PAUSED"
    STOPPED = "OBS_MEDIA_STATE_STOPPED"
    ENDED = "OBS_MEDIA_STATE_ENDED"
    ERROR = "OBS_MEDIA_STATE_ERROR"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def _missing_(cls, value: object) -> MediaState | None:
        return cls.UNKNOWN if isinstance(value, str) else None


@dataclass(frozen=True)
class MediaStatus:
    """Playback state, duration and cursor of a media input."""

    state: MediaState = MediaState.NONE
    duration: timedelta | None = None
    cursor: timedelta | None = None

    @classmethod
    def from_json(cls, data: Any) -> MediaStatus:
        data = _object(data, "struct MediaStatus")
        return cls(
            state=MediaState(_string(data, "mediaState")),
            duration=_decode(data, "mediaDuration", optional_millis_from_json),
            cursor=_decode(data, "mediaCursor", optional_millis_from_json),
        )


@dataclass(frozen=True)
class Transition:
    """A scene transition as listed by the server."""

    name: str
    kind: str
    fixed: bool
    configurable: bool

    @classmethod
    def from_json(cls, data: Any) -> Transition:
        data = _object(data, "struct Transition")
        return cls(
            name=_string(data, "transitionName"),
            kind=_string(data, "transitionKind"),
            fixed=_boolean(data, "transitionFixed"),
            configurable=_boolean(data, "transitionConfigurable"),
        )


@dataclass(frozen=True)
class SceneTransitionList:
    """All scene transitions and the current one."""

    current_scene_transition_name: str | None
    current_scene_transition_kind: str | None
    transitions: list[Transition]

    @classmethod
    def from_json(cls, data: Any) -> SceneTransitionList:
        data = _object(data, "struct SceneTransitionList")
        return cls(
            current_scene_transition_name=_optional_string(data, "currentSceneTransitionName"),
            current_scene_transition_kind=_optional_string(data, "currentSceneTransitionKind"),
            transitions=[Transition.from_json(item) for item in _sequence(data, "transitions")],
        )


@dataclass(frozen=True)
class CurrentSceneTransition:
    """Details of the current scene transition."""

    name: str
    kind: str
    fixed: bool
    duration: timedelta | None
    configurable: bool
    settings: Any

    @classmethod
    def from_json(cls, data: Any) -> CurrentSceneTransition:
        data = _object(data, "struct CurrentSceneTransition")
        return cls(
            name=_string(data, "transitionName"),
            kind=_string(data, "transitionKind"),
            fixed=_boolean(data, "transitionFixed"),
            duration=_decode(data, "transitionDuration", optional_millis_from_json),
            configurable=_boolean(data, "transitionConfigurable"),
            settings=data.get("transitionSettings"),
        )


def parse_output_list(data: Any) -> list[Output]:
    data = _object(data, "struct OutputList")
    return [Output.from_json(item) for item in _sequence(data, "outputs")]


def parse_output_active(data: Any) -> bool:
    return _boolean(_object(data, "struct OutputActive"), "outputActive")


def parse_output_settings(data: Any) -> Any:
    return _field(_object(data, "struct OutputSettings"), "outputSettings")


def parse_output_path(data: Any) -> str:
    """Return the file name of a stopped recording."""
    return _string(_object(data, "struct OutputStopped"), "outputPath")


def parse_output_paused(data: Any) -> bool:
    return _boolean(_object(data, "struct OutputPaused"), "outputPaused")


def parse_saved_replay_path(data: Any) -> str:
    return _string(_object(data, "struct SavedReplayPath"), "savedReplayPath")


def parse_transition_kinds(data: Any) -> list[str]:
    values = _sequence(_object(data, "struct TransitionKinds"), "transitionKinds")
    if not all(isinstance(value, str) for value in values):
        raise ProtocolError("field `transitionKinds`: expected a sequence of strings")
    return list(values)


def parse_transition_cursor(data: Any) -> float:
    """Return the transition cursor, between ``0.0`` and ``1.0``."""
    return _number(_object(data, "struct TransitionCursor"), "transitionCursor")