"""Response values for input, filter and scene requests."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from .codecs import (
    CodecError,
    audio_tracks_from_json,
    millis_from_json,
    optional_millis_from_json,
)
from .protocol import ProtocolError

__all__ = [
    "Input",
    "SpecialInputs",
    "InputSettings",
    "InputVolume",
    "ListPropertyItem",
    "SourceFilter",
    "Scene",
    "Scenes",
    "SceneTransitionOverride",
    "parse_input_list",
    "parse_input_kinds",
    "parse_default_input_settings",
    "parse_input_muted",
    "parse_audio_balance",
    "parse_audio_sync_offset",
    "parse_audio_monitor_type",
    "parse_audio_tracks",
    "parse_property_items",
    "parse_scene_item_id",
    "parse_filter_list",
    "parse_default_filter_settings",
    "parse_group_list",
    "parse_current_program_scene",
    "parse_current_preview_scene",
]

_U32_MAX = 2**32 - 1
_USIZE_MAX = 2**64 - 1
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


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


def _integer(data: Mapping[str, Any], key: str, low: int, high: int) -> int:
    value = _field(data, key)
    if isinstance(value, bool) or not isinstance(value, int) or not low <= value <= high:
        raise ProtocolError(f"field `{key}`: expected an integer in {low}..={high}")
    return value


def _sequence(data: Mapping[str, Any], key: str) -> list[Any]:
    value = _field(data, key)
    if not isinstance(value, list):
        raise ProtocolError(f"field `{key}`: expected a sequence")
    return value


def _string_list(data: Mapping[str, Any], key: str) -> list[str]:
    values = _sequence(data, key)
    if not all(isinstance(value, str) for value in values):
        raise ProtocolError(f"field `{key}`: expected a sequence of strings")
    return list(values)


def _decode(key: str, decoder: Callable[[Any], Any], value: Any) -> Any:
    try:
        return decoder(value)
    except CodecError as exc:
        raise ProtocolError(f"field `{key}`: {exc}") from exc


@dataclass(frozen=True)
class Input:
    """An input as listed by the server."""

    name: str
    kind: str
    unversioned_kind: str

    @classmethod
    def from_json(cls, data: Any) -> Input:
        data = _object(data, "struct Input")
        return cls(
            name=_string(data, "inputName"),
            kind=_string(data, "inputKind"),
            unversioned_kind=_string(data, "unversionedInputKind"),
        )


@dataclass(frozen=True)
class SpecialInputs:
    """Names of the desktop audio and microphone inputs, where present."""

    desktop1: str | None = None
    desktop2: str | None = None
    mic1: str | None = None
    mic2: str | None = None
    mic3: str | None = None
    mic4: str | None = None

    @classmethod
    def from_json(cls, data: Any) -> SpecialInputs:
        data = _object(data, "struct SpecialInputs")
        names = ("desktop1", "desktop2", "mic1", "mic2", "mic3", "mic4")
        return cls(**{name: _optional_string(data, name) for name in names})


@dataclass(frozen=True)
class InputSettings:
    """Settings of an input together with its kind."""

    settings: Any
    kind: str

    @classmethod
    def from_json(cls, data: Any) -> InputSettings:
        data = _object(data, "struct InputSettings")
        return cls(settings=_field(data, "inputSettings"), kind=_string(data, "inputKind"))


@dataclass(frozen=True)
class InputVolume:
    """Volume of an input as a multiplier and in decibels."""

    mul: float
    db: float

    @classmethod
    def from_json(cls, data: Any) -> InputVolume:
        data = _object(data, "struct InputVolume")
        return cls(mul=_number(data, "inputVolumeMul"), db=_number(data, "inputVolumeDb"))


@dataclass(frozen=True)
class ListPropertyItem:
    """One item of an input's list property."""

    name: str
    enabled: bool
    value: Any

    @classmethod
    def from_json(cls, data: Any) -> ListPropertyItem:
        data = _object(data, "struct ListPropertyItem")
        return cls(
            name=_string(data, "itemName"),
            enabled=_boolean(data, "itemEnabled"),
            value=_field(data, "itemValue"),
        )


@dataclass(frozen=True)
class SourceFilter:
    """A filter attached to a source."""

    enabled: bool
    index: int
    kind: str
    name: str
    settings: Any

    @classmethod
    def from_json(cls, data: Any) -> SourceFilter:
        data = _object(data, "struct SourceFilter")
        name = data.get("filterName", "")
        if not isinstance(name, str):
            raise ProtocolError("field `filterName`: expected a string")
        return cls(
            enabled=_boolean(data, "filterEnabled"),
            index=_integer(data, "filterIndex", 0, _U32_MAX),
            kind=_string(data, "filterKind"),
            name=name,
            settings=_field(data, "filterSettings"),
        )


@dataclass(frozen=True)
class Scene:
    """A scene and its position in the scene list."""

    name: str
    index: int

    @classmethod
    def from_json(cls, data: Any) -> Scene:
        data = _object(data, "struct Scene")
        return cls(
            name=_string(data, "sceneName"),
            index=_integer(data, "sceneIndex", 0, _USIZE_MAX),
        )


@dataclass(frozen=True)
class Scenes:
    """All scenes with the current program and preview scene."""

    current_program_scene_name: str | None
    current_preview_scene_name: str | None
    scenes: list[Scene]

    @classmethod
    def from_json(cls, data: Any) -> Scenes:
        data = _object(data, "struct Scenes")
        return cls(
            current_program_scene_name=_optional_string(data, "currentProgramSceneName"),
            current_preview_scene_name=_optional_string(data, "currentPreviewSceneName"),
            scenes=[Scene.from_json(item) for item in _sequence(data, "scenes")],
        )


@dataclass(frozen=True)
class SceneTransitionOverride:
    """Transition override configured for a scene."""

    name: str | None
    duration: timedelta | None

    @classmethod
    def from_json(cls, data: Any) -> SceneTransitionOverride:
        data = _object(data, "struct SceneTransitionOverride")
        return cls(
            name=_optional_string(data, "transitionName"),
            duration=_decode(
                "transitionDuration",
                optional_millis_from_json,
                _field(data, "transitionDuration"),
            ),
        )


def parse_input_list(data: Any) -> list[Input]:
    data = _object(data, "struct Inputs")
    return [Input.from_json(item) for item in _sequence(data, "inputs")]


def parse_input_kinds(data: Any) -> list[str]:
    return _string_list(_object(data, "struct InputKinds"), "inputKinds")


def parse_default_input_settings(data: Any) -> Any:
    return _field(_object(data, "struct DefaultInputSettings"), "defaultInputSettings")


def parse_input_muted(data: Any) -> bool:
    return _boolean(_object(data, "struct InputMuted"), "inputMuted")


def parse_audio_balance(data: Any) -> float:
    return _number(_object(data, "struct AudioBalance"), "inputAudioBalance")


def parse_audio_sync_offset(data: Any) -> timedelta:
    data = _object(data, "struct AudioSyncOffset")
    key = "inputAudioSyncOffset"
    return _decode(key, millis_from_json, _field(data, key))


def parse_audio_monitor_type(data: Any) -> str:
    """Return the monitor type's wire identifier."""
    return _string(_object(data, "struct AudioMonitorType"), "monitorType")


def parse_audio_tracks(data: Any) -> list[bool]:
    data = _object(data, "struct AudioTracks")
    key = "inputAudioTracks"
    return _decode(key, audio_tracks_from_json, _field(data, key))


def parse_property_items(data: Any) -> list[ListPropertyItem]:
    data = _object(data, "struct ListPropertyItems")
    return [ListPropertyItem.from_json(item) for item in _sequence(data, "propertyItems")]


def parse_scene_item_id(data: Any) -> int:
    return _integer(_object(data, "struct SceneItemId"), "sceneItemId", _I64_MIN, _I64_MAX)


def parse_filter_list(data: Any) -> list[SourceFilter]:
    data = _object(data, "struct Filters")
    return [SourceFilter.from_json(item) for item in _sequence(data, "filters")]


def parse_default_filter_settings(data: Any) -> Any:
    return _field(_object(data, "struct DefaultFilterSettings"), "defaultFilterSettings")


def parse_group_list(data: Any) -> list[str]:
    return _string_list(_object(data, "struct Groups"), "groups")


def parse_current_program_scene(data: Any) -> str:
    return _string(_object(data, "struct CurrentProgramScene"), "currentProgramSceneName")


def parse_current_preview_scene(data: Any) -> str:
    return _string(_object(data, "struct CurrentPreviewScene"), "currentPreviewSceneName")