"""Builders for input and filter requests.

Each builder returns a :class:`~obswire.protocol.RequestPayload` ready to be
wrapped in a :class:`~obswire.protocol.Request` or a request batch.
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from datetime import timedelta
from typing import Any

from .codecs import audio_tracks_to_json, millis_to_json
from .protocol import RequestPayload

__all__ = [
    "get_input_list",
    "get_input_kind_list",
    "get_special_inputs",
    "get_input_default_settings",
    "get_input_settings",
    "set_input_settings",
    "get_input_mute",
    "set_input_mute",
    "toggle_input_mute",
    "get_input_volume",
    "set_input_volume",
    "set_input_name",
    "create_input",
    "remove_input",
    "get_input_audio_balance",
    "set_input_audio_balance",
    "get_input_audio_sync_offset",
    "set_input_audio_sync_offset",
    "get_input_audio_monitor_type",
    "set_input_audio_monitor_type",
    "get_input_audio_tracks",
    "set_input_audio_tracks",
    "get_input_properties_list_property_items",
    "press_input_properties_button",
    "get_source_filter_list",
    "get_source_filter_default_settings",
    "create_source_filter",
    "remove_source_filter",
    "set_source_filter_name",
    "get_source_filter",
    "set_source_filter_index",
    "set_source_filter_settings",
    "set_source_filter_enabled",
]

_U32_MAX = 2**32 - 1


def _payload(request_type: str, data: dict[str, Any] | None = None) -> RequestPayload:
    return RequestPayload(request_type=request_type, request_data=data)


def _enum_value(value: Any) -> Any:
    return value.value if isinstance(value, enum.Enum) else value


def _check_u32(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _U32_MAX:
        raise ValueError(f"{name} must be an integer in 0..={_U32_MAX}, got {value!r}")


# Inputs


def get_input_list(kind: str | None = None) -> RequestPayload:
    """List inputs, optionally restricted to one input kind."""
    data: dict[str, Any] = {}
    if kind is not None:
        data["inputKind"] = kind
    return _payload("GetInputList", data)


def get_input_kind_list(unversioned: bool = False) -> RequestPayload:
    return _payload("GetInputKindList", {"unversioned": unversioned})


def get_special_inputs() -> RequestPayload:
    return _payload("GetSpecialInputs")


def get_input_default_settings(kind: str) -> RequestPayload:
    return _payload("GetInputDefaultSettings", {"inputKind": kind})


def get_input_settings(name: str) -> RequestPayload:
    return _payload("GetInputSettings", {"inputName": name})


def set_input_settings(input: str, settings: Any, overlay: bool | None = None) -> RequestPayload:
    """Apply settings to an input, on top of the current ones or over its defaults."""
    data: dict[str, Any] = {"inputName": input, "inputSettings": settings}
    if overlay is not None:
        data["overlay"] = overlay
    return _payload("SetInputSettings", data)


def get_input_mute(name: str) -> RequestPayload:
    return _payload("GetInputMute", {"inputName": name})


def set_input_mute(name: str, muted: bool) -> RequestPayload:
    return _payload("SetInputMute", {"inputName": name, "inputMuted": muted})


def toggle_input_mute(name: str) -> RequestPayload:
    return _payload("ToggleInputMute", {"inputName": name})


def get_input_volume(name: str) -> RequestPayload:
    return _payload("GetInputVolume", {"inputName": name})


def set_input_volume(
    name: str, *, mul: float | None = None, db: float | None = None
) -> RequestPayload:
    """Set an input's volume, given either as a multiplier or in decibels."""
    if (mul is None) == (db is None):
        raise ValueError("exactly one of mul or db must be given")
    key, value = ("inputVolumeMul", mul) if mul is not None else ("inputVolumeDb", db)
    return _payload("SetInputVolume", {"inputName": name, key: float(value)})


def set_input_name(name: str, new: str) -> RequestPayload:
    return _payload("SetInputName", {"inputName": name, "newInputName": new})


def create_input(
    scene: str,
    input: str,
    kind: str,
    settings: Any = None,
    enabled: bool | None = None,
) -> RequestPayload:
    """Create an input and add it to a scene as a scene item."""
    data: dict[str, Any] = {"sceneName": scene, "inputName": input, "inputKind": kind}
    if settings is not None:
        data["inputSettings"] = settings
    if enabled is not None:
        data["sceneItemEnabled"] = enabled
    return _payload("CreateInput", data)


def remove_input(name: str) -> RequestPayload:
    return _payload("RemoveInput", {"inputName": name})


def get_input_audio_balance(name: str) -> RequestPayload:
    return _payload("GetInputAudioBalance", {"inputName": name})


def set_input_audio_balance(name: str, balance: float) -> RequestPayload:
    """Set the audio balance; the server expects a value in ``0.0..=1.0``."""
    return _payload(
        "SetInputAudioBalance", {"inputName": name, "inputAudioBalance": float(balance)}
    )


def get_input_audio_sync_offset(name: str) -> RequestPayload:
    return _payload("GetInputAudioSyncOffset", {"inputName": name})


def set_input_audio_sync_offset(name: str, offset: timedelta) -> RequestPayload:
    return _payload(
        "SetInputAudioSyncOffset",
        {"inputName": name, "inputAudioSyncOffset": millis_to_json(offset)},
    )


def get_input_audio_monitor_type(name: str) -> RequestPayload:
    return _payload("GetInputAudioMonitorType", {"inputName": name})


def set_input_audio_monitor_type(name: str, monitor_type: Any) -> RequestPayload:
    """Set the monitor type, given as its wire identifier or an enum carrying it."""
    return _payload(
        "SetInputAudioMonitorType",
        {"inputName": name, "monitorType": _enum_value(monitor_type)},
    )


def get_input_audio_tracks(name: str) -> RequestPayload:
    return _payload("GetInputAudioTracks", {"inputName": name})


def set_input_audio_tracks(name: str, tracks: Sequence[bool | None]) -> RequestPayload:
    """Set six audio track states; ``None`` leaves a track unchanged."""
    return _payload(
        "SetInputAudioTracks",
        {"inputName": name, "inputAudioTracks": audio_tracks_to_json(tracks)},
    )


def get_input_properties_list_property_items(input: str, property: str) -> RequestPayload:
    return _payload(
        "GetInputPropertiesListPropertyItems",
        {"inputName": input, "propertyName": property},
    )


def press_input_properties_button(input: str, property: str) -> RequestPayload:
    return _payload(
        "PressInputPropertiesButton", {"inputName": input, "propertyName": property}
    )


# Filters


def get_source_filter_list(source: str) -> RequestPayload:
    return _payload("GetSourceFilterList", {"sourceName": source})


def get_source_filter_default_settings(kind: str) -> RequestPayload:
    return _payload("GetSourceFilterDefaultSettings", {"filterKind": kind})


def create_source_filter(
    source: str, filter: str, kind: str, settings: Any = None
) -> RequestPayload:
    data: dict[str, Any] = {"sourceName": source, "filterName": filter, "filterKind": kind}
    if settings is not None:
        data["filterSettings"] = settings
    return _payload("CreateSourceFilter", data)


def remove_source_filter(source: str, filter: str) -> RequestPayload:
    return _payload("RemoveSourceFilter", {"sourceName": source, "filterName": filter})


def set_source_filter_name(source: str, filter: str, new_name: str) -> RequestPayload:
    return _payload(
        "SetSourceFilterName",
        {"sourceName": source, "filterName": filter, "newFilterName": new_name},
    )


def get_source_filter(source: str, filter: str) -> RequestPayload:
    return _payload("GetSourceFilter", {"sourceName": source, "filterName": filter})


def set_source_filter_index(source: str, filter: str, index: int) -> RequestPayload:
    _check_u32("index", index)
    return _payload(
        "SetSourceFilterIndex",
        {"sourceName": source, "filterName": filter, "filterIndex": index},
    )


def set_source_filter_settings(
    source: str, filter: str, settings: Any, overlay: bool | None = None
) -> RequestPayload:
    """Apply filter settings; ``overlay`` is always sent, as ``null`` when unset."""
    return _payload(
        "SetSourceFilterSettings",
        {
            "sourceName": source,
            "filterName": filter,
            "filterSettings": settings,
            "overlay": overlay,
        },
    )


def set_source_filter_enabled(source: str, filter: str, enabled: bool) -> RequestPayload:
    return _payload(
        "SetSourceFilterEnabled",
        {"sourceName": source, "filterName": filter, "filterEnabled": enabled},
    )