"""Builders for configuration, general, hotkey, output, profile, recording,
replay buffer, scene collection, streaming, virtual camera, transition and
media input requests.

Each builder returns a :class:`~obswire.protocol.RequestPayload` ready to be
wrapped in a :class:`~obswire.protocol.Request` or a request batch.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from .codecs import millis_to_json
from .protocol import RequestPayload

__all__ = [
    "Realm",
    "VideoSettingsUpdate",
    "KeyModifiers",
    "get_persistent_data",
    "set_persistent_data",
    "get_video_settings",
    "set_video_settings",
    "get_stream_service_settings",
    "set_stream_service_settings",
    "get_record_directory",
    "get_version",
    "get_stats",
    "broadcast_custom_event",
    "call_vendor_request",
    "get_hotkey_list",
    "trigger_hotkey_by_name",
    "trigger_hotkey_by_key_sequence",
    "get_output_list",
    "get_output_status",
    "toggle_output",
    "start_output",
    "stop_output",
    "get_output_settings",
    "set_output_settings",
    "get_profile_list",
    "set_current_profile",
    "create_profile",
    "remove_profile",
    "get_profile_parameter",
    "set_profile_parameter",
    "get_record_status",
    "toggle_record",
    "start_record",
    "stop_record",
    "toggle_record_pause",
    "pause_record",
    "resume_record",
    "get_replay_buffer_status",
    "toggle_replay_buffer",
    "start_replay_buffer",
    "stop_replay_buffer",
    "save_replay_buffer",
    "get_last_replay_buffer_replay",
    "get_scene_collection_list",
    "set_current_scene_collection",
    "create_scene_collection",
    "get_stream_status",
    "toggle_stream",
    "start_stream",
    "stop_stream",
    "send_stream_caption",
    "get_virtual_cam_status",
    "toggle_virtual_cam",
    "start_virtual_cam",
    "stop_virtual_cam",
    "get_transition_kind_list",
    "get_scene_transition_list",
    "get_current_scene_transition",
    "set_current_scene_transition",
    "set_current_scene_transition_duration",
    "set_current_scene_transition_settings",
    "get_current_scene_transition_cursor",
    "trigger_studio_mode_transition",
    "set_tbar_position",
    "get_media_input_status",
    "set_media_input_cursor",
    "offset_media_input_cursor",
    "trigger_media_input_action",
]

_U32_MAX = 2**32 - 1


def _payload(request_type: str, data: dict[str, Any] | None = None) -> RequestPayload:
    return RequestPayload(request_type=request_type, request_data=data)


def _enum_value(value: Any) -> Any:
    return value.value if isinstance(value, enum.Enum) else value


def _check_u32(name: str, value: int | None) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _U32_MAX:
        raise ValueError(f"{name} must be an integer in 0..={_U32_MAX}, got {value!r}")


class Realm(str, enum.Enum):
    """Storage realm of persistent data."""

    GLOBAL = "OBS_WEBSOCKET_DATA_REALM_GLOBAL"
    PROFILE = "OBS_WEBSOCKET_DATA_REALM_PROFILE"


@dataclass(frozen=True)
class VideoSettingsUpdate:
    """Video settings to change; fields left as ``None`` stay untouched."""

    fps_numerator: int | None = None
    fps_denominator: int | None = None
    base_width: int | None = None
    base_height: int | None = None
    output_width: int | None = None
    output_height: int | None = None

    def __post_init__(self) -> None:
        for name in _VIDEO_FIELDS:
            _check_u32(name, getattr(self, name))

    @classmethod
    def from_settings(cls, settings: Any) -> VideoSettingsUpdate:
        """Build an update that sets every field of existing video settings."""
        return cls(**{name: getattr(settings, name) for name in _VIDEO_FIELDS})

    def to_json(self) -> dict[str, int]:
        return {
            key: getattr(self, name)
            for name, key in _VIDEO_FIELDS.items()
            if getattr(self, name) is not None
        }


_VIDEO_FIELDS = {
    "fps_numerator": "fpsNumerator",
    "fps_denominator": "fpsDenominator",
    "base_width": "baseWidth",
    "base_height": "baseHeight",
    "output_width": "outputWidth",
    "output_height": "outputHeight",
}


@dataclass(frozen=True)
class KeyModifiers:
    """Modifier keys held while triggering a key sequence."""

    shift: bool = False
    control: bool = False
    alt: bool = False
    command: bool = False

    def to_json(self) -> dict[str, bool]:
        return {
            "shift": self.shift,
            "control": self.control,
            "alt": self.alt,
            "command": self.command,
        }


# Config


def get_persistent_data(realm: Realm, slot_name: str) -> RequestPayload:
    return _payload(
        "GetPersistentData", {"realm": Realm(realm).value, "slotName": slot_name}
    )


def set_persistent_data(realm: Realm, slot_name: str, slot_value: Any) -> RequestPayload:
    return _payload(
        "SetPersistentData",
        {"realm": Realm(realm).value, "slotName": slot_name, "slotValue": slot_value},
    )


def get_video_settings() -> RequestPayload:
    return _payload("GetVideoSettings")


def set_video_settings(settings: VideoSettingsUpdate) -> RequestPayload:
    return _payload("SetVideoSettings", settings.to_json())


def get_stream_service_settings() -> RequestPayload:
    return _payload("GetStreamServiceSettings")


def set_stream_service_settings(service_type: str, settings: Any) -> RequestPayload:
    return _payload(
        "SetStreamServiceSettings",
        {"streamServiceType": service_type, "streamServiceSettings": settings},
    )


def get_record_directory() -> RequestPayload:
    return _payload("GetRecordDirectory")


# General


def get_version() -> RequestPayload:
    return _payload("GetVersion")


def get_stats() -> RequestPayload:
    return _payload("GetStats")


def broadcast_custom_event(event_data: Any) -> RequestPayload:
    return _payload("BroadcastCustomEvent", {"eventData": event_data})


def call_vendor_request(vendor_name: str, request_type: str, request_data: Any) -> RequestPayload:
    return _payload(
        "CallVendorRequest",
        {
            "vendorName": vendor_name,
            "requestType": request_type,
            "requestData": request_data,
        },
    )


# Hotkeys


def get_hotkey_list() -> RequestPayload:
    return _payload("GetHotkeyList")


def trigger_hotkey_by_name(name: str) -> RequestPayload:
    return _payload("TriggerHotkeyByName", {"hotkeyName": name})


def trigger_hotkey_by_key_sequence(
    key_id: str, modifiers: KeyModifiers | None = None
) -> RequestPayload:
    modifiers = modifiers if modifiers is not None else KeyModifiers()
    return _payload(
        "TriggerHotkeyByKeySequence",
        {"keyId": key_id, "keyModifiers": modifiers.to_json()},
    )


# Outputs


def get_output_list() -> RequestPayload:
    return _payload("GetOutputList")


def get_output_status(name: str) -> RequestPayload:
    return _payload("GetOutputStatus", {"outputName": name})


def toggle_output(name: str) -> RequestPayload:
    return _payload("ToggleOutput", {"outputName": name})


def start_output(name: str) -> RequestPayload:
    return _payload("StartOutput", {"outputName": name})


def stop_output(name: str) -> RequestPayload:
    return _payload("StopOutput", {"outputName": name})


def get_output_settings(name: str) -> RequestPayload:
    return _payload("GetOutputSettings", {"outputName": name})


def set_output_settings(name: str, settings: Any) -> RequestPayload:
    return _payload("SetOutputSettings", {"outputName": name, "outputSettings": settings})


# Profiles


def get_profile_list() -> RequestPayload:
    return _payload("GetProfileList")


def set_current_profile(name: str) -> RequestPayload:
    return _payload("SetCurrentProfile", {"profileName": name})


def create_profile(name: str) -> RequestPayload:
    return _payload("CreateProfile", {"profileName": name})


def remove_profile(name: str) -> RequestPayload:
    return _payload("RemoveProfile", {"profileName": name})


def get_profile_parameter(category: str, name: str) -> RequestPayload:
    return _payload(
        "GetProfileParameter", {"parameterCategory": category, "parameterName": name}
    )


def set_profile_parameter(category: str, name: str, value: str | None = None) -> RequestPayload:
    """Set a profile parameter; a value of ``None`` deletes it."""
    data: dict[str, Any] = {"parameterCategory": category, "parameterName": name}
    if value is not None:
        data["parameterValue"] = value
    return _payload("SetProfileParameter", data)


# Recording


def get_record_status() -> RequestPayload:
    return _payload("GetRecordStatus")


def toggle_record() -> RequestPayload:
    return _payload("ToggleRecord")


def start_record() -> RequestPayload:
    return _payload("StartRecord")


def stop_record() -> RequestPayload:
    return _payload("StopRecord")


def toggle_record_pause() -> RequestPayload:
    return _payload("ToggleRecordPause")


def pause_record() -> RequestPayload:
    return _payload("PauseRecord")


def resume_record() -> RequestPayload:
    return _payload("ResumeRecord")


# Replay buffer


def get_replay_buffer_status() -> RequestPayload:
    return _payload("GetReplayBufferStatus")


def toggle_replay_buffer() -> RequestPayload:
    return _payload("ToggleReplayBuffer")


def start_replay_buffer() -> RequestPayload:
    return _payload("StartReplayBuffer")


def stop_replay_buffer() -> RequestPayload:
    return _payload("StopReplayBuffer")


def save_replay_buffer() -> RequestPayload:
    return _payload("SaveReplayBuffer")


def get_last_replay_buffer_replay() -> RequestPayload:
    return _payload("GetLastReplayBufferReplay")


# Scene collections


def get_scene_collection_list() -> RequestPayload:
    return _payload("GetSceneCollectionList")


def set_current_scene_collection(name: str) -> RequestPayload:
    return _payload("SetCurrentSceneCollection", {"sceneCollectionName": name})


def create_scene_collection(name: str) -> RequestPayload:
    return _payload("CreateSceneCollection", {"sceneCollectionName": name})


# Streaming


def get_stream_status() -> RequestPayload:
    return _payload("GetStreamStatus")


def toggle_stream() -> RequestPayload:
    return _payload("ToggleStream")


def start_stream() -> RequestPayload:
    return _payload("StartStream")


def stop_stream() -> RequestPayload:
    return _payload("StopStream")


def send_stream_caption(caption_text: str) -> RequestPayload:
    return _payload("SendStreamCaption", {"captionText": caption_text})


# Virtual camera


def get_virtual_cam_status() -> RequestPayload:
    return _payload("GetVirtualCamStatus")


def toggle_virtual_cam() -> RequestPayload:
    return _payload("ToggleVirtualCam")


def start_virtual_cam() -> RequestPayload:
    return _payload("StartVirtualCam")


def stop_virtual_cam() -> RequestPayload:
    return _payload("StopVirtualCam")


# Transitions


def get_transition_kind_list() -> RequestPayload:
    return _payload("GetTransitionKindList")


def get_scene_transition_list() -> RequestPayload:
    return _payload("GetSceneTransitionList")


def get_current_scene_transition() -> RequestPayload:
    return _payload("GetCurrentSceneTransition")


def set_current_scene_transition(name: str) -> RequestPayload:
    return _payload("SetCurrentSceneTransition", {"transitionName": name})


def set_current_scene_transition_duration(duration: timedelta) -> RequestPayload:
    return _payload(
        "SetCurrentSceneTransitionDuration", {"transitionDuration": millis_to_json(duration)}
    )


def set_current_scene_transition_settings(
    settings: Any, overlay: bool | None = None
) -> RequestPayload:
    data: dict[str, Any] = {"transitionSettings": settings}
    if overlay is not None:
        data["overlay"] = overlay
    return _payload("SetCurrentSceneTransitionSettings", data)


def get_current_scene_transition_cursor() -> RequestPayload:
    return _payload("GetCurrentSceneTransitionCursor")


def trigger_studio_mode_transition() -> RequestPayload:
    return _payload("TriggerStudioModeTransition")


def set_tbar_position(position: float, release: bool | None = None) -> RequestPayload:
    data: dict[str, Any] = {"position": float(position)}
    if release is not None:
        data["release"] = release
    return _payload("SetTBarPosition", data)


# Media inputs


def get_media_input_status(input: str) -> RequestPayload:
    return _payload("GetMediaInputStatus", {"inputName": input})


def set_media_input_cursor(input: str, cursor: timedelta) -> RequestPayload:
    return _payload(
        "SetMediaInputCursor", {"inputName": input, "mediaCursor": millis_to_json(cursor)}
    )


def offset_media_input_cursor(input: str, offset: timedelta) -> RequestPayload:
    return _payload(
        "OffsetMediaInputCursor",
        {"inputName": input, "mediaCursorOffset": millis_to_json(offset)},
    )


def trigger_media_input_action(input: str, action: Any) -> RequestPayload:
    """Trigger a media action, given as its wire identifier or an enum carrying it."""
    return _payload(
        "TriggerMediaInputAction", {"inputName": input, "mediaAction": _enum_value(action)}
    )