"""Response values for configuration, general, hotkey, profile, scene
collection, source and user interface requests."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from semver import Version as SemVer

from .protocol import ProtocolError

__all__ = [
    "VideoSettings",
    "StreamServiceSettings",
    "Version",
    "Stats",
    "VendorResponse",
    "Profiles",
    "ProfileParameter",
    "SceneCollections",
    "SourceActive",
    "MonitorSize",
    "MonitorPosition",
    "Monitor",
    "parse_record_directory",
    "parse_hotkeys",
    "parse_image_data",
    "parse_studio_mode_enabled",
    "parse_monitor_list",
]

_U16_MAX = 2**16 - 1
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


def _string_list(data: Mapping[str, Any], key: str) -> list[str]:
    values = _sequence(data, key)
    if not all(isinstance(value, str) for value in values):
        raise ProtocolError(f"field `{key}`: expected a sequence of strings")
    return list(values)


def _semver(data: Mapping[str, Any], key: str) -> SemVer:
    text = _string(data, key)
    try:
        return SemVer.parse(text)
    except (ValueError, TypeError) as exc:
        raise ProtocolError(f"field `{key}`: {exc}") from exc


@dataclass(frozen=True)
class VideoSettings:
    """Current video settings of the server."""

    fps_numerator: int
    fps_denominator: int
    base_width: int
    base_height: int
    output_width: int
    output_height: int

    @classmethod
    def from_json(cls, data: Any) -> VideoSettings:
        data = _object(data, "struct VideoSettings")
        return cls(
            fps_numerator=_unsigned(data, "fpsNumerator", _U32_MAX),
            fps_denominator=_unsigned(data, "fpsDenominator", _U32_MAX),
            base_width=_unsigned(data, "baseWidth", _U32_MAX),
            base_height=_unsigned(data, "baseHeight", _U32_MAX),
            output_width=_unsigned(data, "outputWidth", _U32_MAX),
            output_height=_unsigned(data, "outputHeight", _U32_MAX),
        )


@dataclass(frozen=True)
class StreamServiceSettings:
    """Stream service type and its settings."""

    type: str
    settings: Any

    @classmethod
    def from_json(cls, data: Any) -> StreamServiceSettings:
        data = _object(data, "struct StreamServiceSettings")
        return cls(
            type=_string(data, "streamServiceType"),
            settings=_field(data, "streamServiceSettings"),
        )


@dataclass(frozen=True)
class Version:
    """Versions and capabilities of the server."""

    obs_version: SemVer
    obs_web_socket_version: SemVer
    rpc_version: int
    available_requests: list[str]
    supported_image_formats: list[str]
    platform: str
    platform_description: str

    @classmethod
    def from_json(cls, data: Any) -> Version:
        data = _object(data, "struct Version")
        return cls(
            obs_version=_semver(data, "obsVersion"),
            obs_web_socket_version=_semver(data, "obsWebSocketVersion"),
            rpc_version=_unsigned(data, "rpcVersion", _U32_MAX),
            available_requests=_string_list(data, "availableRequests"),
            supported_image_formats=_string_list(data, "supportedImageFormats"),
            platform=_string(data, "platform"),
            platform_description=_string(data, "platformDescription"),
        )


@dataclass(frozen=True)
class Stats:
    """Resource usage and frame statistics of the server."""

    cpu_usage: float
    memory_usage: float
    available_disk_space: float
    active_fps: float
    average_frame_render_time: float
    render_skipped_frames: int
    render_total_frames: int
    output_skipped_frames: int
    output_total_frames: int
    web_socket_session_incoming_messages: int
    web_socket_session_outgoing_messages: int

    @classmethod
    def from_json(cls, data: Any) -> Stats:
        data = _object(data, "struct Stats")
        return cls(
            cpu_usage=_number(data, "cpuUsage"),
            memory_usage=_number(data, "memoryUsage"),
            available_disk_space=_number(data, "availableDiskSpace"),
            active_fps=_number(data, "activeFps"),
            average_frame_render_time=_number(data, "averageFrameRenderTime"),
            render_skipped_frames=_unsigned(data, "renderSkippedFrames", _U32_MAX),
            render_total_frames=_unsigned(data, "renderTotalFrames", _U32_MAX),
            output_skipped_frames=_unsigned(data, "outputSkippedFrames", _U32_MAX),
            output_total_frames=_unsigned(data, "outputTotalFrames", _U32_MAX),
            web_socket_session_incoming_messages=_unsigned(
                data, "webSocketSessionIncomingMessages", _U64_MAX
            ),
            web_socket_session_outgoing_messages=_unsigned(
                data, "webSocketSessionOutgoingMessages", _U64_MAX
            ),
        )


@dataclass(frozen=True)
class VendorResponse:
    """Answer to a vendor request."""

    vendor_name: str
    request_type: str
    response_data: Any

    @classmethod
    def from_json(cls, data: Any) -> VendorResponse:
        data = _object(data, "struct VendorResponse")
        return cls(
            vendor_name=_string(data, "vendorName"),
            request_type=_string(data, "requestType"),
            response_data=_field(data, "responseData"),
        )


@dataclass(frozen=True)
class Profiles:
    """All profiles and the current one."""

    current: str
    profiles: list[str]

    @classmethod
    def from_json(cls, data: Any) -> Profiles:
        data = _object(data, "struct Profiles")
        return cls(
            current=_string(data, "currentProfileName"),
            profiles=_string_list(data, "profiles"),
        )


@dataclass(frozen=True)
class ProfileParameter:
    """Value and default value of a profile parameter."""

    value: str | None
    default_value: str | None

    @classmethod
    def from_json(cls, data: Any) -> ProfileParameter:
        data = _object(data, "struct ProfileParameter")
        return cls(
            value=_optional_string(data, "parameterValue"),
            default_value=_optional_string(data, "defaultParameterValue"),
        )


@dataclass(frozen=True)
class SceneCollections:
    """All scene collections and the current one."""

    current: str
    collections: list[str]

    @classmethod
    def from_json(cls, data: Any) -> SceneCollections:
        data = _object(data, "struct SceneCollections")
        return cls(
            current=_string(data, "currentSceneCollectionName"),
            collections=_string_list(data, "sceneCollections"),
        )


@dataclass(frozen=True)
class SourceActive:
    """Whether a source shows in program and in the user interface."""

    active: bool
    showing: bool

    @classmethod
    def from_json(cls, data: Any) -> SourceActive:
        data = _object(data, "struct SourceActive")
        return cls(active=_boolean(data, "videoActive"), showing=_boolean(data, "videoShowing"))


@dataclass(frozen=True)
class MonitorSize:
    """Pixel size of a monitor."""

    width: int
    height: int


@dataclass(frozen=True)
class MonitorPosition:
    """Position of a monitor on the screen."""

    x: int
    y: int


@dataclass(frozen=True)
class Monitor:
    """A monitor attached to the machine running the server."""

    name: str
    index: int
    size: MonitorSize
    position: MonitorPosition

    @classmethod
    def from_json(cls, data: Any) -> Monitor:
        data = _object(data, "struct Monitor")
        return cls(
            name=_string(data, "monitorName"),
            index=_unsigned(data, "monitorIndex", _U32_MAX),
            size=MonitorSize(
                width=_unsigned(data, "monitorWidth", _U16_MAX),
                height=_unsigned(data, "monitorHeight", _U16_MAX),
            ),
            position=MonitorPosition(
                x=_unsigned(data, "monitorPositionX", _U16_MAX),
                y=_unsigned(data, "monitorPositionY", _U16_MAX),
            ),
        )


def parse_record_directory(data: Any) -> str:
    return _string(_object(data, "struct RecordDirectory"), "recordDirectory")


def parse_hotkeys(data: Any) -> list[str]:
    return _string_list(_object(data, "struct Hotkeys"), "hotkeys")


def parse_image_data(data: Any) -> str:
    """Return the base64-encoded screenshot."""
    return _string(_object(data, "struct ImageData"), "imageData")


def parse_studio_mode_enabled(data: Any) -> bool:
    return _boolean(_object(data, "struct StudioModeEnabled"), "studioModeEnabled")


def parse_monitor_list(data: Any) -> list[Monitor]:
    data = _object(data, "struct MonitorList")
    return [Monitor.from_json(item) for item in _sequence(data, "monitors")]