"""Builders for user interface requests, including projector geometry.

Each builder returns a :class:`~obswire.protocol.RequestPayload` ready to be
wrapped in a :class:`~obswire.protocol.Request` or a request batch.
"""

from __future__ import annotations

import base64
import enum
import struct
from dataclasses import dataclass, field
from typing import Any, ClassVar

from .protocol import RequestPayload

__all__ = [
    "VideoMixType",
    "QtWindowState",
    "QtRect",
    "QtGeometry",
    "get_studio_mode_enabled",
    "set_studio_mode_enabled",
    "open_input_properties_dialog",
    "open_input_filters_dialog",
    "open_input_interact_dialog",
    "get_monitor_list",
    "open_video_mix_projector",
    "open_source_projector",
]

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

_MAGIC_NUMBER = 0x1D9D0CB
_MAJOR_VERSION = 3
_MINOR_VERSION = 0
# magic, major, minor, frame rect, normal rect, screen, maximized,
# full-screen, screen width, main rect
_GEOMETRY = struct.Struct(">IHH4i4iiBBi4i")


def _payload(request_type: str, data: dict[str, Any] | None = None) -> RequestPayload:
    return RequestPayload(request_type=request_type, request_data=data)


class VideoMixType(str, enum.Enum):
    """Kind of video mix a projector shows."""

    PREVIEW = "OBS_WEBSOCKET_VIDEO_MIX_TYPE_PREVIEW"
    PROGRAM = "OBS_WEBSOCKET_VIDEO_MIX_TYPE_PROGRAM"
    MULTIVIEW = "OBS_WEBSOCKET_VIDEO_MIX_TYPE_MULTIVIEW"


class QtWindowState(enum.IntFlag):
    """Additional window state of a projector."""

    MAXIMIZED = 2
    FULLSCREEN = 4


@dataclass(frozen=True)
class QtRect:
    """A rectangle measured from the top left corner of the screen."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0


@dataclass(frozen=True)
class QtGeometry:
    """Size and position of a windowed projector."""

    DEFAULT_SCREEN: ClassVar[int] = -1

    screen_number: int = DEFAULT_SCREEN
    window_state: QtWindowState = QtWindowState(0)
    screen_width: int = 0
    rect: QtRect = field(default_factory=QtRect)

    def serialize(self) -> str:
        """Encode the geometry in Qt's saved-geometry format, as base64."""
        r = self.rect
        rect = (r.left, r.top, r.right, r.bottom)
        state = QtWindowState(self.window_state)
        try:
            data = _GEOMETRY.pack(
                _MAGIC_NUMBER,
                _MAJOR_VERSION,
                _MINOR_VERSION,
                *rect,
                *rect,
                self.screen_number,
                int(QtWindowState.MAXIMIZED in state),
                int(QtWindowState.FULLSCREEN in state),
                self.screen_width,
                *rect,
            )
        except struct.error as exc:
            raise ValueError(f"geometry values must be 32-bit signed integers: {exc}") from exc
        return base64.b64encode(data).decode("ascii")


def _location(location: int | QtGeometry | None) -> dict[str, Any]:
    if location is None:
        return {}
    if isinstance(location, QtGeometry):
        return {"projectorGeometry": location.serialize()}
    if isinstance(location, bool) or not isinstance(location, int):
        raise TypeError(
            f"location must be a monitor index or a QtGeometry, got {type(location).__name__}"
        )
    if not _I32_MIN <= location <= _I32_MAX:
        raise ValueError(f"monitor index out of range: {location}")
    return {"monitorIndex": location}


def get_studio_mode_enabled() -> RequestPayload:
    return _payload("GetStudioModeEnabled")


def set_studio_mode_enabled(enabled: bool) -> RequestPayload:
    return _payload("SetStudioModeEnabled", {"studioModeEnabled": enabled})


def open_input_properties_dialog(input: str) -> RequestPayload:
    return _payload("OpenInputPropertiesDialog", {"inputName": input})


def open_input_filters_dialog(input: str) -> RequestPayload:
    return _payload("OpenInputFiltersDialog", {"inputName": input})


def open_input_interact_dialog(input: str) -> RequestPayload:
    return _payload("OpenInputInteractDialog", {"inputName": input})


def get_monitor_list() -> RequestPayload:
    return _payload("GetMonitorList")


def open_video_mix_projector(
    mix_type: VideoMixType, location: int | QtGeometry | None = None
) -> RequestPayload:
    """Open a projector for a video mix.

    ``location`` is a monitor index (``-1`` for windowed mode), a
    :class:`QtGeometry` for a windowed projector, or ``None``.
    """
    data: dict[str, Any] = {"videoMixType": VideoMixType(mix_type).value}
    data.update(_location(location))
    return _payload("OpenVideoMixProjector", data)


def open_source_projector(
    source: str, location: int | QtGeometry | None = None
) -> RequestPayload:
    """Open a projector for a source, placed as described by ``location``."""
    data: dict[str, Any] = {"sourceName": source}
    data.update(_location(location))
    return _payload("OpenSourceProjector", data)