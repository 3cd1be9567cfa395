"""Builders for scene and source requests."""

from __future__ import annotations

import os
from datetime import timedelta
from typing import Any

from .codecs import millis_to_json
from .protocol import RequestPayload

__all__ = [
    "get_scene_list",
    "get_group_list",
    "get_current_program_scene",
    "set_current_program_scene",
    "get_current_preview_scene",
    "set_current_preview_scene",
    "set_scene_name",
    "create_scene",
    "remove_scene",
    "get_scene_transition_override",
    "set_scene_transition_override",
    "get_source_active",
    "get_source_screenshot",
    "save_source_screenshot",
]

_U32_MAX = 2**32 - 1
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _payload(request_type: str, data: dict[str, Any] | None = None) -> RequestPayload:
    return RequestPayload(request_type=request_type, request_data=data)


def _check_range(name: str, value: int | None, low: int, high: int) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or not low <= value <= high:
        raise ValueError(f"{name} must be an integer in {low}..={high}, got {value!r}")


def get_scene_list() -> RequestPayload:
    return _payload("GetSceneList")


def get_group_list() -> RequestPayload:
    return _payload("GetGroupList")


def get_current_program_scene() -> RequestPayload:
    return _payload("GetCurrentProgramScene")


def set_current_program_scene(scene: str) -> RequestPayload:
    return _payload("SetCurrentProgramScene", {"sceneName": scene})


def get_current_preview_scene() -> RequestPayload:
    return _payload("GetCurrentPreviewScene")


def set_current_preview_scene(scene: str) -> RequestPayload:
    return _payload("SetCurrentPreviewScene", {"sceneName": scene})


def set_scene_name(scene: str, new_name: str) -> RequestPayload:
    return _payload("SetSceneName", {"sceneName": scene, "newSceneName": new_name})


def create_scene(name: str) -> RequestPayload:
    return _payload("CreateScene", {"sceneName": name})


def remove_scene(scene: str) -> RequestPayload:
    return _payload("RemoveScene", {"sceneName": scene})


def get_scene_transition_override(scene: str) -> RequestPayload:
    return _payload("GetSceneSceneTransitionOverride", {"sceneName": scene})


def set_scene_transition_override(
    scene: str, transition: str | None = None, duration: timedelta | None = None
) -> RequestPayload:
    """Set or clear a scene's transition override; unset fields are left out."""
    data: dict[str, Any] = {"sceneName": scene}
    if transition is not None:
        data["transitionName"] = transition
    if duration is not None:
        data["transitionDuration"] = millis_to_json(duration)
    return _payload("SetSceneSceneTransitionOverride", data)


def get_source_active(name: str) -> RequestPayload:
    return _payload("GetSourceActive", {"sourceName": name})


def _screenshot_data(
    source: str,
    format: str,
    width: int | None,
    height: int | None,
    compression_quality: int | None,
) -> dict[str, Any]:
    _check_range("width", width, 0, _U32_MAX)
    _check_range("height", height, 0, _U32_MAX)
    _check_range("compression_quality", compression_quality, _I32_MIN, _I32_MAX)
    data: dict[str, Any] = {"sourceName": source, "imageFormat": format}
    if width is not None:
        data["imageWidth"] = width
    if height is not None:
        data["imageHeight"] = height
    if compression_quality is not None:
        data["imageCompressionQuality"] = compression_quality
    return data


def get_source_screenshot(
    source: str,
    format: str,
    width: int | None = None,
    height: int | None = None,
    compression_quality: int | None = None,
) -> RequestPayload:
    """Request a base64-encoded screenshot of a source."""
    return _payload(
        "GetSourceScreenshot",
        _screenshot_data(source, format, width, height, compression_quality),
    )


def save_source_screenshot(
    source: str,
    format: str,
    file_path: str | os.PathLike[str],
    width: int | None = None,
    height: int | None = None,
    compression_quality: int | None = None,
) -> RequestPayload:
    """Request that a screenshot of a source be saved to a file."""
    data = _screenshot_data(source, format, width, height, compression_quality)
    data["imageFilePath"] = os.fspath(file_path)
    return _payload("SaveSourceScreenshot", data)