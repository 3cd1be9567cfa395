"""Settings objects for transitions not described by the server API.

These map to the settings that the transition kinds expect and are meant to
be passed as the settings of transition or input requests.
"""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import Any

from .codecs import Rgba, rgba_to_abgr

__all__ = [
    "TYPE_SWIPE",
    "TYPE_SLIDE",
    "TYPE_STINGER",
    "TYPE_FADE_TO_COLOR",
    "TYPE_WIPE",
    "Direction",
    "Swipe",
    "Slide",
    "TransitionPointType",
    "AudioMonitoring",
    "AudioFadeStyle",
    "Stinger",
    "FadeToColor",
    "LumaImage",
    "Wipe",
]

TYPE_SWIPE = "swipe_transition"
TYPE_SLIDE = "slide_transition"
TYPE_STINGER = "obs_stinger_transition"
TYPE_FADE_TO_COLOR = "fade_to_color_transition"
TYPE_WIPE = "wipe_transition"

_U8_MAX = 2**8 - 1
_U32_MAX = 2**32 - 1


def _check_unsigned(name: str, value: Any, maximum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= maximum:
        raise ValueError(f"{name} must be an integer in 0..={maximum}, got {value!r}")


class Direction(str, enum.Enum):
    """Direction of a swipe or slide."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class Swipe:
    """One scene moving over the other to reveal or hide it."""

    direction: Direction = Direction.LEFT
    swipe_in: bool = False

    def to_json(self) -> dict[str, Any]:
        return {"direction": Direction(self.direction).value, "swipe_in": self.swipe_in}


@dataclass(frozen=True)
class Slide:
    """Two scenes side by side, one pushing the other away."""

    direction: Direction = Direction.LEFT

    def to_json(self) -> dict[str, Any]:
        return {"direction": Direction(self.direction).value}


class TransitionPointType(enum.IntEnum):
    """Unit of a stinger's transition point."""

    TIME = 0
    FRAME = 1


class AudioMonitoring(enum.IntEnum):
    """Where a stinger's audio is sent."""

    MONITOR_OFF = 0
    MONITOR_ONLY = 1
    MONITOR_AND_OUTPUT = 2


class AudioFadeStyle(enum.IntEnum):
    """How audio is faded between scenes during a stinger."""

    FADE_OUT_FADE_IN = 0
    CROSSFADE = 1


@dataclass(frozen=True)
class Stinger:
    """A video covering the scene switch."""

    path: str | os.PathLike[str]
    tp_type: TransitionPointType = TransitionPointType.TIME
    transition_point: int = 0
    audio_monitoring: AudioMonitoring = AudioMonitoring.MONITOR_OFF
    audio_fade_style: AudioFadeStyle = AudioFadeStyle.FADE_OUT_FADE_IN

    def __post_init__(self) -> None:
        _check_unsigned("transition_point", self.transition_point, _U32_MAX)

    def to_json(self) -> dict[str, Any]:
        return {
            "path": os.fspath(self.path),
            "tp_type": int(TransitionPointType(self.tp_type)),
            "transition_point": self.transition_point,
            "audio_monitoring": int(AudioMonitoring(self.audio_monitoring)),
            "audio_fade_style": int(AudioFadeStyle(self.audio_fade_style)),
        }


@dataclass(frozen=True)
class FadeToColor:
    """Blend through a solid colour; ``switch_point`` is at most 100."""

    color: Rgba
    switch_point: int

    def __post_init__(self) -> None:
        _check_unsigned("switch_point", self.switch_point, _U8_MAX)

    def to_json(self) -> dict[str, Any]:
        return {"color": rgba_to_abgr(self.color), "switch_point": self.switch_point}


class LumaImage(str, enum.Enum):
    """Luma image that shapes a wipe animation."""

    BARNDOOR_BOTTOM_LEFT = "barndoor-botleft.png"
    BARNDOOR_HORIZONTAL = "barndoor-h.png"
    BARNDOOR_TOP_LEFT = "barndoor-topleft.png"
    BARNDOOR_VERTICAL = "barndoor-v.png"
    BLINDS_HORIZONTAL = "blinds-h.png"
    BOX_BOTTOM_LEFT = "box-botleft.png"
    BOX_BOTTOM_RIGHT = "box-botright.png"
    BOX_TOP_LEFT = "box-topleft.png"
    BOX_TOP_RIGHT = "box-topright.png"
    BURST = "burst.png"
    CHECKERBOARD_SMALL = "checkerboard-small.png"
    CIRCLES = "circles.png"
    CLOCK = "clock.png"
    CLOUD = "cloud.png"
    CURTAIN = "curtain.png"
    FAN = "fan.png"
    FRACTAL = "fractal.png"
    IRIS = "iris.png"
    LINEAR_HORIZONTAL = "linear-h.png"
    LINEAR_TOP_LEFT = "linear-topleft.png"
    LINEAR_TOP_RIGHT = "linear-topright.png"
    LINEAR_VERTICAL = "linear-v.png"
    PARALLEL_ZIGZAG_HORIZONTAL = "parallel-zigzag-h.png"
    PARALLEL_ZIGZAG_VERTICAL = "parallel-zigzag-v.png"
    SINUS9 = "sinus9.png"
    SPIRAL = "spiral.png"
    SQUARE = "square.png"
    SQUARES = "squares.png"
    STRIPES = "stripes.png"
    STRIPS_HORIZONTAL = "strips-h.png"
    STRIPS_VERTICAL = "strips-v.png"
    WATERCOLOR = "watercolor.png"
    ZIGZAG_HORIZONTAL = "zigzag-h.png"
    ZIGZAG_VERTICAL = "zigzag-v.png"


@dataclass(frozen=True)
class Wipe:
    """A luma wipe between scenes."""

    luma_image: LumaImage = LumaImage.LINEAR_HORIZONTAL
    luma_invert: bool = False
    luma_softness: float = 0.0

    def to_json(self) -> dict[str, Any]:
        return {
            "luma_image": LumaImage(self.luma_image).value,
            "luma_invert": self.luma_invert,
            "luma_softness": float(self.luma_softness),
        }