"""Lottie document schema and channel encodings."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

from jsonschema import Draft202012Validator

from lottiekit.animation.easing import BezierHandles

SHAPE_LAYER_TYPE = 4

_ANIMATED_PROPERTY = {"type": "object", "required": ["a", "k"]}

LOTTIE_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["v", "fr", "ip", "op", "w", "h", "nm", "layers"],
    "properties": {
        "v": {"type": "string"},
        "fr": {"type": "number", "minimum": 1, "maximum": 120},
        "ip": {"type": "number", "minimum": 0},
        "op": {"type": "number", "minimum": 1},
        "w": {"type": "number", "minimum": 1},
        "h": {"type": "number", "minimum": 1},
        "nm": {"type": "string"},
        "layers": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["ty", "nm", "ind", "ip", "op", "ks"],
                "properties": {
                    "ty": {"type": "number"},
                    "nm": {"type": "string"},
                    "ind": {"type": "number"},
                    "ip": {"type": "number"},
                    "op": {"type": "number"},
                    "ks": {
                        "type": "object",
                        "required": ["p", "s", "r", "o", "a"],
                        "properties": {
                            "p": _ANIMATED_PROPERTY,
                            "s": _ANIMATED_PROPERTY,
                            "r": _ANIMATED_PROPERTY,
                            "o": _ANIMATED_PROPERTY,
                            "a": _ANIMATED_PROPERTY,
                        },
                    },
                    "shapes": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "required": ["ty", "nm"],
                            "properties": {
                                "ty": {"type": "string"},
                                "nm": {"type": "string"},
                            },
                        },
                    },
                },
            },
        },
    },
}

Draft202012Validator.check_schema(LOTTIE_SCHEMA)

ChannelValue = Union[float, List[float]]


@dataclass(frozen=True)
class ChannelEntry:
    """One time-indexed value of an animated channel."""
    frame: int
    value: Tuple[float, ...]
    handles: Optional[BezierHandles] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"t": self.frame, "s": list(self.value)}
        if self.handles is not None:
            data["o"] = self.handles.o.to_dict()
            data["i"] = self.handles.i.to_dict()
        return data


@dataclass(frozen=True)
class StaticChannel:
    value: ChannelValue

    def to_dict(self) -> Dict[str, Any]:
        value = list(self.value) if isinstance(self.value, (list, tuple)) else self.value
        return {"a": 0, "k": value}


@dataclass(frozen=True)
class AnimatedChannel:
    """
    Time-ordered entries. The last entry never carries handles since a
    terminal keyframe has no outgoing segment.
    """
    entries: Tuple[ChannelEntry, ...]

    def __post_init__(self) -> None:
        if not self.entries:
            raise ValueError("AnimatedChannel needs at least one entry")
        if self.entries[-1].handles is not None:
            raise ValueError("Terminal channel entry must not carry tangent handles")

    @classmethod
    def from_points(cls, points: List[Tuple[int, Tuple[float, ...], BezierHandles]]) -> "AnimatedChannel":
        last = len(points) - 1
        return cls(entries=tuple(
            ChannelEntry(frame=frame, value=value, handles=None if index == last else handles)
            for index, (frame, value, handles) in enumerate(points)
        ))

    def to_dict(self) -> Dict[str, Any]:
        return {"a": 1, "k": [entry.to_dict() for entry in self.entries]}


Channel = Union[StaticChannel, AnimatedChannel]
