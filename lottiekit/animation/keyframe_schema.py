"""Keyframe Schema - the timeline's keyframe data structures."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union


class KeyframeProperty(str, Enum):
    """Animatable properties of a scene object."""
    POSITION = "position"
    SCALE = "scale"
    ROTATION = "rotation"
    OPACITY = "opacity"
    FILL = "fill"
    STROKE = "stroke"


TRANSFORM_PROPERTIES = (
    KeyframeProperty.POSITION,
    KeyframeProperty.SCALE,
    KeyframeProperty.ROTATION,
    KeyframeProperty.OPACITY,
)
COLOR_PROPERTIES = (KeyframeProperty.FILL, KeyframeProperty.STROKE)


class EasingType(str, Enum):
    """Interpolation curve tags."""
    LINEAR = "linear"
    EASE_IN = "ease-in"
    EASE_OUT = "ease-out"
    EASE_IN_OUT = "ease-in-out"
    BEZIER = "bezier"


@dataclass(frozen=True)
class BezierPoints:
    """Cubic-bezier control points. x is time (0-1), y is value and may overshoot."""
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class Easing:
    # unknown tags are kept as raw strings and resolve to linear handles
    type: Union[EasingType, str] = EasingType.LINEAR
    bezier: Optional[BezierPoints] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": _enum_value(self.type)}
        if self.bezier is not None:
            data["bezier"] = {
                "x1": self.bezier.x1,
                "y1": self.bezier.y1,
                "x2": self.bezier.x2,
                "y2": self.bezier.y2,
            }
        return data

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Easing":
        if not data:
            return cls()
        raw_type = data.get("type", EasingType.LINEAR.value)
        try:
            easing_type: Union[EasingType, str] = EasingType(raw_type)
        except ValueError:
            easing_type = raw_type
        bezier_data = data.get("bezier")
        bezier = BezierPoints(**bezier_data) if bezier_data else None
        return cls(type=easing_type, bezier=bezier)


KeyframeValue = Union[float, int, Tuple[float, float], str]


def _enum_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _coerce_value(value: Any) -> KeyframeValue:
    if isinstance(value, list):
        return tuple(value)
    return value


@dataclass(frozen=True)
class KeyframeData:
    """A keyframe without an id, as produced by presets and held on the clipboard."""
    object_id: str
    frame: int
    property: KeyframeProperty
    value: KeyframeValue
    easing: Easing = field(default_factory=Easing)

    @property
    def slot(self) -> Tuple[str, int, KeyframeProperty]:
        return (self.object_id, self.frame, self.property)

    def with_id(self, keyframe_id: str) -> "Keyframe":
        return Keyframe(
            id=keyframe_id,
            object_id=self.object_id,
            frame=self.frame,
            property=self.property,
            value=self.value,
            easing=self.easing,
        )

    def to_dict(self) -> Dict[str, Any]:
        value = list(self.value) if isinstance(self.value, tuple) else self.value
        return {
            "objectId": self.object_id,
            "frame": self.frame,
            "property": _enum_value(self.property),
            "value": value,
            "easing": self.easing.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "KeyframeData":
        return KeyframeData(
            object_id=data["objectId"],
            frame=int(data["frame"]),
            property=KeyframeProperty(data["property"]),
            value=_coerce_value(data["value"]),
            easing=Easing.from_dict(data.get("easing")),
        )


@dataclass(frozen=True, kw_only=True)
class Keyframe(KeyframeData):
    """A timestamped target value for one property of one object."""
    id: str

    def without_id(self) -> KeyframeData:
        return KeyframeData(
            object_id=self.object_id,
            frame=self.frame,
            property=self.property,
            value=self.value,
            easing=self.easing,
        )

    def updated(self, **changes: Any) -> "Keyframe":
        if "property" in changes:
            changes["property"] = KeyframeProperty(changes["property"])
        if "value" in changes:
            changes["value"] = _coerce_value(changes["value"])
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        data = {"id": self.id}
        data.update(super().to_dict())
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Keyframe":
        return KeyframeData.from_dict(data).with_id(data["id"])


def make_keyframe(
    keyframe_id: str,
    object_id: str,
    frame: int,
    property: Union[KeyframeProperty, str],
    value: Any,
    easing: Optional[Easing] = None,
) -> Keyframe:
    """Convenience constructor accepting plain strings and lists."""
    return Keyframe(
        id=keyframe_id,
        object_id=object_id,
        frame=frame,
        property=KeyframeProperty(property),
        value=_coerce_value(value),
        easing=easing or Easing(),
    )
