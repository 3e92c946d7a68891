"""Export Serializer - turns a timeline snapshot and scene into a Lottie document."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, Field

from lottiekit.animation.color import hex_to_unit_rgb
from lottiekit.animation.easing import get_handles
from lottiekit.animation.keyframe_schema import (
    COLOR_PROPERTIES,
    TRANSFORM_PROPERTIES,
    Keyframe,
    KeyframeProperty,
)
from lottiekit.canvas.registry import ObjectKind, SceneObject, SceneObjectSource
from lottiekit.lottie.schema import (
    SHAPE_LAYER_TYPE,
    AnimatedChannel,
    Channel,
    StaticChannel,
)
from lottiekit.lottie.validator import ValidationResult, format_validation_errors, validate_animation
from lottiekit.services.keyframe_store import KeyframeStore, TimelineSnapshot
from lottiekit.utils.config import settings

logger = logging.getLogger(__name__)

DEFAULT_COLOR = "#000000"

SHAPE_DESCRIPTORS = {
    ObjectKind.RECT: ("rc", "Rectangle"),
    ObjectKind.ELLIPSE: ("el", "Ellipse"),
    ObjectKind.PATH: ("sh", "Path"),
}
GENERIC_SHAPE = ("sh", "Shape")

_TRANSFORM_KEYS = {
    KeyframeProperty.POSITION: "p",
    KeyframeProperty.SCALE: "s",
    KeyframeProperty.ROTATION: "r",
    KeyframeProperty.OPACITY: "o",
}


class ExportOptions(BaseModel):
    name: str = Field(default_factory=lambda: settings.default_name)
    width: int = Field(default_factory=lambda: settings.default_width, ge=1)
    height: int = Field(default_factory=lambda: settings.default_height, ge=1)


@dataclass
class ExportResult:
    success: bool
    document: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    validation: Optional[ValidationResult] = None

    @property
    def is_valid(self) -> bool:
        return self.validation is not None and self.validation.valid

    @property
    def validation_message(self) -> str:
        if self.validation is None:
            return ""
        return format_validation_errors(self.validation.errors)


def _partition(keyframes: Iterable[Keyframe]) -> Dict[KeyframeProperty, List[Keyframe]]:
    tracks: Dict[KeyframeProperty, List[Keyframe]] = {}
    for keyframe in keyframes:
        tracks.setdefault(KeyframeProperty(keyframe.property), []).append(keyframe)
    return tracks


def _sorted_track(keyframes: List[Keyframe]) -> List[Keyframe]:
    # stable: equal frames keep storage order
    return sorted(keyframes, key=lambda kf: kf.frame)


def _as_vector(value: Any) -> tuple:
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return (value,)


def _color_vector(color: str) -> tuple:
    return (*hex_to_unit_rgb(color), 1)


def build_animated_channel(keyframes: List[Keyframe]) -> AnimatedChannel:
    return AnimatedChannel.from_points([
        (kf.frame, _as_vector(kf.value), get_handles(kf.easing))
        for kf in _sorted_track(keyframes)
    ])


def build_color_channel(keyframes: List[Keyframe], live_color: Optional[str]) -> Channel:
    if not keyframes:
        return StaticChannel(list(_color_vector(live_color or DEFAULT_COLOR)))
    return AnimatedChannel.from_points([
        (kf.frame, _color_vector(str(kf.value)), get_handles(kf.easing))
        for kf in _sorted_track(keyframes)
    ])


def _static_transform(obj: SceneObject, prop: KeyframeProperty) -> StaticChannel:
    t = obj.transform
    if prop is KeyframeProperty.POSITION:
        return StaticChannel([t.left, t.top])
    if prop is KeyframeProperty.SCALE:
        return StaticChannel([t.scale_x * 100, t.scale_y * 100])
    if prop is KeyframeProperty.ROTATION:
        return StaticChannel(t.angle)
    return StaticChannel(t.opacity * 100)


def build_transform(obj: SceneObject, tracks: Dict[KeyframeProperty, List[Keyframe]]) -> Dict[str, Any]:
    ks: Dict[str, Any] = {}
    for prop in TRANSFORM_PROPERTIES:
        track = tracks.get(prop)
        channel: Channel = build_animated_channel(track) if track else _static_transform(obj, prop)
        ks[_TRANSFORM_KEYS[prop]] = channel.to_dict()
    ks["a"] = StaticChannel([0, 0]).to_dict()
    return ks


def build_shapes(obj: SceneObject, tracks: Dict[KeyframeProperty, List[Keyframe]]) -> List[Dict[str, Any]]:
    kind = ObjectKind(obj.kind)
    ty, nm = SHAPE_DESCRIPTORS.get(kind, GENERIC_SHAPE)
    shapes: List[Dict[str, Any]] = [{"ty": ty, "nm": nm}]

    if not any(tracks.get(prop) for prop in COLOR_PROPERTIES):
        return shapes

    fill = build_color_channel(tracks.get(KeyframeProperty.FILL, []), obj.style.fill)
    stroke = build_color_channel(tracks.get(KeyframeProperty.STROKE, []), obj.style.stroke)
    shapes.append({
        "ty": "fl",
        "nm": "Fill",
        "c": fill.to_dict(),
        "o": StaticChannel(100).to_dict(),
    })
    shapes.append({
        "ty": "st",
        "nm": "Stroke",
        "c": stroke.to_dict(),
        "o": StaticChannel(100).to_dict(),
        "w": StaticChannel(obj.style.stroke_width).to_dict(),
    })
    return shapes


def build_layer(obj: SceneObject, index: int, keyframes: Iterable[Keyframe], duration: int) -> Dict[str, Any]:
    """Build one shape layer from the keyframes that belong to ``obj``."""
    tracks = _partition(keyframes)
    return {
        "ty": SHAPE_LAYER_TYPE,
        "nm": obj.id,
        "ind": index,
        "ip": 0,
        "op": duration,
        "ks": build_transform(obj, tracks),
        "shapes": build_shapes(obj, tracks),
    }


def serialize_animation(
    snapshot: TimelineSnapshot,
    objects: SceneObjectSource,
    options: Optional[ExportOptions] = None,
) -> Dict[str, Any]:
    """
    Build a Lottie document from a timeline snapshot.

    Layers follow the registry's iteration order and their index becomes
    ``ind``. Properties without keyframes export the object's live value
    as a static channel.
    """
    options = options or ExportOptions()
    by_object: Dict[str, List[Keyframe]] = {}
    for keyframe in snapshot.keyframes:
        by_object.setdefault(keyframe.object_id, []).append(keyframe)
    layers = [
        build_layer(obj, index, by_object.get(obj.id, []), snapshot.duration)
        for index, obj in enumerate(objects.list_objects())
    ]
    return {
        "v": settings.lottie_version,
        "fr": snapshot.frame_rate,
        "ip": 0,
        "op": snapshot.duration,
        "w": options.width,
        "h": options.height,
        "nm": options.name,
        "layers": layers,
    }


def to_json(document: Dict[str, Any], indent: Optional[int] = 2) -> str:
    return json.dumps(document, indent=indent, ensure_ascii=False)


def export_animation(
    store: KeyframeStore,
    objects: SceneObjectSource,
    options: Optional[ExportOptions] = None,
    validate: bool = True,
) -> ExportResult:
    """
    Serialize the current timeline and optionally validate the result.

    Validation is advisory: an invalid document is still returned and the
    caller decides whether to block the download.
    """
    try:
        document = serialize_animation(store.snapshot(), objects, options)
    except Exception as exc:
        logger.exception("Lottie export failed")
        return ExportResult(success=False, error=str(exc) or "Export failed")

    logger.info(
        "Exported %d layers, %d frames at %d fps",
        len(document["layers"]),
        document["op"],
        document["fr"],
    )
    if not validate:
        return ExportResult(success=True, document=document)

    validation = validate_animation(document)
    if not validation.valid:
        logger.warning("Exported animation failed validation:\n%s", format_validation_errors(validation.errors))
    return ExportResult(success=True, document=document, validation=validation)
