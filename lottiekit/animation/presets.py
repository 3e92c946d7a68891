"""Animation Presets - parameterized keyframe-pair generators."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from lottiekit.animation.easing import create_bezier, create_default
from lottiekit.animation.keyframe_schema import (
    Easing,
    Keyframe,
    KeyframeData,
    KeyframeProperty,
    KeyframeValue,
)
from lottiekit.utils.ids import make_keyframe_id

PRESET_CATEGORIES = ("fade", "scale", "rotate", "bounce", "slide")

DEFAULT_PRESET_DURATION = 30

BOUNCE_EASING = create_bezier(0.68, -0.55, 0.27, 1.55)
EASE_OUT = create_bezier(0, 0, 0.58, 1)
EASE_IN = create_bezier(0.42, 0, 1, 1)
EASE_IN_OUT = create_bezier(0.42, 0, 0.58, 1)


class UnknownPresetError(KeyError):
    """Raised when a preset name is not in the catalog."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown preset: {self.name}"


@dataclass(frozen=True)
class PresetDefinition:
    name: str
    label: str
    description: str
    category: str
    property: KeyframeProperty
    start_value: KeyframeValue
    end_value: KeyframeValue
    easing: Easing

    def generate(
        self,
        object_id: str,
        start_frame: int = 0,
        duration: int = DEFAULT_PRESET_DURATION,
    ) -> List[KeyframeData]:
        """Return the start and end keyframes; the end keyframe is always linear."""
        return [
            KeyframeData(
                object_id=object_id,
                frame=start_frame,
                property=self.property,
                value=self.start_value,
                easing=self.easing,
            ),
            KeyframeData(
                object_id=object_id,
                frame=start_frame + duration,
                property=self.property,
                value=self.end_value,
                easing=create_default(),
            ),
        ]


def _preset(name, label, description, category, prop, start, end, easing) -> PresetDefinition:
    return PresetDefinition(
        name=name,
        label=label,
        description=description,
        category=category,
        property=prop,
        start_value=start,
        end_value=end,
        easing=easing,
    )


ANIMATION_PRESETS: Dict[str, PresetDefinition] = {
    p.name: p
    for p in (
        _preset("fade-in", "Fade In", "Fade from transparent to opaque", "fade",
                KeyframeProperty.OPACITY, 0, 100, EASE_OUT),
        _preset("fade-out", "Fade Out", "Fade from opaque to transparent", "fade",
                KeyframeProperty.OPACITY, 100, 0, EASE_IN),
        _preset("scale-up", "Scale Up", "Scale from small to full size", "scale",
                KeyframeProperty.SCALE, (0, 0), (100, 100), EASE_OUT),
        _preset("scale-down", "Scale Down", "Scale from full size to small", "scale",
                KeyframeProperty.SCALE, (100, 100), (0, 0), EASE_IN),
        _preset("rotate-cw", "Rotate Clockwise", "Rotate 360 degrees clockwise", "rotate",
                KeyframeProperty.ROTATION, 0, 360, EASE_IN_OUT),
        _preset("rotate-ccw", "Rotate Counter-Clockwise", "Rotate 360 degrees counter-clockwise", "rotate",
                KeyframeProperty.ROTATION, 0, -360, EASE_IN_OUT),
        _preset("bounce-in", "Bounce In", "Scale up with elastic bounce", "bounce",
                KeyframeProperty.SCALE, (0, 0), (100, 100), BOUNCE_EASING),
        _preset("bounce-out", "Bounce Out", "Scale down with elastic bounce", "bounce",
                KeyframeProperty.SCALE, (100, 100), (0, 0), BOUNCE_EASING),
        _preset("slide-in-left", "Slide In Left", "Slide in from left edge", "slide",
                KeyframeProperty.POSITION, (-200, 256), (256, 256), EASE_OUT),
        _preset("slide-in-right", "Slide In Right", "Slide in from right edge", "slide",
                KeyframeProperty.POSITION, (712, 256), (256, 256), EASE_OUT),
    )
}


def get_preset_names() -> List[str]:
    return list(ANIMATION_PRESETS)


def get_preset(name: str) -> Optional[PresetDefinition]:
    return ANIMATION_PRESETS.get(name)


def get_presets_by_category(category: str) -> List[PresetDefinition]:
    return [p for p in ANIMATION_PRESETS.values() if p.category == category]


def get_all_categories() -> List[str]:
    return list(PRESET_CATEGORIES)


def apply_preset(
    name: str,
    object_id: str,
    start_frame: int = 0,
    duration: int = DEFAULT_PRESET_DURATION,
) -> List[Keyframe]:
    """
    Generate a preset's keyframes and give each one a fresh id.

    Raises:
        UnknownPresetError: if ``name`` is not in the catalog.
    """
    preset = ANIMATION_PRESETS.get(name)
    if preset is None:
        raise UnknownPresetError(name)
    return [
        kf.with_id(make_keyframe_id())
        for kf in preset.generate(object_id, start_frame=start_frame, duration=duration)
    ]
