"""Animation Module.

Keyframe data model and the pure math built on it.

Components:
- keyframe_schema: Keyframe, Easing and property enums
- color: hex <-> unit RGB codec
- easing: easing -> Lottie tangent handles
- presets: catalog of keyframe-pair generators
"""

from lottiekit.animation.keyframe_schema import (
    BezierPoints,
    Easing,
    EasingType,
    Keyframe,
    KeyframeData,
    KeyframeProperty,
    make_keyframe,
)

from lottiekit.animation.color import (
    ColorParseError,
    hex_to_unit_rgb,
    is_valid_hex,
    normalize,
    unit_rgb_to_hex,
)

from lottiekit.animation.easing import (
    EASING_PRESETS,
    BezierHandles,
    HandlePoint,
    create_bezier,
    create_default,
    get_handles,
)

from lottiekit.animation.presets import (
    ANIMATION_PRESETS,
    PresetDefinition,
    UnknownPresetError,
    apply_preset,
    get_all_categories,
    get_preset,
    get_preset_names,
    get_presets_by_category,
)

__all__ = [
    # Schema
    "BezierPoints",
    "Easing",
    "EasingType",
    "Keyframe",
    "KeyframeData",
    "KeyframeProperty",
    "make_keyframe",
    # Color
    "ColorParseError",
    "hex_to_unit_rgb",
    "is_valid_hex",
    "normalize",
    "unit_rgb_to_hex",
    # Easing
    "EASING_PRESETS",
    "BezierHandles",
    "HandlePoint",
    "create_bezier",
    "create_default",
    "get_handles",
    # Presets
    "ANIMATION_PRESETS",
    "PresetDefinition",
    "UnknownPresetError",
    "apply_preset",
    "get_all_categories",
    "get_preset",
    "get_preset_names",
    "get_presets_by_category",
]
