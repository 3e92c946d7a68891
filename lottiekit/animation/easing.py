"""Easing Engine - resolves keyframe easing into Lottie tangent handles."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from lottiekit.animation.keyframe_schema import BezierPoints, Easing, EasingType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HandlePoint:
    x: float
    y: float

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class BezierHandles:
    """Out-tangent leaving the start keyframe and in-tangent arriving at the next one."""
    o: HandlePoint
    i: HandlePoint


EASING_PRESETS: Dict[str, BezierHandles] = {
    EasingType.LINEAR.value: BezierHandles(o=HandlePoint(0, 0), i=HandlePoint(1, 1)),
    EasingType.EASE_IN.value: BezierHandles(o=HandlePoint(0.42, 0), i=HandlePoint(1, 1)),
    EasingType.EASE_OUT.value: BezierHandles(o=HandlePoint(0, 0), i=HandlePoint(0.58, 1)),
    EasingType.EASE_IN_OUT.value: BezierHandles(o=HandlePoint(0.42, 0), i=HandlePoint(0.58, 1)),
}


def get_handles(easing: Optional[Easing]) -> BezierHandles:
    """
    Resolve any easing value to its tangent handles.

    A bezier easing uses its control points directly. Unknown tags and
    bezier easings without control points fall back to linear.
    """
    if easing is None:
        return EASING_PRESETS[EasingType.LINEAR.value]

    tag = easing.type.value if isinstance(easing.type, EasingType) else str(easing.type)
    if tag == EasingType.BEZIER.value and easing.bezier is not None:
        points = easing.bezier
        return BezierHandles(
            o=HandlePoint(points.x1, points.y1),
            i=HandlePoint(points.x2, points.y2),
        )

    handles = EASING_PRESETS.get(tag)
    if handles is None:
        logger.debug("Easing %r has no handles, falling back to linear", tag)
        return EASING_PRESETS[EasingType.LINEAR.value]
    return handles


def create_default() -> Easing:
    return Easing(type=EasingType.LINEAR)


def create_bezier(x1: float, y1: float, x2: float, y2: float) -> Easing:
    return Easing(type=EasingType.BEZIER, bezier=BezierPoints(x1=x1, y1=y1, x2=x2, y2=y2))
