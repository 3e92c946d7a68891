"""Identifier helpers."""
from __future__ import annotations

import uuid


def make_keyframe_id() -> str:
    return f"kf-{uuid.uuid4().hex[:12]}"


def make_object_id() -> str:
    return f"obj_{uuid.uuid4()}"
