"""Scene object registry.

The canvas layer owns drawing; this registry only keeps the values the
exporter needs, keyed by object id. UI code holds ids, never objects.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Protocol

from lottiekit.utils.ids import make_object_id


class ObjectKind(str, Enum):
    """Geometry kinds the canvas can produce."""
    RECT = "rect"
    ELLIPSE = "ellipse"
    PATH = "path"
    TEXT = "text"
    GROUP = "group"


@dataclass
class Transform:
    left: float = 0.0
    top: float = 0.0
    scale_x: float = 1.0
    scale_y: float = 1.0
    angle: float = 0.0
    opacity: float = 1.0  # 0.0 to 1.0


@dataclass
class Style:
    fill: Optional[str] = None
    stroke: Optional[str] = None
    stroke_width: float = 1.0


@dataclass
class SceneObject:
    id: str
    kind: ObjectKind
    transform: Transform = field(default_factory=Transform)
    style: Style = field(default_factory=Style)


class SceneObjectSource(Protocol):
    """Read-only view of the scene used by the exporter."""

    def list_objects(self) -> List[SceneObject]: ...

    def get_object(self, object_id: str) -> Optional[SceneObject]: ...


class SceneRegistry:
    """Arena of scene objects in registration order."""

    def __init__(self) -> None:
        self._objects: Dict[str, SceneObject] = {}

    def register(self, obj: SceneObject) -> SceneObject:
        self._objects[obj.id] = obj
        return obj

    @staticmethod
    def generate_object_id() -> str:
        return make_object_id()

    def create(self, kind: ObjectKind | str, **kwargs) -> SceneObject:
        return self.register(SceneObject(id=self.generate_object_id(), kind=ObjectKind(kind), **kwargs))

    def unregister(self, object_id: str) -> None:
        self._objects.pop(object_id, None)

    def get_object(self, object_id: str) -> Optional[SceneObject]:
        return self._objects.get(object_id)

    def list_objects(self) -> List[SceneObject]:
        return list(self._objects.values())

    def clear(self) -> None:
        self._objects.clear()

    def __contains__(self, object_id: object) -> bool:
        return object_id in self._objects

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[SceneObject]:
        return iter(list(self._objects.values()))
