"""Keyframe store - the authoritative in-memory timeline.

All mutations are synchronous and expected to come from a single owner
(the editor's UI thread). Keyframes are stored in a dict keyed by
``(object_id, frame, property)`` so a collision is a plain key lookup;
dict insertion order doubles as the storage order reported by queries.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from lottiekit.animation.keyframe_schema import Keyframe, KeyframeData, KeyframeProperty
from lottiekit.utils.config import settings
from lottiekit.utils.ids import make_keyframe_id

logger = logging.getLogger(__name__)

MIN_DURATION = 1
MIN_FRAME_RATE = 1
MAX_FRAME_RATE = 120

SlotKey = Tuple[str, int, KeyframeProperty]


@dataclass(frozen=True)
class KeyframeClipboard:
    keyframes: Tuple[KeyframeData, ...]
    source_frame: int


@dataclass(frozen=True)
class TimelineSnapshot:
    """Immutable copy of the timeline handed to the export serializer."""
    keyframes: Tuple[Keyframe, ...]
    duration: int
    frame_rate: int
    current_frame: int = 0


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def _check_keyframe(keyframe: Keyframe) -> None:
    if not keyframe.id:
        raise ValueError("Keyframe id must be a non-empty string")
    if keyframe.frame < 0:
        raise ValueError(f"Keyframe frame must be non-negative, got {keyframe.frame}")


class KeyframeStore:
    def __init__(
        self,
        duration: Optional[int] = None,
        frame_rate: Optional[int] = None,
    ) -> None:
        self._duration = max(MIN_DURATION, duration if duration is not None else settings.default_duration)
        self._frame_rate = _clamp(
            frame_rate if frame_rate is not None else settings.default_frame_rate,
            MIN_FRAME_RATE,
            MAX_FRAME_RATE,
        )
        self._current_frame = 0
        self._is_playing = False
        self._slots: Dict[SlotKey, Keyframe] = {}
        self._by_id: Dict[str, SlotKey] = {}
        self._selected: List[str] = []
        self._clipboard: Optional[KeyframeClipboard] = None

    # -- timeline ---------------------------------------------------------

    @property
    def current_frame(self) -> int:
        return self._current_frame

    @property
    def duration(self) -> int:
        return self._duration

    @property
    def frame_rate(self) -> int:
        return self._frame_rate

    def set_current_frame(self, frame: int) -> None:
        self._current_frame = _clamp(frame, 0, self._duration)

    def set_duration(self, duration: int) -> None:
        self._duration = max(MIN_DURATION, duration)
        self._current_frame = min(self._current_frame, self._duration)

    def set_frame_rate(self, rate: int) -> None:
        self._frame_rate = _clamp(rate, MIN_FRAME_RATE, MAX_FRAME_RATE)

    # -- playback ---------------------------------------------------------

    @property
    def is_playing(self) -> bool:
        return self._is_playing

    def play(self) -> None:
        self._is_playing = True

    def pause(self) -> None:
        self._is_playing = False

    def toggle_playback(self) -> None:
        self._is_playing = not self._is_playing

    def stop(self) -> None:
        self._is_playing = False
        self._current_frame = 0

    # -- keyframes --------------------------------------------------------

    @property
    def keyframes(self) -> List[Keyframe]:
        return list(self._slots.values())

    def __len__(self) -> int:
        return len(self._slots)

    def get_keyframe(self, keyframe_id: str) -> Optional[Keyframe]:
        slot = self._by_id.get(keyframe_id)
        return self._slots[slot] if slot is not None else None

    def add_keyframe(self, keyframe: Keyframe) -> None:
        """
        Insert a keyframe; an existing one in the same slot is replaced in place.

        Raises:
            ValueError: if the keyframe has no id or a negative frame.
        """
        _check_keyframe(keyframe)
        slot = keyframe.slot
        existing = self._slots.get(slot)
        if existing is not None:
            logger.debug("Replacing keyframe %s with %s at %s", existing.id, keyframe.id, slot)
            self._by_id.pop(existing.id, None)
            if existing.id != keyframe.id:
                self._drop_from_selection(existing.id)
        stale_slot = self._by_id.get(keyframe.id)
        if stale_slot is not None and stale_slot != slot:
            # same id already lives elsewhere; the new version moves it
            self._slots.pop(stale_slot, None)
        self._slots[slot] = keyframe
        self._by_id[keyframe.id] = slot

    def remove_keyframe(self, keyframe_id: str) -> None:
        slot = self._by_id.pop(keyframe_id, None)
        if slot is None:
            return
        del self._slots[slot]
        self._drop_from_selection(keyframe_id)

    def update_keyframe(self, keyframe_id: str, **changes) -> Optional[Keyframe]:
        """
        Apply partial changes to a keyframe.

        If the change moves it onto a slot held by another keyframe, the
        updated keyframe takes that slot and the occupant is dropped.
        """
        slot = self._by_id.get(keyframe_id)
        if slot is None:
            return None
        changes.pop("id", None)
        updated = self._slots[slot].updated(**changes)
        _check_keyframe(updated)
        if updated.slot == slot:
            self._slots[slot] = updated
        else:
            del self._slots[slot]
            del self._by_id[keyframe_id]
            self.add_keyframe(updated)
        return updated

    def get_keyframes_for_object(self, object_id: str) -> List[Keyframe]:
        return [kf for kf in self._slots.values() if kf.object_id == object_id]

    def get_keyframes_at_frame(self, frame: int) -> List[Keyframe]:
        return [kf for kf in self._slots.values() if kf.frame == frame]

    def set_keyframes(self, keyframes: Iterable[Keyframe]) -> None:
        self._slots.clear()
        self._by_id.clear()
        for keyframe in keyframes:
            self.add_keyframe(keyframe)
        self._selected = [kf_id for kf_id in self._selected if kf_id in self._by_id]

    def clear_keyframes(self) -> None:
        self._slots.clear()
        self._by_id.clear()
        self._selected = []

    # -- selection --------------------------------------------------------

    @property
    def selected_keyframe_ids(self) -> List[str]:
        return list(self._selected)

    def select_keyframe(self, keyframe_id: str, add_to_selection: bool = False) -> None:
        if add_to_selection:
            if keyframe_id not in self._selected:
                self._selected.append(keyframe_id)
            return
        self._selected = [keyframe_id]

    def deselect_keyframe(self, keyframe_id: str) -> None:
        self._drop_from_selection(keyframe_id)

    def select_all_at_frame(self, frame: int) -> None:
        self._selected = [kf.id for kf in self._slots.values() if kf.frame == frame]

    def clear_selection(self) -> None:
        self._selected = []

    def delete_selected(self) -> None:
        for keyframe_id in list(self._selected):
            self.remove_keyframe(keyframe_id)
        self._selected = []

    def _drop_from_selection(self, keyframe_id: str) -> None:
        self._selected = [kf_id for kf_id in self._selected if kf_id != keyframe_id]

    # -- clipboard --------------------------------------------------------

    @property
    def clipboard(self) -> Optional[KeyframeClipboard]:
        return self._clipboard

    def copy_selected(self) -> None:
        selected_ids = set(self._selected)
        selected = [kf for kf in self._slots.values() if kf.id in selected_ids]
        if not selected:
            return
        self._clipboard = KeyframeClipboard(
            keyframes=tuple(kf.without_id() for kf in selected),
            source_frame=min(kf.frame for kf in selected),
        )
        logger.debug("Copied %d keyframes from frame %d", len(selected), self._clipboard.source_frame)

    def paste(self, target_object_id: Optional[str] = None) -> List[Keyframe]:
        """
        Paste the clipboard relative to the playhead.

        Frames shift by ``current_frame - source_frame``; keyframes are
        re-owned to ``target_object_id`` when given. The pasted keyframes
        get fresh ids and become the selection.
        """
        clipboard = self._clipboard
        if clipboard is None or not clipboard.keyframes:
            return []

        offset = self._current_frame - clipboard.source_frame
        pasted = [
            Keyframe(
                id=make_keyframe_id(),
                object_id=target_object_id if target_object_id is not None else data.object_id,
                frame=data.frame + offset,
                property=data.property,
                value=data.value,
                easing=data.easing,
            )
            for data in clipboard.keyframes
        ]
        for keyframe in pasted:
            self.add_keyframe(keyframe)
        self._selected = [kf.id for kf in pasted if kf.id in self._by_id]
        logger.debug("Pasted %d keyframes with offset %d", len(pasted), offset)
        return pasted

    # -- export -----------------------------------------------------------

    def snapshot(self) -> TimelineSnapshot:
        return TimelineSnapshot(
            keyframes=tuple(self._slots.values()),
            duration=self._duration,
            frame_rate=self._frame_rate,
            current_frame=self._current_frame,
        )
