import pytest

from lottiekit.animation.easing import create_bezier
from lottiekit.animation.keyframe_schema import Keyframe, KeyframeProperty, make_keyframe
from lottiekit.services.keyframe_store import KeyframeStore


def _store(**kwargs) -> KeyframeStore:
    kwargs.setdefault("duration", 60)
    kwargs.setdefault("frame_rate", 30)
    return KeyframeStore(**kwargs)


def _kf(kf_id, obj="obj-1", frame=0, prop="opacity", value=0):
    return make_keyframe(kf_id, obj, frame, prop, value)


def test_timeline_clamps():
    store = _store()
    store.set_current_frame(-5)
    assert store.current_frame == 0
    store.set_current_frame(500)
    assert store.current_frame == 60
    store.set_frame_rate(0)
    assert store.frame_rate == 1
    store.set_frame_rate(240)
    assert store.frame_rate == 120
    store.set_duration(0)
    assert store.duration == 1


def test_shrinking_duration_clamps_playhead():
    store = _store()
    store.set_current_frame(50)
    store.set_duration(30)
    assert store.duration == 30
    assert store.current_frame == 30


def test_duplicate_slot_keeps_latest_value():
    store = _store()
    store.add_keyframe(_kf("a", value=10))
    store.add_keyframe(_kf("b", value=80))
    assert len(store) == 1
    only = store.keyframes[0]
    assert only.value == 80
    assert only.id == "b"
    assert store.get_keyframe("a") is None


def test_collision_replaces_in_place():
    store = _store()
    store.add_keyframe(_kf("a", frame=0))
    store.add_keyframe(_kf("b", frame=10))
    store.add_keyframe(_kf("c", frame=0, value=50))
    assert [kf.id for kf in store.keyframes] == ["c", "b"]


def test_same_frame_different_property_coexist():
    store = _store()
    store.add_keyframe(_kf("a", prop="opacity", value=1))
    store.add_keyframe(_kf("b", prop="rotation", value=45))
    assert len(store) == 2


def test_remove_and_update():
    store = _store()
    store.add_keyframe(_kf("a"))
    store.remove_keyframe("missing")
    assert len(store) == 1
    updated = store.update_keyframe("a", value=42, easing=create_bezier(0, 0, 1, 1))
    assert updated.value == 42
    assert store.get_keyframe("a").value == 42
    assert store.update_keyframe("missing", value=1) is None
    store.remove_keyframe("a")
    assert len(store) == 0


def test_update_onto_occupied_slot_replaces_occupant():
    store = _store()
    store.add_keyframe(_kf("a", frame=0))
    store.add_keyframe(_kf("b", frame=10))
    store.update_keyframe("b", frame=0)
    assert [kf.id for kf in store.keyframes] == ["b"]
    assert store.get_keyframe("b").frame == 0


def test_queries_filter_without_sorting():
    store = _store()
    store.add_keyframe(_kf("late", frame=30))
    store.add_keyframe(_kf("early", frame=0))
    store.add_keyframe(_kf("other", obj="obj-2", frame=30))
    assert [kf.id for kf in store.get_keyframes_for_object("obj-1")] == ["late", "early"]
    assert [kf.id for kf in store.get_keyframes_at_frame(30)] == ["late", "other"]


def test_select_all_at_frame_replaces_selection():
    store = _store()
    store.add_keyframe(_kf("a", frame=5))
    store.add_keyframe(_kf("b", frame=5, prop="rotation"))
    store.add_keyframe(_kf("c", frame=6))
    store.select_keyframe("c")
    store.select_all_at_frame(5)
    assert store.selected_keyframe_ids == ["a", "b"]


def test_selection_helpers():
    store = _store()
    store.add_keyframe(_kf("a", frame=1))
    store.add_keyframe(_kf("b", frame=2))
    store.select_keyframe("a")
    store.select_keyframe("b", add_to_selection=True)
    store.select_keyframe("b", add_to_selection=True)
    assert store.selected_keyframe_ids == ["a", "b"]
    store.deselect_keyframe("a")
    assert store.selected_keyframe_ids == ["b"]
    store.delete_selected()
    assert [kf.id for kf in store.keyframes] == ["a"]
    assert store.selected_keyframe_ids == []


def test_copy_paste_shifts_by_playhead():
    store = _store()
    store.add_keyframe(_kf("a", frame=10, value=0))
    store.add_keyframe(_kf("b", frame=20, value=100))
    store.select_keyframe("a")
    store.select_keyframe("b", add_to_selection=True)
    store.copy_selected()
    assert store.clipboard.source_frame == 10

    store.set_current_frame(25)
    pasted = store.paste()

    assert sorted(kf.frame for kf in pasted) == [25, 35]
    assert {kf.id for kf in pasted}.isdisjoint({"a", "b"})
    assert len({kf.id for kf in pasted}) == 2
    assert store.selected_keyframe_ids == [kf.id for kf in pasted]
    assert len(store) == 4


def test_paste_to_target_object():
    store = _store()
    store.add_keyframe(_kf("a", frame=0))
    store.select_keyframe("a")
    store.copy_selected()
    store.set_current_frame(3)
    pasted = store.paste("obj-2")
    assert pasted[0].object_id == "obj-2"
    assert pasted[0].frame == 3
    assert store.get_keyframe("a").object_id == "obj-1"


def test_copy_empty_selection_and_paste_without_clipboard_are_noops():
    store = _store()
    store.add_keyframe(_kf("a"))
    assert store.paste() == []
    store.copy_selected()
    assert store.clipboard is None
    store.select_keyframe("a")
    store.copy_selected()
    store.clear_selection()
    store.copy_selected()
    assert store.clipboard.keyframes[0].property is KeyframeProperty.OPACITY


def test_set_and_clear_keyframes():
    store = _store()
    store.add_keyframe(_kf("a"))
    store.select_keyframe("a")
    store.set_keyframes([_kf("x", frame=1), _kf("y", frame=1, value=9)])
    assert [kf.id for kf in store.keyframes] == ["y"]
    assert store.selected_keyframe_ids == []
    store.clear_keyframes()
    assert store.keyframes == []


def test_playback_flags():
    store = _store()
    store.set_current_frame(12)
    store.play()
    assert store.is_playing
    store.toggle_playback()
    assert not store.is_playing
    store.play()
    store.stop()
    assert not store.is_playing
    assert store.current_frame == 0


def test_snapshot_is_detached():
    store = _store()
    store.add_keyframe(_kf("a"))
    snap = store.snapshot()
    store.add_keyframe(_kf("b", frame=4))
    assert len(snap.keyframes) == 1
    assert snap.duration == 60
    assert snap.frame_rate == 30


def test_keyframe_requires_an_id():
    with pytest.raises(TypeError):
        Keyframe(object_id="obj-1", frame=0, property=KeyframeProperty.OPACITY, value=0)


def test_keyframes_in_different_slots_are_kept_apart():
    store = _store()
    store.add_keyframe(Keyframe(id="k0", object_id="o", frame=0, property=KeyframeProperty.OPACITY, value=0))
    store.add_keyframe(Keyframe(id="k30", object_id="o", frame=30, property=KeyframeProperty.OPACITY, value=100))
    assert len(store) == 2


def test_add_keyframe_rejects_empty_id():
    store = _store()
    with pytest.raises(ValueError):
        store.add_keyframe(_kf(""))
    assert len(store) == 0


def test_negative_frames_are_rejected():
    store = _store()
    with pytest.raises(ValueError):
        store.add_keyframe(_kf("neg", frame=-1))
    store.add_keyframe(_kf("a", frame=4))
    with pytest.raises(ValueError):
        store.update_keyframe("a", frame=-5)
    assert store.get_keyframe("a").frame == 4
    assert len(store) == 1
