from __future__ import annotations

from src.selection import SelectionState


def _watched() -> tuple[SelectionState, list[int]]:
    selection = SelectionState()
    calls: list[int] = []
    selection.changed.connect(lambda: calls.append(1))
    return selection, calls


def test_reset_selects_all_videos_and_galleries_and_no_tags() -> None:
    selection, calls = _watched()
    selection.add_tag("x")
    calls.clear()

    selection.reset(["a.mp4", "b.mp4"], ["G1"])

    assert selection.videos == {"a.mp4", "b.mp4"}
    assert selection.galleries == {"G1"}
    assert selection.tags == frozenset()
    assert len(calls) == 1


def test_add_and_remove_notify_only_on_change() -> None:
    selection, calls = _watched()

    selection.add_video("a.mp4")
    selection.add_video("a.mp4")
    selection.remove_video("missing.mp4")
    selection.remove_video("a.mp4")

    assert len(calls) == 2
    assert selection.videos == frozenset()


def test_set_replaces_the_whole_set() -> None:
    selection, calls = _watched()
    selection.set_galleries(["G1", "G2"])

    selection.set_galleries(["G3"])
    selection.set_galleries(["G3"])

    assert selection.galleries == {"G3"}
    assert len(calls) == 2


def test_tag_mutators() -> None:
    selection = SelectionState()

    selection.add_tag("x")
    selection.add_tag("y")
    selection.remove_tag("x")

    assert selection.tags == {"y"}


def test_read_access_returns_snapshots() -> None:
    selection = SelectionState()
    selection.add_video("a.mp4")

    snapshot = selection.videos
    selection.add_video("b.mp4")

    assert snapshot == {"a.mp4"}
    assert isinstance(snapshot, frozenset)


def test_listener_sees_the_new_state_synchronously() -> None:
    selection = SelectionState()
    seen: list[frozenset[str]] = []
    selection.changed.connect(lambda: seen.append(selection.galleries))

    selection.add_gallery("G1")
    selection.remove_gallery("G1")

    assert seen == [frozenset({"G1"}), frozenset()]
