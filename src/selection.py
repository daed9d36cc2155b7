from typing import FrozenSet, Iterable, Set

from PyQt6.QtCore import QObject, pyqtSignal

from src.logger import debug


class SelectionState(QObject):
    """The user's chosen videos, galleries and tags.

    `changed` fires synchronously after any mutation that alters a set, so
    whatever is connected to it has finished before the mutator returns.
    """

    changed = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._videos: Set[str] = set()
        self._galleries: Set[str] = set()
        self._tags: Set[str] = set()

    # -- read access -------------------------------------------------------

    @property
    def videos(self) -> FrozenSet[str]:
        return frozenset(self._videos)

    @property
    def galleries(self) -> FrozenSet[str]:
        return frozenset(self._galleries)

    @property
    def tags(self) -> FrozenSet[str]:
        return frozenset(self._tags)

    # -- internals ---------------------------------------------------------

    def _add(self, target: Set[str], name: str) -> None:
        if name not in target:
            target.add(name)
            self.changed.emit()

    def _remove(self, target: Set[str], name: str) -> None:
        if name in target:
            target.discard(name)
            self.changed.emit()

    def _replace(self, target: Set[str], names: Iterable[str]) -> None:
        new_names = set(names)
        if new_names != target:
            target.clear()
            target.update(new_names)
            self.changed.emit()

    # -- mutators ----------------------------------------------------------

    def add_video(self, name: str) -> None:
        self._add(self._videos, name)

    def remove_video(self, name: str) -> None:
        self._remove(self._videos, name)

    def set_videos(self, names: Iterable[str]) -> None:
        self._replace(self._videos, names)

    def add_gallery(self, name: str) -> None:
        self._add(self._galleries, name)

    def remove_gallery(self, name: str) -> None:
        self._remove(self._galleries, name)

    def set_galleries(self, names: Iterable[str]) -> None:
        self._replace(self._galleries, names)

    def add_tag(self, name: str) -> None:
        self._add(self._tags, name)

    def remove_tag(self, name: str) -> None:
        self._remove(self._tags, name)

    def set_tags(self, names: Iterable[str]) -> None:
        self._replace(self._tags, names)

    def reset(self, videos: Iterable[str], galleries: Iterable[str]) -> None:
        """Select every video and gallery and no tags, with one notification"""
        self._videos = set(videos)
        self._galleries = set(galleries)
        self._tags = set()
        debug(f"Selection reset: {len(self._videos)} videos, {len(self._galleries)} galleries")
        self.changed.emit()
