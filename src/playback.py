from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from PyQt6.QtCore import QObject, pyqtSignal

from src.combinations import Combination
from src.logger import warning


@dataclass
class PlaybackState:
    tgp_shown: bool = True        # gallery overlay visible
    video_playing: bool = False


class PlaybackCursor(QObject):
    """Cyclic position within the generated combination sequence.

    `current_changed` carries the new current Combination, or None once the
    sequence is empty. It is emitted on reset and on every move.
    """

    current_changed = pyqtSignal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._combinations: List[Combination] = []
        self._index: Optional[int] = None

    def __len__(self) -> int:
        return len(self._combinations)

    @property
    def combinations(self) -> Tuple[Combination, ...]:
        return tuple(self._combinations)

    @property
    def index(self) -> Optional[int]:
        """Position of the current combination, None when there is none"""
        return self._index

    def reset(self, combinations: Iterable[Combination]) -> None:
        self._combinations = list(combinations)
        self._index = 0 if self._combinations else None
        if self._index is None:
            warning("No combinations found.")
        self.current_changed.emit(self.current())

    def next(self) -> None:
        if not self._combinations:
            return
        self._index = (self._index + 1) % len(self._combinations)
        self.current_changed.emit(self.current())

    def previous(self) -> None:
        if not self._combinations:
            return
        count = len(self._combinations)
        self._index = (self._index - 1 + count) % count
        self.current_changed.emit(self.current())

    def current(self) -> Optional[Combination]:
        if self._index is None:
            return None
        return self._combinations[self._index]
