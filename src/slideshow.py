from enum import Enum
from typing import List, Optional, Sequence

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from src.logger import debug

SLIDESHOW_INTERVAL_MS = 2000


class SlideshowState(Enum):
    STOPPED = "stopped"
    RUNNING = "running"


class SlideshowTimer(QObject):
    """Rotates through one gallery's images on a fixed interval.

    A single QTimer backs every run, so there is never more than one
    rotation in flight. `image_changed` carries the image path to show, or
    None when the gallery has no images.
    """

    image_changed = pyqtSignal(object)

    def __init__(self, interval_ms: int = SLIDESHOW_INTERVAL_MS, parent=None):
        super().__init__(parent)
        self._images: List[str] = []
        self._rotation_index = 0
        self._state = SlideshowState.STOPPED

        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self.tick)

    @property
    def state(self) -> SlideshowState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is SlideshowState.RUNNING

    @property
    def rotation_index(self) -> int:
        return self._rotation_index

    @property
    def images(self) -> List[str]:
        return list(self._images)

    @property
    def interval_ms(self) -> int:
        return self._timer.interval()

    def current_image(self) -> Optional[str]:
        if not self.is_running or not self._images:
            return None
        return self._images[self._rotation_index]

    def start(self, images: Sequence[str]) -> None:
        """Show the first of images and begin rotating"""
        if self.is_running:
            self.stop()
        self._images = list(images)
        self._rotation_index = 0
        self._state = SlideshowState.RUNNING
        self._timer.start()
        debug(f"Slideshow started with {len(self._images)} images")
        self.image_changed.emit(self.current_image())

    def stop(self) -> None:
        """Stop rotating. Stopping a stopped slideshow does nothing."""
        if not self.is_running:
            return
        self._timer.stop()
        self._state = SlideshowState.STOPPED
        self._rotation_index = 0

    def restart(self, images: Sequence[str]) -> None:
        self.stop()
        self.start(images)

    def tick(self) -> None:
        if not self.is_running:
            return
        # an empty gallery keeps ticking with nothing to show
        if self._images:
            self._rotation_index = (self._rotation_index + 1) % len(self._images)
        self.image_changed.emit(self.current_image())
