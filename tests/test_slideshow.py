from __future__ import annotations

import pytest
from PyQt6.QtCore import QEventLoop, QTimer

from src.slideshow import SlideshowState, SlideshowTimer, SLIDESHOW_INTERVAL_MS

IMAGES = ["/g/1.jpg", "/g/2.jpg", "/g/3.jpg"]


def _spin(ms: int) -> None:
    loop = QEventLoop()
    QTimer.singleShot(ms, loop.quit)
    loop.exec()


@pytest.fixture()
def slideshow() -> SlideshowTimer:
    timer = SlideshowTimer()
    yield timer
    timer.stop()


def test_starts_stopped(slideshow: SlideshowTimer) -> None:
    assert slideshow.state is SlideshowState.STOPPED
    assert slideshow.current_image() is None
    assert slideshow.interval_ms == SLIDESHOW_INTERVAL_MS == 2000


def test_start_shows_the_first_image(slideshow: SlideshowTimer) -> None:
    shown: list[object] = []
    slideshow.image_changed.connect(shown.append)

    slideshow.start(IMAGES)

    assert slideshow.is_running
    assert slideshow.rotation_index == 0
    assert shown == ["/g/1.jpg"]


def test_ticks_rotate_back_to_the_start(slideshow: SlideshowTimer) -> None:
    slideshow.start(IMAGES)

    slideshow.tick()
    assert slideshow.current_image() == "/g/2.jpg"
    slideshow.tick()
    slideshow.tick()

    assert slideshow.rotation_index == 0
    assert slideshow.current_image() == "/g/1.jpg"


def test_restart_resets_rotation(slideshow: SlideshowTimer) -> None:
    slideshow.start(IMAGES)
    slideshow.tick()

    slideshow.restart(["/h/a.png", "/h/b.png"])

    assert slideshow.rotation_index == 0
    assert slideshow.current_image() == "/h/a.png"
    assert slideshow.is_running


def test_empty_gallery_runs_with_nothing_to_show(slideshow: SlideshowTimer) -> None:
    shown: list[object] = []
    slideshow.image_changed.connect(shown.append)

    slideshow.start([])
    slideshow.tick()

    assert slideshow.is_running
    assert slideshow.rotation_index == 0
    assert slideshow.current_image() is None
    assert shown == [None, None]


def test_stop_is_idempotent_and_silences_ticks(slideshow: SlideshowTimer) -> None:
    slideshow.start(IMAGES)
    shown: list[object] = []
    slideshow.image_changed.connect(shown.append)

    slideshow.stop()
    slideshow.stop()
    slideshow.tick()

    assert slideshow.state is SlideshowState.STOPPED
    assert slideshow.current_image() is None
    assert shown == []


def test_start_copies_the_image_list(slideshow: SlideshowTimer) -> None:
    images = list(IMAGES)
    slideshow.start(images)
    images.clear()

    assert slideshow.images == IMAGES


def test_live_timer_rotates_until_stopped() -> None:
    slideshow = SlideshowTimer(interval_ms=20)
    shown: list[object] = []
    slideshow.image_changed.connect(shown.append)

    slideshow.start(IMAGES)
    _spin(110)

    assert len(shown) > 1
    assert shown[1] == "/g/2.jpg"

    slideshow.stop()
    emitted = len(shown)
    _spin(80)

    assert slideshow.rotation_index == 0
    assert len(shown) == emitted
