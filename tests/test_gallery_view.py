from __future__ import annotations

import pytest

from src.gallery_view import centered_offset, fill_size, fit_size


@pytest.mark.parametrize("image, pane, expected", [
    ((1600, 900), (800, 800), (800, 450)),
    ((900, 1600), (800, 800), (450, 800)),
    ((100, 100), (400, 200), (200, 200)),
    ((0, 100), (400, 200), (0, 0)),
])
def test_fit_size_keeps_aspect_inside_the_pane(image, pane, expected) -> None:
    assert fit_size(image, pane) == expected


@pytest.mark.parametrize("image, pane, expected", [
    ((1600, 900), (800, 800), (1422, 800)),
    ((900, 1600), (800, 800), (800, 1422)),
    ((100, 100), (400, 200), (400, 400)),
])
def test_fill_size_covers_the_pane(image, pane, expected) -> None:
    width, height = fill_size(image, pane)

    assert (width, height) == expected
    assert width >= pane[0] and height >= pane[1]


def test_centered_offset() -> None:
    # letterboxed image inside the pane
    assert centered_offset((800, 800), (800, 450)) == (0, 175)
    # crop window inside an oversized image
    assert centered_offset((1422, 800), (800, 800)) == (311, 0)
