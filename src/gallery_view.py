"""
Image panes for the View tab

Both the gallery slideshow and the video thumbnail are shown through
ImagePane, which loads a file, keeps the decoded pixmap and re-renders it for
the pane's size in the selected display mode. A pane with nothing to show
displays its placeholder text instead.
"""

from enum import Enum
from typing import Optional, Tuple

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QPixmap, QColor, QPainter
from PyQt6.QtWidgets import QLabel, QSizePolicy

from utils.media_utils import load_and_scale_image

# Images are decoded at most this large, the pane rescales from there
MAX_DECODE_SIZE = (2560, 2560)

BLUR_FACTOR = 8
BACKDROP_SHADE = QColor(0, 0, 0, 120)

Size = Tuple[int, int]


class DisplayMode(Enum):
    FIT = "Fit"  # black bars
    BLUR_FILL = "Blur Fill"  # blurred copy behind the image
    ZOOM_FILL = "Zoom Fill"  # crop to fill the pane


def fit_size(image: Size, pane: Size) -> Size:
    """Largest size with the image's aspect ratio that fits inside pane"""
    (iw, ih), (pw, ph) = image, pane
    if iw <= 0 or ih <= 0:
        return 0, 0
    scale = min(pw / iw, ph / ih)
    return max(1, round(iw * scale)), max(1, round(ih * scale))


def fill_size(image: Size, pane: Size) -> Size:
    """Smallest size with the image's aspect ratio that covers pane"""
    (iw, ih), (pw, ph) = image, pane
    if iw <= 0 or ih <= 0:
        return 0, 0
    scale = max(pw / iw, ph / ih)
    return max(pw, round(iw * scale)), max(ph, round(ih * scale))


def centered_offset(outer: Size, inner: Size) -> Tuple[int, int]:
    """Top-left position that centers inner on outer; negative when inner is larger"""
    return (outer[0] - inner[0]) // 2, (outer[1] - inner[1]) // 2


def _scaled(pixmap: QPixmap, size: Size) -> QPixmap:
    return pixmap.scaled(size[0], size[1], Qt.AspectRatioMode.IgnoreAspectRatio,
                         Qt.TransformationMode.SmoothTransformation)


class ImagePane(QLabel):
    """Shows one image file, or placeholder text when there is none"""

    def __init__(self, placeholder: str = '', parent=None):
        super().__init__(parent)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setStyleSheet("""
            QLabel {
                background-color: #0a0a0a;
                border: 1px solid #222;
                border-radius: 8px;
                color: #888;
            }
        """)
        self.setSizePolicy(QSizePolicy.Policy.Ignored, QSizePolicy.Policy.Ignored)
        self._placeholder = placeholder
        self._source: Optional[QPixmap] = None
        self._display_mode = DisplayMode.BLUR_FILL
        self._rendered_key = None
        self.setText(placeholder)

    def show_path(self, path: Optional[str]):
        pixmap = load_and_scale_image(path, MAX_DECODE_SIZE) if path else None
        if pixmap is None or pixmap.isNull():
            self._show_placeholder()
            return
        self._source = pixmap
        self._rendered_key = None
        self.setText('')
        self._render()

    def set_display_mode(self, mode: DisplayMode):
        if self._display_mode != mode:
            self._display_mode = mode
            self._render()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._render()

    def _show_placeholder(self):
        self._source = None
        self._rendered_key = None
        self.clear()
        self.setText(self._placeholder)

    def _render(self):
        pane = (self.width(), self.height())
        if self._source is None or pane[0] <= 0 or pane[1] <= 0:
            return
        key = (self._display_mode, pane)
        if key == self._rendered_key:
            return
        self._rendered_key = key

        image = (self._source.width(), self._source.height())
        if self._display_mode is DisplayMode.FIT:
            self.setPixmap(_scaled(self._source, fit_size(image, pane)))
        elif self._display_mode is DisplayMode.ZOOM_FILL:
            self.setPixmap(self._cover(pane))
        else:
            self.setPixmap(self._blur_fill(pane))

    def _cover(self, pane: Size) -> QPixmap:
        covering = fill_size((self._source.width(), self._source.height()), pane)
        x, y = centered_offset(covering, pane)
        return _scaled(self._source, covering).copy(x, y, pane[0], pane[1])

    def _blur_fill(self, pane: Size) -> QPixmap:
        # Downscale then upscale the covering crop for a cheap blur
        small = (max(1, pane[0] // BLUR_FACTOR), max(1, pane[1] // BLUR_FACTOR))
        canvas = _scaled(_scaled(self._cover(pane), small), pane)

        fitted_size = fit_size((self._source.width(), self._source.height()), pane)
        x, y = centered_offset(pane, fitted_size)

        painter = QPainter(canvas)
        painter.fillRect(canvas.rect(), BACKDROP_SHADE)
        painter.drawPixmap(x, y, _scaled(self._source, fitted_size))
        painter.end()
        return canvas
