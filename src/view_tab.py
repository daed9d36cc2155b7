from typing import Optional

from PyQt6.QtCore import Qt, QUrl
from PyQt6.QtMultimedia import QMediaPlayer, QAudioOutput
from PyQt6.QtMultimediaWidgets import QVideoWidget
from PyQt6.QtWidgets import (QWidget, QHBoxLayout, QVBoxLayout, QLabel, QPushButton,
                             QStackedWidget)

from src.combinations import Combination
from src.gallery_view import ImagePane, DisplayMode
from src.library import LibraryModel
from src.logger import debug, warning
from src.playback import PlaybackState
from src.translations import tr, format_tr


class VideoPane(QStackedWidget):
    """Thumbnail of the current video, swapped for the video itself while playing"""

    THUMBNAIL_PAGE = 0
    VIDEO_PAGE = 1

    def __init__(self, parent=None):
        super().__init__(parent)
        self.thumbnail_label = ImagePane(tr('thumbnail_not_found'))
        self.video_widget = QVideoWidget()
        self.addWidget(self.thumbnail_label)
        self.addWidget(self.video_widget)

        self.audio_output = QAudioOutput(self)
        self.player = QMediaPlayer(self)
        self.player.setAudioOutput(self.audio_output)
        self.player.setVideoOutput(self.video_widget)
        self.player.errorOccurred.connect(self.on_player_error)
        self._source: Optional[str] = None

    def load(self, video_path: Optional[str], thumbnail: Optional[str]):
        self.player.stop()
        self._source = video_path
        if video_path:
            self.player.setSource(QUrl.fromLocalFile(video_path))
        else:
            self.player.setSource(QUrl())

        self.thumbnail_label.show_path(thumbnail)

    def set_playing(self, playing: bool):
        if playing and self._source:
            self.setCurrentIndex(self.VIDEO_PAGE)
            self.player.play()
        else:
            self.player.pause()
            self.setCurrentIndex(self.THUMBNAIL_PAGE)

    def stop(self):
        self.player.stop()

    def on_player_error(self, err, message):
        warning(f"Video playback error for {self._source}: {message}")


class ViewTab(QWidget):
    def __init__(self, library: LibraryModel, parent=None):
        super().__init__(parent)
        self.library = library
        self.init_ui()

        library.current_changed.connect(self.on_current_changed)
        library.image_changed.connect(self.gallery_pane.show_path)
        library.playback_changed.connect(self.on_playback_changed)

        self.on_current_changed(library.cursor.current() if len(library.cursor) else None)
        self.gallery_pane.show_path(library.slideshow.current_image())
        self.on_playback_changed(library.playback)

    def init_ui(self):
        layout = QVBoxLayout()
        layout.setContentsMargins(8, 8, 8, 8)

        panes = QHBoxLayout()
        self.video_pane = VideoPane()
        self.gallery_pane = ImagePane(tr('image_not_found'))
        panes.addWidget(self.video_pane, 1)
        panes.addWidget(self.gallery_pane, 1)
        layout.addLayout(panes, 1)

        controls = QHBoxLayout()
        self.prev_btn = QPushButton(tr('previous_combination'))
        self.prev_btn.clicked.connect(self.library.previous_combination)
        self.play_btn = QPushButton(tr('play_pause'))
        self.play_btn.clicked.connect(self.library.toggle_video_playing)
        self.gallery_btn = QPushButton(tr('toggle_gallery'))
        self.gallery_btn.clicked.connect(self.library.toggle_tgp_shown)
        self.next_btn = QPushButton(tr('next_combination'))
        self.next_btn.clicked.connect(self.library.next_combination)

        self.status_label = QLabel()
        self.status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        controls.addWidget(self.prev_btn)
        controls.addWidget(self.play_btn)
        controls.addWidget(self.status_label, 1)
        controls.addWidget(self.gallery_btn)
        controls.addWidget(self.next_btn)
        layout.addLayout(controls)

        self.setLayout(layout)

    def set_display_mode(self, mode: DisplayMode):
        self.gallery_pane.set_display_mode(mode)
        self.video_pane.thumbnail_label.set_display_mode(mode)

    def on_current_changed(self, combination: Optional[Combination]):
        if combination is None:
            self.status_label.setText(tr('no_combinations'))
            self.video_pane.load(None, None)
            self.gallery_pane.show_path(None)
            self.library.set_video_playing(False)
            return

        index = self.library.cursor.index
        self.status_label.setText(format_tr('combination_status',
                                            combination.video_name, combination.gallery_name,
                                            index + 1, len(self.library.cursor)))
        debug(f"Showing {combination.video_name} with {combination.gallery_name}")
        self.video_pane.load(self.library.video_path(combination.video_name),
                             self.library.thumbnail_for(combination.video_name))
        self.video_pane.set_playing(self.library.playback.video_playing)

    def on_playback_changed(self, state: PlaybackState):
        self.gallery_pane.setVisible(state.tgp_shown)
        self.video_pane.set_playing(state.video_playing)

    def stop(self):
        self.video_pane.stop()
