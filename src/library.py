"""
Library model for PV Organizer

Owns everything the views observe: the configuration, discovery results,
the relation index, the selection, the combination cursor, the gallery
slideshow and the playback flags. Views read from it and mutate it only
through its methods (or those of `selection` and `cursor`).

Wiring, all on the GUI thread:
    selection.changed        -> regenerate() -> cursor.reset()
    cursor.current_changed   -> slideshow.restart(current gallery images)
"""

import os
import random
from typing import Callable, Dict, List, Optional

from PyQt6.QtCore import QObject, pyqtSignal

from src.combinations import Combination, generate_combinations
from src.config import AppConfig, load_config
from src.logger import debug, info
from src.playback import PlaybackCursor, PlaybackState
from src.relation_index import RelationIndex, build_index
from src.selection import SelectionState
from src.slideshow import SlideshowTimer, SLIDESHOW_INTERVAL_MS
from src.thumbnails import thumbnail_path
from utils.media_utils import get_video_names, get_gallery_names, get_gallery_images


class LibraryModel(QObject):
    reloaded = pyqtSignal()
    combinations_changed = pyqtSignal(int)     # number of combinations
    current_changed = pyqtSignal(object)       # Combination or None
    image_changed = pyqtSignal(object)         # image path or None
    playback_changed = pyqtSignal(object)      # PlaybackState

    def __init__(self, config: AppConfig,
                 config_loader: Callable[[Optional[str]], AppConfig] = load_config,
                 rng: Optional[random.Random] = None,
                 slideshow_interval_ms: int = SLIDESHOW_INTERVAL_MS,
                 parent=None):
        super().__init__(parent)
        self.config = config
        self._config_loader = config_loader
        self._rng = rng

        self.video_names: List[str] = []
        self.gallery_names: List[str] = []
        self.tag_names: List[str] = []
        self.gallery_images: Dict[str, List[str]] = {}
        self.index = RelationIndex()
        self.playback = PlaybackState()

        self.selection = SelectionState(self)
        self.cursor = PlaybackCursor(self)
        self.slideshow = SlideshowTimer(slideshow_interval_ms, self)

        self.selection.changed.connect(self.regenerate)
        self.cursor.current_changed.connect(self._on_current_changed)
        self.slideshow.image_changed.connect(self.image_changed)

    # -- loading -----------------------------------------------------------

    def reload(self, reread_config: bool = False) -> None:
        """Rebuild everything from the configuration and the filesystem.

        With reread_config the document is loaded again first; a ConfigError
        from that propagates and leaves the current state untouched.
        """
        if reread_config:
            self.config = self._config_loader(self.config.source_path)

        config = self.config
        self.video_names = get_video_names(config.vid_path)
        self.gallery_names = get_gallery_names(config.nam_path)
        self.tag_names = list(config.tags)
        self.index = build_index(self.video_names, self.gallery_names,
                                 self.tag_names, config.video_relations)
        self.gallery_images = get_gallery_images(config.nam_path, self.gallery_names)
        info(f"Library loaded: {len(self.video_names)} videos, "
             f"{len(self.gallery_names)} galleries, {len(self.tag_names)} tags")

        # reset() emits changed once, which regenerates the combinations
        self.selection.reset(self.video_names, self.gallery_names)
        self.reloaded.emit()

    def regenerate(self) -> None:
        combinations = generate_combinations(self.index, self.selection, self._rng)
        debug(f"Generated {len(combinations)} combinations")
        self.combinations_changed.emit(len(combinations))
        self.cursor.reset(combinations)

    # -- current combination -----------------------------------------------

    def current_combination(self) -> Optional[Combination]:
        return self.cursor.current()

    def next_combination(self) -> None:
        self.cursor.next()

    def previous_combination(self) -> None:
        self.cursor.previous()

    def images_for(self, gallery_name: str) -> List[str]:
        return list(self.gallery_images.get(gallery_name, []))

    def video_path(self, video_name: str) -> str:
        return os.path.join(self.config.vid_path, video_name)

    def thumbnail_for(self, video_name: str) -> Optional[str]:
        """Path of the video's generated thumbnail if it exists"""
        path = thumbnail_path(self.config.img_path, video_name)
        return path if os.path.isfile(path) else None

    def _on_current_changed(self, combination: Optional[Combination]) -> None:
        if combination is None:
            self.slideshow.stop()
            self.image_changed.emit(None)
        else:
            self.slideshow.restart(self.images_for(combination.gallery_name))
        self.current_changed.emit(combination)

    # -- playback flags ----------------------------------------------------

    def set_tgp_shown(self, shown: bool) -> None:
        if self.playback.tgp_shown != shown:
            self.playback.tgp_shown = shown
            self.playback_changed.emit(self.playback)

    def toggle_tgp_shown(self) -> None:
        self.set_tgp_shown(not self.playback.tgp_shown)

    def set_video_playing(self, playing: bool) -> None:
        if self.playback.video_playing != playing:
            self.playback.video_playing = playing
            self.playback_changed.emit(self.playback)

    def toggle_video_playing(self) -> None:
        self.set_video_playing(not self.playback.video_playing)

    def shutdown(self) -> None:
        self.slideshow.stop()
