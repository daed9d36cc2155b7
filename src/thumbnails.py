"""
Thumbnail generation for PV Organizer

Each video gets one preview image written by an external tool, invoked as

    <tool> <video path> <image directory>

The tool is expected to write `<video file name>.jpg` into the image
directory. Videos whose image already exists are skipped, so re-running the
batch only invokes the tool for new videos.
"""

import os
import subprocess
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from PyQt6.QtCore import QThread, pyqtSignal

from src.errors import ThumbnailDirectoryError
from src.logger import debug, info, warning, error

THUMBNAIL_SUFFIX = '.jpg'
THUMBNAIL_TIMEOUT_SEC = 120

# Installed as package data alongside this module
DEFAULT_TGP_SCRIPT = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'scripts', 'gen_tgp.sh')

ProgressCallback = Callable[[int, int, str], None]


def thumbnail_name(video_name: str) -> str:
    return os.path.basename(video_name) + THUMBNAIL_SUFFIX


def thumbnail_path(img_dir: str, video_name: str) -> str:
    return os.path.join(img_dir, thumbnail_name(video_name))


@dataclass
class ThumbnailReport:
    generated: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.generated) + len(self.skipped) + len(self.failed)


class ThumbnailPipeline:
    """Runs the thumbnail tool once per video that has no image yet"""

    def __init__(self, tool_path: str, video_dir: str, img_dir: str,
                 timeout: float = THUMBNAIL_TIMEOUT_SEC):
        self.tool_path = tool_path
        self.video_dir = video_dir
        self.img_dir = img_dir
        self.timeout = timeout

    def ensure_output_dir(self) -> None:
        if os.path.isdir(self.img_dir):
            return
        try:
            os.makedirs(self.img_dir, exist_ok=True)
        except OSError as e:
            raise ThumbnailDirectoryError(
                f"Unable to create image directory {self.img_dir}: {e}") from e
        info(f"Created image directory {self.img_dir}")

    def _invoke(self, video_path: str) -> bool:
        try:
            subprocess.run([self.tool_path, video_path, self.img_dir],
                           check=True, capture_output=True, timeout=self.timeout)
        except subprocess.TimeoutExpired:
            error(f"Thumbnail tool timed out after {self.timeout}s for {video_path}")
            return False
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.decode(errors='replace').strip() if e.stderr else ''
            error(f"Thumbnail tool failed for {video_path} (exit {e.returncode}) {stderr}")
            return False
        except OSError as e:
            error(f"Failed to run thumbnail tool {self.tool_path}: {e}")
            return False
        return True

    def run(self, video_names: Sequence[str],
            progress: Optional[ProgressCallback] = None) -> ThumbnailReport:
        """Generate missing thumbnails. Raises ThumbnailDirectoryError if the
        output directory cannot be created; every other failure is per video."""
        self.ensure_output_dir()

        report = ThumbnailReport()
        total = len(video_names)
        for position, video_name in enumerate(video_names, start=1):
            if progress:
                progress(position, total, video_name)

            output_path = thumbnail_path(self.img_dir, video_name)
            if os.path.exists(output_path):
                debug(f"File {output_path} exists, skipping.")
                report.skipped.append(video_name)
                continue

            if self._invoke(os.path.join(self.video_dir, video_name)):
                report.generated.append(video_name)
            else:
                report.failed.append(video_name)

        info(f"Thumbnails: {len(report.generated)} generated, "
             f"{len(report.skipped)} skipped, {len(report.failed)} failed")
        if report.failed:
            warning(f"No thumbnail for: {', '.join(report.failed)}")
        return report


class ThumbnailWorker(QThread):
    """Runs a ThumbnailPipeline off the GUI thread.

    The worker only reports back through signals; it never touches the
    library state.
    """

    progress = pyqtSignal(int, int, str)   # position, total, video name
    finished_batch = pyqtSignal(object)    # ThumbnailReport
    fatal = pyqtSignal(str)

    def __init__(self, pipeline: ThumbnailPipeline, video_names: Sequence[str], parent=None):
        super().__init__(parent)
        self._pipeline = pipeline
        self._video_names = list(video_names)

    def run(self):
        try:
            report = self._pipeline.run(self._video_names, progress=self.progress.emit)
        except ThumbnailDirectoryError as e:
            self.fatal.emit(str(e))
            return
        self.finished_batch.emit(report)
