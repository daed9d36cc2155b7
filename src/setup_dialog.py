from typing import Optional, Sequence

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QDialog, QVBoxLayout, QLabel, QProgressBar

from src.logger import info, critical
from src.thumbnails import ThumbnailPipeline, ThumbnailReport, ThumbnailWorker
from src.translations import tr, format_tr


class SetupDialog(QDialog):
    """Modal progress dialog shown while thumbnails are generated.

    Accepted once the batch finishes; rejected if the output directory
    cannot be created, with the reason left in `error_message`.
    """

    def __init__(self, pipeline: ThumbnailPipeline, video_names: Sequence[str], parent=None):
        super().__init__(parent)
        self.report: Optional[ThumbnailReport] = None
        self.error_message: Optional[str] = None

        self.worker = ThumbnailWorker(pipeline, video_names, self)
        self.worker.progress.connect(self.on_progress)
        self.worker.finished_batch.connect(self.on_finished)
        self.worker.fatal.connect(self.on_fatal)

        self.init_ui(len(video_names))

    def init_ui(self, total: int):
        self.setWindowTitle(tr('setup_title'))
        self.setFixedSize(420, 140)
        self.setWindowFlags(self.windowFlags() & ~Qt.WindowType.WindowCloseButtonHint)

        layout = QVBoxLayout()
        self.message_label = QLabel(tr('generating_thumbnails'))
        self.message_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.message_label.setStyleSheet("font-size: 16px; padding: 10px;")
        self.progress_bar = QProgressBar()
        self.progress_bar.setRange(0, max(total, 1))
        self.progress_bar.setValue(0)
        layout.addWidget(self.message_label)
        layout.addWidget(self.progress_bar)
        self.setLayout(layout)

    def exec(self):
        self.worker.start()
        return super().exec()

    def reject(self):
        # Esc is ignored while the worker runs
        if self.worker.isRunning():
            return
        super().reject()

    def on_progress(self, position: int, total: int, video_name: str):
        self.message_label.setText(format_tr('generating_thumbnails_progress', position, total))
        self.progress_bar.setValue(position)

    def on_finished(self, report: ThumbnailReport):
        self.report = report
        self.worker.wait()
        info(f"Thumbnail pass done for {report.total} videos")
        self.accept()

    def on_fatal(self, message: str):
        self.error_message = message
        critical(message)
        self.worker.wait()
        super().reject()
