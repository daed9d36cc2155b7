import sys
from PyQt6.QtWidgets import QApplication, QMessageBox, QDialog
from PyQt6.QtCore import QSettings
from src.config import load_config
from src.errors import ConfigError
from src.library import LibraryModel
from src.main_window import MainWindow
from src.setup_dialog import SetupDialog
from src.thumbnails import ThumbnailPipeline, DEFAULT_TGP_SCRIPT
from src.translations import init_language, tr, SETTINGS_ORG, SETTINGS_APP
from src.logger import set_log_level, info, critical

EXIT_CONFIG_ERROR = 1
EXIT_THUMBNAIL_DIR_ERROR = 3


def main():
    app = QApplication(sys.argv)
    app.setApplicationName("PV Organizer")

    init_language()
    settings = QSettings(SETTINGS_ORG, SETTINGS_APP)
    set_log_level(settings.value('log_level', 'INFO'))

    config_path = sys.argv[1] if len(sys.argv) > 1 else None
    try:
        config = load_config(config_path)
    except ConfigError as e:
        critical(str(e))
        sys.exit(EXIT_CONFIG_ERROR)

    library = LibraryModel(config)
    library.reload()
    info(f"PV Organizer starting with {len(library.cursor)} combinations")

    pipeline = ThumbnailPipeline(config.tgp_script or DEFAULT_TGP_SCRIPT,
                                 config.vid_path, config.img_path)
    setup_dialog = SetupDialog(pipeline, library.video_names)
    if setup_dialog.exec() != QDialog.DialogCode.Accepted:
        QMessageBox.critical(None, tr('thumbnail_dir_error_title'),
                             setup_dialog.error_message or '')
        sys.exit(EXIT_THUMBNAIL_DIR_ERROR)

    main_window = MainWindow(library)
    main_window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
