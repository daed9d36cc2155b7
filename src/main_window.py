from PyQt6.QtWidgets import QMainWindow, QTabWidget, QMessageBox, QApplication
from PyQt6.QtCore import Qt, QSettings
from PyQt6.QtGui import QAction, QKeySequence, QActionGroup

from src.config_tab import ConfigTab
from src.errors import ConfigError
from src.gallery_view import DisplayMode
from src.library import LibraryModel
from src.logger import info, critical
from src.translations import tr, get_language, set_language, SETTINGS_ORG, SETTINGS_APP
from src.view_tab import ViewTab


class MainWindow(QMainWindow):
    def __init__(self, library: LibraryModel):
        super().__init__()
        self.library = library
        self.settings = QSettings(SETTINGS_ORG, SETTINGS_APP)
        self.init_ui()

    def init_ui(self):
        self.setWindowTitle("PV Organizer")
        self.resize(1200, 760)
        self.setStyleSheet("""
            QMainWindow {
                background-color: #141414;
            }
        """)

        self.tabs = QTabWidget()
        self.view_tab = ViewTab(self.library)
        self.config_tab = ConfigTab(self.library, self.reload_config)
        self.tabs.addTab(self.view_tab, tr('tab_view'))
        self.tabs.addTab(self.config_tab, tr('tab_config'))
        self.setCentralWidget(self.tabs)

        self.create_menu_bar()
        self.setup_shortcuts()

    def create_menu_bar(self):
        menubar = self.menuBar()
        menubar.clear()

        menubar.setStyleSheet("""
            QMenuBar {
                background-color: #2a2a2a;
                color: white;
            }
            QMenuBar::item:selected {
                background-color: #3a3a3a;
            }
            QMenu {
                background-color: #2a2a2a;
                color: white;
            }
            QMenu::item:selected {
                background-color: #3a3a3a;
            }
        """)

        # File menu
        file_menu = menubar.addMenu(tr('file'))

        reload_action = QAction(tr('reload_config'), self)
        reload_action.setShortcut('Ctrl+R')
        reload_action.triggered.connect(self.reload_config)
        file_menu.addAction(reload_action)

        fullscreen_action = QAction(tr('toggle_fullscreen'), self)
        fullscreen_action.setShortcut('F')
        fullscreen_action.triggered.connect(self.toggle_fullscreen)
        file_menu.addAction(fullscreen_action)

        file_menu.addSeparator()

        exit_action = QAction(tr('exit'), self)
        exit_action.setShortcut('Ctrl+Q')
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        # Playback menu
        playback_menu = menubar.addMenu(tr('playback'))

        next_action = QAction(tr('next_combination'), self)
        next_action.setShortcut(QKeySequence(Qt.Key.Key_Right))
        next_action.triggered.connect(self.library.next_combination)
        playback_menu.addAction(next_action)

        prev_action = QAction(tr('previous_combination'), self)
        prev_action.setShortcut(QKeySequence(Qt.Key.Key_Left))
        prev_action.triggered.connect(self.library.previous_combination)
        playback_menu.addAction(prev_action)

        playback_menu.addSeparator()

        play_pause_action = QAction(tr('play_pause'), self)
        play_pause_action.setShortcut('Space')
        play_pause_action.triggered.connect(self.library.toggle_video_playing)
        playback_menu.addAction(play_pause_action)

        gallery_action = QAction(tr('toggle_gallery'), self)
        gallery_action.setShortcut('G')
        gallery_action.triggered.connect(self.library.toggle_tgp_shown)
        playback_menu.addAction(gallery_action)

        # Fill menu
        fill_menu = menubar.addMenu(tr('fill'))
        self.display_mode_group = QActionGroup(self)
        self.display_mode_group.setExclusive(True)

        saved_mode_value = self.settings.value('display_mode', DisplayMode.BLUR_FILL.value)
        saved_mode = DisplayMode.BLUR_FILL
        for mode in DisplayMode:
            if mode.value == saved_mode_value:
                saved_mode = mode
                break

        for mode, key in ((DisplayMode.BLUR_FILL, 'blur_fill'),
                          (DisplayMode.FIT, 'fit'),
                          (DisplayMode.ZOOM_FILL, 'zoom_fill')):
            action = QAction(tr(key), self)
            action.setCheckable(True)
            action.setChecked(saved_mode == mode)
            action.triggered.connect(lambda checked, m=mode: self.set_display_mode(m))
            self.display_mode_group.addAction(action)
            fill_menu.addAction(action)

        self.view_tab.set_display_mode(saved_mode)

        # Language menu
        language_menu = menubar.addMenu('Language/语言')
        self.lang_group = QActionGroup(self)
        self.lang_group.setExclusive(True)

        for code, key in (('en', 'english'), ('zh', 'chinese')):
            action = QAction(tr(key), self)
            action.setCheckable(True)
            action.setChecked(get_language() == code)
            action.triggered.connect(lambda checked, c=code: self.change_language(c))
            self.lang_group.addAction(action)
            language_menu.addAction(action)

    def setup_shortcuts(self):
        esc_action = QAction(self)
        esc_action.setShortcut(QKeySequence(Qt.Key.Key_Escape))
        esc_action.triggered.connect(self.exit_fullscreen)
        self.addAction(esc_action)

    def toggle_fullscreen(self):
        if self.isFullScreen():
            self.showNormal()
        else:
            self.showFullScreen()

    def exit_fullscreen(self):
        if self.isFullScreen():
            self.showNormal()

    def set_display_mode(self, mode: DisplayMode):
        self.view_tab.set_display_mode(mode)
        self.settings.setValue('display_mode', mode.value)

    def change_language(self, lang_code):
        set_language(lang_code)
        self.create_menu_bar()
        self.tabs.setTabText(0, tr('tab_view'))
        self.tabs.setTabText(1, tr('tab_config'))

    def reload_config(self):
        """Re-read the configuration document and rebuild the library"""
        try:
            self.library.reload(reread_config=True)
        except ConfigError as e:
            # No valid configuration means nothing left to show
            critical(str(e))
            QMessageBox.critical(self, tr('config_error_title'), str(e))
            QApplication.exit(1)
            return
        info("Configuration reloaded")

    def closeEvent(self, event):
        self.library.shutdown()
        self.view_tab.stop()
        event.accept()
