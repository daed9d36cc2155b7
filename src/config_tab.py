from typing import Callable, Iterable

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QListWidget,
                             QListWidgetItem, QPushButton, QLabel, QAbstractItemView)

from src.library import LibraryModel
from src.translations import tr, format_tr


class SelectionList(QGroupBox):
    """Checkable list of names bound to one of the selection sets"""

    def __init__(self, title: str,
                 on_checked: Callable[[str], None],
                 on_unchecked: Callable[[str], None],
                 on_replace: Callable[[Iterable[str]], None],
                 parent=None):
        super().__init__(title, parent)
        self._on_checked = on_checked
        self._on_unchecked = on_unchecked
        self._on_replace = on_replace
        self._names = []

        layout = QVBoxLayout()
        self.list_widget = QListWidget()
        self.list_widget.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self.list_widget.itemChanged.connect(self.on_item_changed)
        layout.addWidget(self.list_widget)

        buttons = QHBoxLayout()
        self.all_btn = QPushButton(tr('select_all'))
        self.all_btn.clicked.connect(lambda: self._on_replace(self._names))
        self.none_btn = QPushButton(tr('select_none'))
        self.none_btn.clicked.connect(lambda: self._on_replace([]))
        buttons.addWidget(self.all_btn)
        buttons.addWidget(self.none_btn)
        buttons.addStretch()
        layout.addLayout(buttons)
        self.setLayout(layout)

    def populate(self, names: Iterable[str], selected: Iterable[str]):
        self._names = sorted(names, key=str.lower)
        selected = set(selected)
        self.list_widget.blockSignals(True)
        self.list_widget.clear()
        for name in self._names:
            item = QListWidgetItem(name)
            item.setFlags(item.flags() | Qt.ItemFlag.ItemIsUserCheckable)
            item.setCheckState(Qt.CheckState.Checked if name in selected else Qt.CheckState.Unchecked)
            self.list_widget.addItem(item)
        self.list_widget.blockSignals(False)

    def sync(self, selected: Iterable[str]):
        """Update check marks without reporting them back"""
        selected = set(selected)
        self.list_widget.blockSignals(True)
        for row in range(self.list_widget.count()):
            item = self.list_widget.item(row)
            item.setCheckState(Qt.CheckState.Checked if item.text() in selected
                               else Qt.CheckState.Unchecked)
        self.list_widget.blockSignals(False)

    def on_item_changed(self, item: QListWidgetItem):
        if item.checkState() == Qt.CheckState.Checked:
            self._on_checked(item.text())
        else:
            self._on_unchecked(item.text())


class ConfigTab(QWidget):
    def __init__(self, library: LibraryModel, on_reload: Callable[[], None], parent=None):
        super().__init__(parent)
        self.library = library
        self._on_reload = on_reload
        self.init_ui()

        library.reloaded.connect(self.populate)
        library.selection.changed.connect(self.sync)
        library.combinations_changed.connect(self.on_combinations_changed)
        self.populate()
        self.on_combinations_changed(len(library.cursor))

    def init_ui(self):
        selection = self.library.selection
        layout = QVBoxLayout()

        lists = QHBoxLayout()
        self.videos_list = SelectionList(tr('videos'), selection.add_video,
                                         selection.remove_video, selection.set_videos)
        self.galleries_list = SelectionList(tr('galleries'), selection.add_gallery,
                                            selection.remove_gallery, selection.set_galleries)
        self.tags_list = SelectionList(tr('tags'), selection.add_tag,
                                       selection.remove_tag, selection.set_tags)
        lists.addWidget(self.videos_list)
        lists.addWidget(self.galleries_list)
        lists.addWidget(self.tags_list)
        layout.addLayout(lists, 1)

        footer = QHBoxLayout()
        self.count_label = QLabel()
        self.reload_btn = QPushButton(tr('reload'))
        self.reload_btn.clicked.connect(self._on_reload)
        footer.addWidget(self.count_label)
        footer.addStretch()
        footer.addWidget(self.reload_btn)
        layout.addLayout(footer)

        self.setLayout(layout)

    def populate(self):
        selection = self.library.selection
        self.videos_list.populate(self.library.video_names, selection.videos)
        self.galleries_list.populate(self.library.gallery_names, selection.galleries)
        self.tags_list.populate(self.library.tag_names, selection.tags)

    def sync(self):
        selection = self.library.selection
        self.videos_list.sync(selection.videos)
        self.galleries_list.sync(selection.galleries)
        self.tags_list.sync(selection.tags)

    def on_combinations_changed(self, count: int):
        self.count_label.setText(format_tr('combination_count', count))
