from __future__ import annotations

import logging

from PySide6.QtCore import Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QGridLayout, QLineEdit, QPushButton,
)

from drawingtrees.app.state import Store
from drawingtrees.app.ui.panels.base import BasePanel
from drawingtrees.model.tree import Tree

logger = logging.getLogger(__name__)


class InsertPanel(BasePanel):
    """
    Panel for adding nodes.

    Only the first character of the input is inserted. Enter in the line edit
    works like the "Add" button.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        self.group = QGroupBox(self.tr("Insert"), self)
        root.addWidget(self.group)
        grid = QGridLayout(self.group)

        self.input = QLineEdit(self.group)
        self.input.setPlaceholderText(self.tr("Character"))
        grid.addWidget(self.input, 0, 0, 1, 2)

        self.button_add = QPushButton(self.tr("Add"), self.group)
        self.button_add.setDefault(True)
        grid.addWidget(self.button_add, 1, 0)

        self.button_reset = QPushButton(self.tr("Reset"), self.group)
        grid.addWidget(self.button_reset, 1, 1)

        # wiring
        self.input.returnPressed.connect(self._on_add)
        self.button_add.clicked.connect(self._on_add)
        self.button_reset.clicked.connect(self._on_reset)

        self.on_tree_changed(self.tree)

    def on_tree_changed(self, tree: Tree) -> None:
        # nothing to reset on an empty tree
        self.button_reset.setEnabled(len(tree) > 0)

    @Slot()
    def _on_add(self) -> None:
        text = self.input.text()
        if not text:
            logger.debug("Empty input ignored.")
            return
        self.store.insert(text[0])
        self.input.clear()
        self.input.setFocus()

    @Slot()
    def _on_reset(self) -> None:
        self.store.reset()
        self.input.setFocus()
