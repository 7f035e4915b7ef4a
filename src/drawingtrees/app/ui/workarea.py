from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QSplitter, QVBoxLayout

from drawingtrees.app.ui.tree_view import TreeView


class WorkArea(QWidget):
    """The main work area with a splitter between the side panels column and the tree view."""
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        v = QVBoxLayout(self)
        split = QSplitter(Qt.Orientation.Horizontal, self)
        split.setChildrenCollapsible(False)
        v.addWidget(split, 1)

        self.panel_column = QWidget(split)
        self._panel_layout = QVBoxLayout(self.panel_column)
        self._panel_layout.setContentsMargins(0, 0, 0, 0)
        self._panel_layout.addStretch()

        self.view = TreeView(split)

        split.addWidget(self.panel_column)
        split.addWidget(self.view)
        split.setStretchFactor(0, 0)
        split.setStretchFactor(1, 1)

    def add_panel(self, panel: QWidget) -> None:
        """Append a panel to the left column, above the trailing stretch."""
        self._panel_layout.insertWidget(self._panel_layout.count() - 1, panel)
