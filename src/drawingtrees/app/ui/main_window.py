"""
Main Application Window
=======================
Holds the insert and layout panels on the left and the tree view on the
right, with a small console dock listing what happened.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import QMainWindow, QPlainTextEdit, QDockWidget, QWidget

from drawingtrees import config
from drawingtrees.app.application import VISIBLE_APP_NAME
from drawingtrees.app.state import Store
from drawingtrees.app.ui.panels import InsertPanel, ParametersPanel
from drawingtrees.app.ui.workarea import WorkArea


class Console(QPlainTextEdit):
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setReadOnly(True)

    def _log(self, level: str, msg: str) -> None:
        self.appendPlainText(f"{datetime.now().strftime('%d.%m.%Y %H:%M:%S')} [{level}] {msg}")

    def info(self, msg: str) -> None:
        self._log("info", msg)


class MainWindow(QMainWindow):
    def __init__(self, store: Store | None = None) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(config.WINDOW_WIDTH, config.WINDOW_HEIGHT)

        # Global store
        self.store = store or Store()

        self.work_area = WorkArea(self)
        self.setCentralWidget(self.work_area)

        self.insert_panel = InsertPanel(self.store, parent=self)
        self.parameters_panel = ParametersPanel(self.store, parent=self)
        self.work_area.add_panel(self.insert_panel)
        self.work_area.add_panel(self.parameters_panel)

        self.console = Console(self)
        dock = QDockWidget(self.tr("Console"), self)
        dock.setObjectName("dockConsole")
        dock.setWidget(self.console)
        dock.setFeatures(QDockWidget.DockWidgetFeature.NoDockWidgetFeatures)
        self.addDockWidget(Qt.DockWidgetArea.BottomDockWidgetArea, dock)

        # Wiring
        view = self.work_area.view
        self.store.attach_surface(view.surface, view.viewport_size()[0])
        view.resized.connect(self._on_view_resized)
        self.store.value_inserted.connect(self._on_value_inserted)
        self.store.tree_reset.connect(lambda: self.console.info(self.tr("Tree reset.")))

        self.insert_panel.input.setFocus()

    @Slot(float, float)
    def _on_view_resized(self, width: float, height: float) -> None:
        """Keep the root centred horizontally whenever the view size changes."""
        self.store.set_surface_width(width)

    @Slot(object)
    def _on_value_inserted(self, value: Any) -> None:
        self.console.info(
            self.tr("Inserted {value!r} ({n} nodes)").format(value=value, n=len(self.store.tree))
        )
