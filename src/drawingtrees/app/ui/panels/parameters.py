from __future__ import annotations

from PySide6.QtCore import Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QLabel, QGridLayout,
    QSizePolicy, QDoubleSpinBox
)

from drawingtrees import config
from drawingtrees.app.state import Store
from drawingtrees.app.ui.panels.base import BasePanel


class ParametersPanel(BasePanel):
    """Spin boxes for the layout sizes. Every change redraws the tree once."""
    TITLE: str = "Layout"

    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)
        box = QGroupBox(self.tr(self.TITLE), self)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(box)
        self.grid = QGridLayout(box)
        self.grid.setVerticalSpacing(8)
        self._spins: dict[str, QDoubleSpinBox] = {}
        self._row = 0

        p = store.params
        self._add_spin("diameter", "Diameter:", config.DIAMETER_RANGE, p.diameter)
        self._add_spin("level_height", "Level height:", config.LEVEL_HEIGHT_RANGE, p.level_height)
        self._add_spin("child_separation", "Child separation:", config.CHILD_SEPARATION_RANGE, p.child_separation)
        for w in self._spins.values():
            w.valueChanged.connect(self._relay_changed)

    # ---- utilities ----

    def _next_row(self) -> int:
        r = self._row
        self._row += 1
        return r

    def _add_spin(
        self,
        key: str,
        label: str,
        value_range: tuple[float, float, float],
        default: float,
        *,
        suffix: str = "px",
        decimals: int = 1
    ) -> QDoubleSpinBox:
        min_value, max_value, step = value_range
        row = self._next_row()
        lab = QLabel(self.tr(label), self)
        self.grid.addWidget(lab, row, 0)
        w = QDoubleSpinBox(self)
        w.setRange(min_value, max_value)
        w.setSingleStep(step)
        w.setDecimals(decimals)
        w.setValue(default)
        w.setKeyboardTracking(False)
        w.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        if suffix:
            w.setSuffix(f" {suffix}")
        self.grid.addWidget(w, row, 1)
        self._spins[key] = w
        return w

    def spin(self, key: str) -> QDoubleSpinBox:
        return self._spins[key]

    def params(self) -> dict[str, float]:
        return {k: w.value() for k, w in self._spins.items()}

    @Slot()
    def _relay_changed(self) -> None:
        self.store.set_parameters(**self.params())
