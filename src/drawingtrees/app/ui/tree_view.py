from __future__ import annotations

import logging

from PySide6.QtCore import QLineF, QPointF, QRectF, Qt, Signal
from PySide6.QtGui import QBrush, QColor, QFont, QPainter, QPen, QResizeEvent
from PySide6.QtWidgets import (
    QGraphicsItem, QGraphicsScene, QGraphicsSimpleTextItem, QGraphicsView, QWidget,
)

from drawingtrees import config
from drawingtrees.model.primitives import Circle, Label, Line, Primitive

logger = logging.getLogger(__name__)

# -------------------------------------------------------------------------------
# Surface
# -------------------------------------------------------------------------------

def label_pixel_size(box: float) -> int:
    """Font pixel size for text centred in a square box of side `box`."""
    return max(1, round(box * config.LABEL_FONT_SCALE))


class SceneSurface:
    """
    Drawing surface backed by a QGraphicsScene.

    Scene coordinates are used as-is, so (0, 0) is the top-left corner of the
    view when the scene rect starts at the origin.
    """
    def __init__(self, scene: QGraphicsScene) -> None:
        self.scene = scene

    def clear(self) -> None:
        self.scene.clear()

    def add(self, primitive: Primitive) -> QGraphicsItem:
        match primitive:
            case Circle():
                r = primitive.diameter / 2
                item = self.scene.addEllipse(
                    QRectF(primitive.x - r, primitive.y - r, primitive.diameter, primitive.diameter),
                    QPen(QColor(primitive.stroke), primitive.stroke_width),
                    QBrush(QColor(primitive.fill)),
                )

            case Line():
                item = self.scene.addLine(
                    QLineF(primitive.x1, primitive.y1, primitive.x2, primitive.y2),
                    QPen(QColor(primitive.stroke), primitive.stroke_width),
                )

            case Label():
                item = QGraphicsSimpleTextItem(primitive.text)
                item.setBrush(QBrush(QColor(primitive.color)))
                font = QFont(item.font())
                font.setPixelSize(label_pixel_size(primitive.size))
                item.setFont(font)
                # centre the text box on the node
                item.setPos(QPointF(primitive.x, primitive.y) - item.boundingRect().center())
                self.scene.addItem(item)

            case _:
                raise TypeError(f"Cannot draw {type(primitive).__name__}")

        item.setZValue(primitive.z)
        return item

# -------------------------------------------------------------------------------
# View widget
# -------------------------------------------------------------------------------

class TreeView(QGraphicsView):
    """
    Graphics view showing the tree.

    The scene rect always covers the visible viewport (anchored at the origin)
    plus everything drawn, so wide trees become scrollable instead of clipped.
    """
    resized = Signal(float, float)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        self._scene = QGraphicsScene(self)
        self.setScene(self._scene)
        self.surface = SceneSurface(self._scene)

        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
        self.setBackgroundBrush(QBrush(QColor("white")))

        self._scene.changed.connect(lambda *_: self._fit_scene_rect())

    def viewport_size(self) -> tuple[float, float]:
        vp = self.viewport()
        return float(vp.width()), float(vp.height())

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self._fit_scene_rect()
        w, h = self.viewport_size()
        logger.debug(f"View resized to {w:g}x{h:g}.")
        self.resized.emit(w, h)

    def _fit_scene_rect(self) -> None:
        w, h = self.viewport_size()
        rect = QRectF(0.0, 0.0, w, h).united(self._scene.itemsBoundingRect())
        if rect != self._scene.sceneRect():
            self._scene.setSceneRect(rect)
