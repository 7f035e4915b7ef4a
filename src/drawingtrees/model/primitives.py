"""
Drawing Primitives
==================
The small vocabulary of shapes a tree emits while drawing itself.

Every primitive is centre-based and carries its own style, so a surface only
has to translate it into whatever its toolkit draws (a QGraphicsScene item,
a list entry in tests, ...).

Classes:
    Circle, Line, Label: Frozen primitive records.
    Surface: Protocol a drawing surface must satisfy.
    RecordingSurface: In-memory surface used headless and in tests.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Union

from drawingtrees import config


@dataclass(frozen=True)
class Circle:
    """A node marker centred at (x, y)."""
    x: float
    y: float
    diameter: float
    fill: str = config.NODE_FILL_COLOR
    stroke: str = config.NODE_STROKE_COLOR
    stroke_width: float = config.NODE_STROKE_WIDTH
    z: int = config.CIRCLE_Z


@dataclass(frozen=True)
class Line:
    """A straight edge from (x1, y1) to (x2, y2)."""
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str = config.EDGE_COLOR
    stroke_width: float = config.EDGE_WIDTH
    z: int = config.LINE_Z


@dataclass(frozen=True)
class Label:
    """
    A text label centred at (x, y).

    `size` is the side of the square box the text is centred in (the node
    diameter). Surfaces scale the font to it with `config.LABEL_FONT_SCALE`.
    """
    x: float
    y: float
    size: float
    text: str
    color: str = config.LABEL_COLOR
    z: int = config.LABEL_Z


Primitive = Union[Circle, Line, Label]


class Surface(Protocol):
    """Anything a tree can be drawn on."""
    def clear(self) -> None: ...
    def add(self, primitive: Primitive) -> None: ...


@dataclass
class RecordingSurface:
    """Surface that just remembers what was drawn on it."""
    primitives: list[Primitive] = field(default_factory=list)
    clear_count: int = 0

    def clear(self) -> None:
        self.primitives.clear()
        self.clear_count += 1

    def add(self, primitive: Primitive) -> None:
        self.primitives.append(primitive)

    @property
    def circles(self) -> list[Circle]:
        return [p for p in self.primitives if isinstance(p, Circle)]

    @property
    def lines(self) -> list[Line]:
        return [p for p in self.primitives if isinstance(p, Line)]

    @property
    def labels(self) -> list[Label]:
        return [p for p in self.primitives if isinstance(p, Label)]
