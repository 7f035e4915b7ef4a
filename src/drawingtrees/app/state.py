from __future__ import annotations

import logging
from dataclasses import dataclass, asdict
from typing import Any, Iterable, Optional, TYPE_CHECKING

from PySide6.QtCore import QObject, Signal

from drawingtrees import config
from drawingtrees.model.tree import Tree

if TYPE_CHECKING:
    from drawingtrees.model.primitives import Surface

logger = logging.getLogger(__name__)


@dataclass
class LayoutParams:
    """Sizes the tree is laid out with."""
    diameter: float = config.DIAMETER
    level_height: float = config.LEVEL_HEIGHT
    child_separation: float = config.CHILD_SEPARATION


class Store(QObject):
    """
    Central state store owning the tree, with signals for panel/view sync.

    The surface width is remembered so a reset can centre the new root.
    """
    tree_changed = Signal(object)
    value_inserted = Signal(object)
    tree_reset = Signal()
    parameters_changed = Signal(object)

    def __init__(self, params: Optional[LayoutParams] = None) -> None:
        super().__init__()
        self.params = params or LayoutParams()
        self._surface: Optional[Surface] = None
        self._surface_width: float = 0.0
        self.tree = self._new_tree()

    def _new_tree(self) -> Tree:
        return Tree(
            self._surface,
            x=self._surface_width / 2,
            y=1.5 * self.params.diameter,
            diameter=self.params.diameter,
            level_height=self.params.level_height,
            child_separation=self.params.child_separation,
        )

    def attach_surface(self, surface: Surface, width: float = 0.0) -> None:
        """Draw on `surface` from now on; `width` is used to centre the root."""
        self._surface = surface
        self._surface_width = width
        with self.tree.batch():
            self.tree.surface = surface
            self.tree.root_x = width / 2

    def set_root_x(self, x: float) -> None:
        self.tree.root_x = x

    def set_surface_width(self, width: float) -> None:
        """Keep the root horizontally centred on a surface of the given width."""
        self._surface_width = width
        self.set_root_x(width / 2)

    def insert(self, value: Any) -> None:
        self.tree.insert(value)
        logger.debug(f"Inserted {value!r}, tree has {len(self.tree)} nodes.")
        self.value_inserted.emit(value)
        self.tree_changed.emit(self.tree)

    def insert_many(self, values: Iterable[Any]) -> None:
        """Insert in order with one redraw; `value_inserted` still fires per value."""
        values = list(values)
        self.tree.insert_many(values)
        logger.debug(f"Inserted {len(values)} values, tree has {len(self.tree)} nodes.")
        for value in values:
            self.value_inserted.emit(value)
        self.tree_changed.emit(self.tree)

    def set_parameters(self, **params: float) -> None:
        """Apply several layout parameters with a single redraw."""
        unknown = set(params) - set(asdict(self.params))
        if unknown:
            raise ValueError(f"Unknown layout parameters: {sorted(unknown)}")

        for key, value in params.items():
            setattr(self.params, key, value)

        with self.tree.batch():
            for key, value in params.items():
                setattr(self.tree, key, value)
            if "diameter" in params:
                self.tree.root_y = 1.5 * self.params.diameter
        self.parameters_changed.emit(self.params)

    def reset(self) -> None:
        """Clear the surface and start over with an empty tree."""
        if self._surface is not None:
            self._surface.clear()
        self.tree = self._new_tree()
        logger.info("Tree has been reset.")
        self.tree_reset.emit()
        self.tree_changed.emit(self.tree)
