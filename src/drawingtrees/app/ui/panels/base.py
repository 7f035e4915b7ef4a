from __future__ import annotations

from PySide6.QtCore import Slot
from PySide6.QtWidgets import QWidget

from drawingtrees.app.state import Store
from drawingtrees.model.tree import Tree


class BasePanel(QWidget):
    """
    Base class for left-side panels.

    Holds a reference to the global store and calls `on_tree_changed` after
    every insert or reset. Subclasses call it themselves once their widgets
    exist to pick up the initial tree.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.store.tree_changed.connect(self._relay_tree_changed)

    @property
    def tree(self) -> Tree:
        return self.store.tree

    @Slot(object)
    def _relay_tree_changed(self, tree: Tree) -> None:
        self.on_tree_changed(tree)

    def on_tree_changed(self, tree: Tree) -> None:
        """Override to react to a changed tree."""
