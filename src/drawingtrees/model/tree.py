"""
Drawable Binary Search Tree
===========================
An unbalanced binary search tree that knows how to lay itself out and emit
drawing primitives onto a surface.

Why is this file needed?
------------------------
1. Structure: `TreeNode` keeps the BST ordering (duplicates go right) and
   never rebalances, so the shape depends only on insertion order.
2. Layout: a bottom-up bounds pass sizes every subtree, a top-down pass
   places every child relative to its parent.
3. Orchestration: `Tree` owns the root and the rendering parameters and
   redraws the whole surface whenever something changes.

Classes:
    TreeNode: A node and the layout rules for its subtree.
    Tree: The root owner, rendering parameters and render loop.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterable, Iterator, Optional, Union, TYPE_CHECKING

import numpy as np

from drawingtrees import config
from drawingtrees.model.primitives import Circle, Label, Line

if TYPE_CHECKING:
    import numpy.typing as npt

    from drawingtrees.model.primitives import Surface

logger = logging.getLogger(__name__)


class TreeNode:
    """
    A node of the tree.

    `width` and `height` describe the bounding box of the subtree rooted here.
    They are only valid right after `compute_bounds` ran on this subtree.
    """

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: Optional[TreeNode] = None
        self.right: Optional[TreeNode] = None
        self.width: float = 0.0
        self.height: float = 0.0

    def __repr__(self) -> str:
        return f"TreeNode({self.value!r})"

    def __iter__(self) -> Iterator[Any]:
        """Values of the subtree in order."""
        stack: list[TreeNode] = []
        node: Optional[TreeNode] = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def preorder(self) -> Iterator[TreeNode]:
        """Nodes of the subtree, parents before children, left before right."""
        stack: list[TreeNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    @property
    def has_both_children(self) -> bool:
        return self.left is not None and self.right is not None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def insert(self, value: Any) -> None:
        """Insert below this node. Smaller values go left, everything else right."""
        node = self
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = TreeNode(value)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode(value)
                    return
                node = node.right

    def compute_bounds(self, diameter: float, level_height: float, child_separation: float) -> None:
        """
        Calculate the width and height of the subtree rooted at this node.

        Args:
            diameter: The diameter of a node.
            level_height: The distance between centres of nodes in successive layers.
            child_separation: The space between bounding boxes of siblings.
        """
        # reversed pre-order visits every child before its parent
        for node in reversed(list(self.preorder())):
            node._measure(diameter, level_height, child_separation)

    def _measure(self, diameter: float, level_height: float, child_separation: float) -> None:
        """Size this node from its already measured children."""
        if self.left is not None and self.right is not None:
            self.width = self.left.width + self.right.width + child_separation
            self.height = level_height + max(self.left.height, self.right.height)
        elif self.left is not None or self.right is not None:
            # single child is hugged towards its side
            child = self.left if self.left is not None else self.right
            self.width = child.width + (child_separation + diameter) / 2
            self.height = child.height + level_height
        else:
            self.width = diameter
            self.height = diameter

    def child_centers(
        self,
        x: float,
        diameter: float,
        child_separation: float,
    ) -> tuple[Optional[float], Optional[float]]:
        """
        Horizontal centres of the (left, right) children for this node at `x`.

        A missing child gets None. Requires a fresh bounds pass.
        """
        if self.left is not None and self.right is not None:
            left_start = x - self.width / 2
            right_end = left_start + self.width

            if self.left.has_both_children:
                left_x = left_start + self.left.width / 2
            elif self.left.left is not None:
                # top-right of its box
                left_x = left_start + self.left.width - diameter / 2
            else:
                # top-left of its box
                left_x = left_start + diameter / 2

            if self.right.has_both_children:
                right_x = right_end - self.right.width / 2
            elif self.right.right is not None:
                # top-left of its box
                right_x = right_end - self.right.width + diameter / 2
            else:
                # top-right of its box
                right_x = right_end - diameter / 2

            return left_x, right_x

        offset = (child_separation + diameter) / 2
        if self.left is not None:
            return x - offset, None
        if self.right is not None:
            return None, x + offset
        return None, None

    def layout(
        self,
        x: float,
        y: float,
        diameter: float,
        level_height: float,
        child_separation: float,
    ) -> Iterator[tuple[TreeNode, float, float]]:
        """Yield (node, x, y) for the whole subtree in pre-order, this node at (x, y)."""
        stack: list[tuple[TreeNode, float, float]] = [(self, x, y)]
        while stack:
            node, node_x, node_y = stack.pop()
            yield node, node_x, node_y
            next_y = node_y + level_height
            left_x, right_x = node.child_centers(node_x, diameter, child_separation)
            if node.right is not None:
                stack.append((node.right, right_x, next_y))
            if node.left is not None:
                stack.append((node.left, left_x, next_y))

    def draw(
        self,
        surface: Surface,
        x: float,
        y: float,
        diameter: float,
        level_height: float,
        child_separation: float,
    ) -> None:
        """
        Draw the subtree rooted at this node on `surface` with this node centred at (x, y).

        Each node emits its circle and label, then for each child the edge
        followed by that child's whole subtree.
        """
        # pending work: a node to draw at (x, y), or an edge to emit
        stack: list[Union[tuple[TreeNode, float, float], Line]] = [(self, x, y)]
        while stack:
            item = stack.pop()
            if isinstance(item, Line):
                surface.add(item)
                continue

            node, node_x, node_y = item
            surface.add(Circle(node_x, node_y, diameter))
            surface.add(Label(node_x, node_y, diameter, str(node.value)))

            next_y = node_y + level_height
            left_x, right_x = node.child_centers(node_x, diameter, child_separation)
            for child, child_x in ((node.right, right_x), (node.left, left_x)):
                if child is None:
                    continue
                stack.append((child, child_x, next_y))
                stack.append(Line(node_x, node_y, child_x, next_y))


class Tree:
    """
    Sorted tree that is able to draw itself.

    Assumes the surface is used exclusively for this tree: every render
    clears it completely before drawing.
    """

    def __init__(
        self,
        surface: Optional[Surface] = None,
        x: float = 0.0,
        y: float = 0.0,
        diameter: float = config.TREE_DEFAULT_DIAMETER,
        level_height: float = config.TREE_DEFAULT_LEVEL_HEIGHT,
        child_separation: float = config.TREE_DEFAULT_CHILD_SEPARATION,
    ) -> None:
        self.root: Optional[TreeNode] = None
        self._surface = surface
        self._root_x = x
        self._root_y = y
        self._diameter = diameter
        self._level_height = level_height
        self._child_separation = child_separation

        self._dirty = True
        self._batch_depth = 0
        self._changed()

    # ------------------------------------------------------------------------------
    # Rendering parameters
    # ------------------------------------------------------------------------------

    @property
    def surface(self) -> Optional[Surface]:
        """The surface on which the tree is rendered."""
        return self._surface

    @surface.setter
    def surface(self, value: Optional[Surface]) -> None:
        self._surface = value
        self._changed()

    @property
    def root_x(self) -> float:
        """Horizontal centre of the root node."""
        return self._root_x

    @root_x.setter
    def root_x(self, value: float) -> None:
        self._root_x = value
        self._changed()

    @property
    def root_y(self) -> float:
        """Vertical centre of the root node."""
        return self._root_y

    @root_y.setter
    def root_y(self, value: float) -> None:
        self._root_y = value
        self._changed()

    @property
    def diameter(self) -> float:
        return self._diameter

    @diameter.setter
    def diameter(self, value: float) -> None:
        self._diameter = value
        self._changed()

    @property
    def level_height(self) -> float:
        return self._level_height

    @level_height.setter
    def level_height(self, value: float) -> None:
        self._level_height = value
        self._changed()

    @property
    def child_separation(self) -> float:
        return self._child_separation

    @child_separation.setter
    def child_separation(self, value: float) -> None:
        self._child_separation = value
        self._changed()

    @property
    def dirty(self) -> bool:
        """True while a change has not been rendered yet."""
        return self._dirty

    # ------------------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------------------

    def insert(self, value: Any) -> None:
        """Add a node with the given value. Causes a redraw of the tree."""
        if self.root is None:
            self.root = TreeNode(value)
        else:
            self.root.insert(value)
        self._changed()

    def insert_many(self, values: Iterable[Any]) -> None:
        """Add values in the given order, redrawing once at the end."""
        with self.batch():
            for value in values:
                self.insert(value)

    @contextmanager
    def batch(self) -> Iterator[Tree]:
        """
        Defer redraws until the block exits.

        Example:
            with tree.batch():
                tree.diameter = 30
                tree.level_height = 60
        """
        self._batch_depth += 1
        try:
            yield self
        finally:
            self._batch_depth -= 1
        if self._batch_depth == 0:
            self.render_if_dirty()

    def _changed(self) -> None:
        self._dirty = True
        if self._batch_depth == 0:
            self.render()

    # ------------------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------------------

    def render(self) -> None:
        """Clear the surface and draw the whole tree on it."""
        if self._surface is None or self.root is None:
            logger.debug("Render skipped: no surface or empty tree.")
            return

        self._surface.clear()
        self.root.compute_bounds(self._diameter, self._level_height, self._child_separation)
        self.root.draw(
            self._surface,
            self._root_x,
            self._root_y,
            self._diameter,
            self._level_height,
            self._child_separation,
        )
        self._dirty = False
        logger.debug(f"Rendered {len(self)} nodes at ({self._root_x:g}, {self._root_y:g}).")

    def render_if_dirty(self) -> None:
        if self._dirty:
            self.render()

    # ------------------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------------------

    def __len__(self) -> int:
        if self.root is None:
            return 0
        return sum(1 for _ in self.root)

    def values(self) -> list[Any]:
        """All values in order."""
        if self.root is None:
            return []
        return list(self.root)

    def bounds(self) -> tuple[float, float]:
        """(width, height) of the whole tree after a fresh bounds pass."""
        if self.root is None:
            return 0.0, 0.0
        self.root.compute_bounds(self._diameter, self._level_height, self._child_separation)
        return self.root.width, self.root.height

    def positions(self) -> list[tuple[Any, float, float]]:
        """(value, x, y) of every node in pre-order, as the next render would place them."""
        if self.root is None:
            return []
        self.root.compute_bounds(self._diameter, self._level_height, self._child_separation)
        layout = self.root.layout(
            self._root_x,
            self._root_y,
            self._diameter,
            self._level_height,
            self._child_separation,
        )
        return [(node.value, x, y) for node, x, y in layout]

    def centers(self) -> npt.NDArray[np.float64]:
        """Node centres in pre-order as an (N, 2) array."""
        pts = [(x, y) for _, x, y in self.positions()]
        return np.asarray(pts, dtype=np.float64).reshape(-1, 2)
