"""
Configuration & Constants
=========================
This module serves as the central registry for drawing parameters and
global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (diameters, colours, z-order)
   scattered throughout the model and the view.
2. Consistency: The model emits primitives with these styles and the view
   renders them as-is, so both sides agree on one source.

Exports:
    DIAMETER (float): Node diameter used by the main window.
    LEVEL_HEIGHT (float): Vertical distance between parent and child centres.
    CHILD_SEPARATION (float): Gap between sibling bounding boxes.
"""

# Parameters used by the main window
DIAMETER: float = 40.0
LEVEL_HEIGHT: float = 80.0
CHILD_SEPARATION: float = 40.0

# Defaults of a bare Tree (no host)
TREE_DEFAULT_DIAMETER: float = 40.0
TREE_DEFAULT_LEVEL_HEIGHT: float = 80.0
TREE_DEFAULT_CHILD_SEPARATION: float = 80.0

# Styling
NODE_FILL_COLOR: str = "#87CEEB"  # sky blue
NODE_STROKE_COLOR: str = "#000000"
NODE_STROKE_WIDTH: float = 0.5
EDGE_COLOR: str = "#000000"
EDGE_WIDTH: float = 1.0
LABEL_COLOR: str = "#000000"
LABEL_FONT_SCALE: float = 0.4  # font pixel size relative to the label box

# Z-order: edges below circles, labels on top
LINE_Z: int = 1
CIRCLE_Z: int = 2
LABEL_Z: int = 3

# Window
WINDOW_WIDTH: int = 1100
WINDOW_HEIGHT: int = 700

# Parameter spin box ranges (min, max, step)
DIAMETER_RANGE: tuple[float, float, float] = (10.0, 200.0, 2.0)
LEVEL_HEIGHT_RANGE: tuple[float, float, float] = (10.0, 400.0, 5.0)
CHILD_SEPARATION_RANGE: tuple[float, float, float] = (0.0, 400.0, 5.0)
