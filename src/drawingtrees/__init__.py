"""
DrawingTrees
============
An unbalanced binary search tree that lays itself out and draws itself on a
2-D surface after every insertion.
"""
__version__ = "0.1.0"
