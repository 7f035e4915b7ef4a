"""
The MODEL layer contains pure data structures and the layout algorithm.
It has NO knowledge of the GUI (Qt). It deals with tree structure, geometry
and the drawing primitives a surface has to understand.
"""
