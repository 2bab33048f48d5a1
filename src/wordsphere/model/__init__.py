"""
The MODEL layer contains pure data structures and geometry.
It has NO knowledge of the GUI (Qt).
It deals with projection, ring layout and draw command construction.
"""
