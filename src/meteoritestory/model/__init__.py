"""
The MODEL layer contains pure data structures and I/O.
It has NO knowledge of the GUI (Qt widgets) or of how scenes are laid out.
"""
