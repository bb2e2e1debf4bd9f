"""
The MODEL layer contains pure data structures and the geometry.
It has NO knowledge of the command line or of printing.
"""
