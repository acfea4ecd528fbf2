"""
The MODEL layer contains pure data structures and chart logic.
It has NO knowledge of the GUI (Qt) or the drawing surface (pyqtgraph).
It deals with the temperature series, coordinate mapping and the reveal animation.
"""
