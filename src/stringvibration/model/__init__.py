"""
The MODEL layer contains pure data structures and physics.
It has NO knowledge of the GUI (Qt) or the plotting (pyqtgraph).
"""
