"""
The VIEW layer: Qt widgets and pyqtgraph drawing.
It reads from the simulation and never computes physics itself.
"""
