"""
String Plot Widget
==================
pyqtgraph canvas that draws the string's rest line and its displaced shape.
"""
from __future__ import annotations

from typing import Optional

import numpy as np
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget
import pyqtgraph as pg

from stringvibration.config import AMPLITUDE, DISPLAY_HEIGHT, SAMPLE_STEP, STRING_LENGTH
from stringvibration.model.physics import sample_path


class StringPlotWidget(pg.PlotWidget):
    """
    Fixed, non-interactive view box in screen orientation (y down),
    spanning [0, length] x [0, DISPLAY_HEIGHT].
    """
    def __init__(
        self,
        length: float = STRING_LENGTH,
        amplitude: float = AMPLITUDE,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent=parent, background="w")
        self.length = length
        self.amplitude = amplitude
        self.mid_y = DISPLAY_HEIGHT / 2

        self.setMouseEnabled(x=False, y=False)
        self.hideButtons()
        self.setMenuEnabled(False)
        self.hideAxis("left")
        self.hideAxis("bottom")
        self.invertY(True)
        self.setXRange(0, self.length, padding=0.02)
        self.setYRange(0, DISPLAY_HEIGHT, padding=0)
        self.setFixedSize(int(self.length) + 20, int(DISPLAY_HEIGHT))

        rest_pen = pg.mkPen(color=(128, 128, 128, 128), width=2)
        self.rest_line = self.plot(
            np.array([0.0, self.length]), np.array([self.mid_y, self.mid_y]), pen=rest_pen
        )

        string_pen = pg.mkPen(color=(0, 122, 255), width=3)
        string_pen.setCapStyle(Qt.RoundCap)
        string_pen.setJoinStyle(Qt.RoundJoin)
        self.curve = self.plot(pen=string_pen)

    def update_shape(self, harmonic_mode: int, phase: float) -> None:
        """Resample the string and redraw it."""
        points = sample_path(
            harmonic_mode,
            phase,
            amplitude=self.amplitude,
            width=self.length,
            step=SAMPLE_STEP,
            mid_y=self.mid_y,
        )
        self.curve.setData(points[:, 0], points[:, 1])
