"""
Main Application Window
=======================
The primary GUI container: title, animated string, frequency readout and
the parameter sliders.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects the simulation signals to the widgets that display
   them.
3. Lifecycle: Closing the window shuts the simulation clock down.
"""
from __future__ import annotations

import logging

from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QLabel
from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent, QFont

from stringvibration.config import VISIBLE_APP_NAME, VISIBLE_APP_SUBTITLE
from stringvibration.controller.simulation import StringSimulation
from stringvibration.model.physics import format_frequency
from stringvibration.model.state import StringState
from stringvibration.view.panels.controls import ControlsPanel
from stringvibration.view.widgets.string_plot import StringPlotWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, simulation: StringSimulation) -> None:
        super().__init__()
        self.simulation = simulation
        self.setWindowTitle(VISIBLE_APP_NAME)

        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        layout = QVBoxLayout(main_widget)
        layout.setSpacing(20)

        # --- 1. HEADER ---
        self.lbl_title = QLabel(VISIBLE_APP_NAME)
        title_font = QFont()
        title_font.setPointSize(24)
        title_font.setBold(True)
        self.lbl_title.setFont(title_font)
        self.lbl_title.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.lbl_title)

        self.lbl_subtitle = QLabel(VISIBLE_APP_SUBTITLE)
        self.lbl_subtitle.setAlignment(Qt.AlignCenter)
        self.lbl_subtitle.setStyleSheet("color: gray;")
        layout.addWidget(self.lbl_subtitle)

        # --- 2. STRING ---
        self.plot = StringPlotWidget(
            length=self.simulation.state.length,
            amplitude=self.simulation.state.amplitude,
        )
        layout.addWidget(self.plot, alignment=Qt.AlignCenter)

        # --- 3. FREQUENCY ---
        lbl_heading = QLabel("Calculated Frequency")
        heading_font = QFont()
        heading_font.setBold(True)
        lbl_heading.setFont(heading_font)
        lbl_heading.setAlignment(Qt.AlignCenter)
        layout.addWidget(lbl_heading)

        self.lbl_frequency = QLabel()
        freq_font = QFont("monospace")
        freq_font.setStyleHint(QFont.Monospace)
        freq_font.setPointSize(28)
        freq_font.setWeight(QFont.DemiBold)
        self.lbl_frequency.setFont(freq_font)
        self.lbl_frequency.setAlignment(Qt.AlignCenter)
        self.lbl_frequency.setStyleSheet("color: rgb(0, 122, 255);")
        layout.addWidget(self.lbl_frequency)

        # --- 4. CONTROLS ---
        self.controls = ControlsPanel(self.simulation)
        self.controls.setMaximumHeight(280)
        layout.addWidget(self.controls)

        # --- SIGNAL CONNECTIONS ---
        self.simulation.phase_advanced.connect(self.on_phase_advanced)
        self.simulation.parameters_changed.connect(self.on_parameters_changed)
        self.simulation.frequency_changed.connect(self.on_frequency_changed)

        # Initial Render
        self.on_parameters_changed(self.simulation.state)
        self.on_frequency_changed(self.simulation.frequency)

    # --- SLOTS ---
    def on_phase_advanced(self, phase: float) -> None:
        self.plot.update_shape(self.simulation.state.harmonic_mode, phase)

    def on_parameters_changed(self, state: StringState) -> None:
        self.plot.update_shape(state.harmonic_mode, state.animation_phase)

    def on_frequency_changed(self, value: float) -> None:
        self.lbl_frequency.setText(format_frequency(value))

    def closeEvent(self, event: QCloseEvent) -> None:
        logger.info("Main window closing.")
        self.simulation.shutdown()
        super().closeEvent(event)
