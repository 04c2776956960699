"""
Parameter Controls Panel
"""
from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel, QSlider, QGroupBox
from PySide6.QtCore import Qt

from stringvibration.config import HARMONIC_MODE_RANGE, TENSION_RANGE
from stringvibration.controller.simulation import StringSimulation
from stringvibration.model.physics import density_slider_steps, density_to_slider, slider_to_density
from stringvibration.model.state import StringState


class ControlsPanel(QWidget):
    """Sliders for tension, linear mass density and harmonic mode."""
    def __init__(self, simulation: StringSimulation, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.simulation = simulation

        layout = QVBoxLayout(self)
        grp = QGroupBox("Parameters")
        box = QVBoxLayout(grp)

        # 1. Tension, integer steps
        self.lbl_tension = QLabel()
        self.slider_tension = QSlider(Qt.Horizontal)
        self.slider_tension.setRange(int(TENSION_RANGE[0]), int(TENSION_RANGE[1]))
        box.addWidget(self.lbl_tension)
        box.addWidget(self.slider_tension)

        # 2. Density, slider index <-> 0.05 increments
        self.lbl_density = QLabel()
        self.slider_density = QSlider(Qt.Horizontal)
        self.slider_density.setRange(0, density_slider_steps())
        box.addWidget(self.lbl_density)
        box.addWidget(self.slider_density)

        # 3. Harmonic mode
        self.lbl_mode = QLabel()
        self.slider_mode = QSlider(Qt.Horizontal)
        self.slider_mode.setRange(*HARMONIC_MODE_RANGE)
        self.slider_mode.setTickPosition(QSlider.TicksBelow)
        self.slider_mode.setTickInterval(1)
        box.addWidget(self.lbl_mode)
        box.addWidget(self.slider_mode)

        layout.addWidget(grp)
        layout.addStretch()

        self.sync_from_state(self.simulation.state)

        self.slider_tension.valueChanged.connect(self.on_tension_changed)
        self.slider_density.valueChanged.connect(self.on_density_changed)
        self.slider_mode.valueChanged.connect(self.on_mode_changed)
        self.simulation.parameters_changed.connect(self.sync_from_state)

    # --- SLOTS ---
    def on_tension_changed(self, value: int) -> None:
        self.simulation.set_tension(float(value))

    def on_density_changed(self, index: int) -> None:
        self.simulation.set_linear_mass_density(slider_to_density(index))

    def on_mode_changed(self, value: int) -> None:
        self.simulation.set_harmonic_mode(value)

    def sync_from_state(self, state: StringState) -> None:
        """Move sliders and labels to the current state without feedback."""
        for slider, value in (
            (self.slider_tension, int(state.tension)),
            (self.slider_density, density_to_slider(state.linear_mass_density)),
            (self.slider_mode, state.harmonic_mode),
        ):
            slider.blockSignals(True)
            slider.setValue(value)
            slider.blockSignals(False)

        self.lbl_tension.setText(f"Tension (T): {int(state.tension)}")
        self.lbl_density.setText(f"Linear Mass Density (μ): {state.linear_mass_density:.2f}")
        self.lbl_mode.setText(f"Harmonic Mode (n): {state.harmonic_mode}")
