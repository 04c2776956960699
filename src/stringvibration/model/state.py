"""
String State (Data Model)
=========================
This module defines the central data structure for the running simulation.

Why is this file needed?
------------------------
1. State Management: It holds the physical parameters and the animation
   phase in one place.
2. Decoupling: The controller writes to this object; the view reads from it.

Classes:
    StringState: The string parameters plus the animation phase.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging

from stringvibration.config import (
    AMPLITUDE, DEFAULT_DENSITY, DEFAULT_HARMONIC_MODE, DEFAULT_PHASE,
    DEFAULT_TENSION, STRING_LENGTH,
)
from stringvibration.model.physics import frequency

logger = logging.getLogger(__name__)


@dataclass
class StringState:
    """
    Parameters of the vibrating string.
    `length` and `amplitude` are fixed display constants; the phase only grows.
    """
    tension: float = DEFAULT_TENSION
    linear_mass_density: float = DEFAULT_DENSITY
    harmonic_mode: int = DEFAULT_HARMONIC_MODE
    animation_phase: float = DEFAULT_PHASE

    length: float = STRING_LENGTH
    amplitude: float = AMPLITUDE

    @property
    def frequency(self) -> float:
        return frequency(
            self.tension, self.linear_mass_density, self.harmonic_mode, self.length
        )

    def reset(self) -> None:
        """Restore the startup values."""
        self.tension = DEFAULT_TENSION
        self.linear_mass_density = DEFAULT_DENSITY
        self.harmonic_mode = DEFAULT_HARMONIC_MODE
        self.animation_phase = DEFAULT_PHASE
        logger.info("String state has been reset.")
