"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (slider ranges, timer cadence,
   display geometry) scattered throughout the code.
2. Consistency: The model, the controller and the view all validate and
   draw against the same values.

Exports:
    TENSION_RANGE, DENSITY_RANGE, HARMONIC_MODE_RANGE: Allowed control ranges.
    DEFAULT_*: Startup values of the string state.
    TICK_RATE_HZ, TICK_PERIOD_MS: Cadence of the animation timer.
"""
from typing import Tuple

# Application
ORG_ID = "stringvibration"
APP_ID = "string-vibration"
VISIBLE_APP_NAME = "Vibrating String Simulation"
VISIBLE_APP_SUBTITLE = "An Application of Simple Harmonic Motion"

# Physical parameters (slider controlled)
TENSION_RANGE: Tuple[float, float] = (1.0, 100.0)
TENSION_STEP: float = 1.0

DENSITY_RANGE: Tuple[float, float] = (0.1, 2.0)
DENSITY_STEP: float = 0.05

HARMONIC_MODE_RANGE: Tuple[int, int] = (1, 8)

DEFAULT_TENSION: float = 25.0
DEFAULT_DENSITY: float = 0.5
DEFAULT_HARMONIC_MODE: int = 1
DEFAULT_PHASE: float = 0.0

# Fixed geometry (display units)
STRING_LENGTH: float = 300.0
AMPLITUDE: float = 40.0
DISPLAY_HEIGHT: float = 200.0
SAMPLE_STEP: float = 2.0

# Not SI-derived, keeps the readout in an audible-looking range
FREQUENCY_SCALE: float = 1000.0

# Animation clock
PHASE_STEP: float = 0.1  # rad per tick
TICK_RATE_HZ: int = 60
TICK_PERIOD_MS: float = 1000 / TICK_RATE_HZ
# QTimer only takes whole ms; the controller reschedules to keep the exact average
TICK_INTERVAL_MS: int = round(TICK_PERIOD_MS)
