"""
Standing-Wave Physics
=====================
Closed-form relations for a string fixed at both ends.

The motion is the separable solution y(x, t) = sin(ωt) · sin(kx): a single
time envelope shared by the whole string, multiplied by the spatial shape
of the selected harmonic. Nothing is integrated over time; every frame is a
direct evaluation of the formula.

Functions:
    frequency: Harmonic frequency from tension, density and mode.
    advance_phase: One tick of the animation clock.
    sample_path: Polyline of the displaced string for rendering.
"""
from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from stringvibration.config import (
    AMPLITUDE, DENSITY_RANGE, DENSITY_STEP, DISPLAY_HEIGHT, FREQUENCY_SCALE,
    PHASE_STEP, SAMPLE_STEP, STRING_LENGTH,
)

if TYPE_CHECKING:
    import numpy.typing as npt


def frequency(
    tension: float,
    density: float,
    harmonic_mode: int,
    length: float = STRING_LENGTH,
) -> float:
    """
    Frequency of the n-th harmonic, f = n / (2L) * sqrt(T / mu) * K.

    Args:
        tension: String tension T.
        density: Linear mass density mu.
        harmonic_mode: Harmonic number n (1 is the fundamental).
        length: String length L in display units.

    Returns:
        Frequency in display Hz, or 0.0 when density <= 0.
    """
    if density <= 0:
        return 0.0
    term1 = harmonic_mode / (2 * length)
    term2 = math.sqrt(tension / density)
    return term1 * term2 * FREQUENCY_SCALE


def advance_phase(phase: float, step: float = PHASE_STEP) -> float:
    """Return the animation phase after one tick."""
    return phase + step


def sample_path(
    harmonic_mode: int,
    phase: float,
    amplitude: float = AMPLITUDE,
    width: float = STRING_LENGTH,
    step: float = SAMPLE_STEP,
    mid_y: float = DISPLAY_HEIGHT / 2,
) -> npt.NDArray[np.float64]:
    """
    Sample the displaced string as an (N, 2) array of screen points.

    Points are taken every `step` units from x = 0 while x < width, then a
    closing point (width, mid_y) is always appended so the curve ends on the
    right anchor even when `step` does not divide `width`.

    Screen coordinates are used: y grows downwards, so a positive envelope
    lifts the string above `mid_y`.
    """
    time_amplitude = math.sin(phase) * amplitude

    xs = np.arange(0.0, width, step, dtype=np.float64)
    xs = xs[xs < width]
    spatial = np.sin(np.pi * harmonic_mode * xs / width)
    ys = mid_y - time_amplitude * spatial

    points = np.empty((xs.size + 1, 2), dtype=np.float64)
    points[:-1, 0] = xs
    points[:-1, 1] = ys
    points[-1] = (width, mid_y)
    return points


def format_frequency(value: float) -> str:
    return f"{value:.2f} Hz"


# ------------------------------------------------------------------------------
# Density slider mapping (QSlider only holds integers)
# ------------------------------------------------------------------------------

def density_slider_steps() -> int:
    """Number of slider increments between the density limits."""
    lo, hi = DENSITY_RANGE
    return int(round((hi - lo) / DENSITY_STEP))


def slider_to_density(index: int) -> float:
    lo, _ = DENSITY_RANGE
    return round(lo + index * DENSITY_STEP, 2)


def density_to_slider(density: float) -> int:
    lo, _ = DENSITY_RANGE
    index = int(round((density - lo) / DENSITY_STEP))
    return min(max(index, 0), density_slider_steps())
