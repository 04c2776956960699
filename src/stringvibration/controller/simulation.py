"""
Simulation Controller
=====================
Owns the StringState and the animation clock.

Why is this file needed?
------------------------
1. Single Writer: Every mutation of the state (slider edits, ticks) goes
   through this object, on the thread it lives in.
2. Signals: Views subscribe to Qt Signals instead of polling the state.
3. Lifecycle: The 60 Hz QTimer is scoped to this object and is cancelled
   deterministically by shutdown().

Classes:
    StringSimulation: State owner + periodic tick.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QElapsedTimer, QObject, QTimer, Qt, Signal, Slot

from stringvibration.config import (
    DENSITY_RANGE, HARMONIC_MODE_RANGE, PHASE_STEP, TENSION_RANGE, TICK_INTERVAL_MS,
    TICK_PERIOD_MS, TICK_RATE_HZ,
)
from stringvibration.model.physics import advance_phase
from stringvibration.model.state import StringState

logger = logging.getLogger(__name__)


def next_tick_interval(ticks_fired: int, elapsed_ms: int, period_ms: float = TICK_PERIOD_MS) -> int:
    """
    Whole milliseconds until the next tick is due.

    Tick k is due at k * period_ms after the clock started. Aiming every
    interval at that deadline carries the fractional remainder forward, so at
    60 Hz the intervals alternate 17/16/17 ms and average exactly 16.67 ms.
    A late clock gets 0, which fires as soon as the event loop is free.
    """
    deadline = (ticks_fired + 1) * period_ms
    return max(0, round(deadline - elapsed_ms))


class StringSimulation(QObject):
    # Emitted with the StringState after a parameter really changed
    parameters_changed = Signal(object)
    frequency_changed = Signal(float)
    phase_advanced = Signal(float)

    # Cross-thread tick requests are queued onto the owning thread
    _tick_requested = Signal()

    def __init__(self, state: Optional[StringState] = None, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.state: StringState = state if state is not None else StringState()
        self.phase_step: float = PHASE_STEP
        self._closed: bool = False

        self.timer = QTimer(self)
        self.timer.setTimerType(Qt.PreciseTimer)
        self.timer.setInterval(TICK_INTERVAL_MS)
        self.timer.timeout.connect(self._on_timeout)

        # Time base for the tick deadlines, reset by start()
        self._clock = QElapsedTimer()
        self._ticks_fired: int = 0

        self._tick_requested.connect(self.tick, Qt.QueuedConnection)

    # --- CONTEXT MANAGER ---
    def __enter__(self) -> StringSimulation:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()

    # --- PROPERTIES ---
    @property
    def frequency(self) -> float:
        return self.state.frequency

    @property
    def is_running(self) -> bool:
        return self.timer.isActive()

    @property
    def is_closed(self) -> bool:
        return self._closed

    # --- LIFECYCLE ---
    def start(self) -> None:
        """Start the animation clock."""
        if self._closed:
            logger.error("Cannot start a simulation that has been shut down.")
            raise RuntimeError("Simulation has been shut down.")
        if not self.timer.isActive():
            self._ticks_fired = 0
            self._clock.start()
            self.timer.start(TICK_INTERVAL_MS)
            logger.info(f"Animation started ({TICK_RATE_HZ} Hz).")

    def stop(self) -> None:
        """Pause the animation clock. The state is kept."""
        if self.timer.isActive():
            self.timer.stop()
            logger.info("Animation stopped.")

    def shutdown(self) -> None:
        """
        Cancel the clock for good. Safe to call more than once.
        Ticks already queued by request_tick() are dropped.
        """
        if self._closed:
            return
        self.timer.stop()
        self.timer.timeout.disconnect(self._on_timeout)
        self._closed = True
        logger.info("Simulation shut down, animation timer released.")

    # --- CLOCK ---
    @Slot()
    def tick(self) -> None:
        if self._closed:
            return
        self.state.animation_phase = advance_phase(self.state.animation_phase, self.phase_step)
        self.phase_advanced.emit(self.state.animation_phase)

    def request_tick(self) -> None:
        """Ask for one tick; thread-safe, applied later on the owning thread."""
        self._tick_requested.emit()

    @Slot()
    def _on_timeout(self) -> None:
        self.tick()
        if self._closed or not self.timer.isActive():
            return
        self._ticks_fired += 1
        # setInterval restarts the running timer from now
        self.timer.setInterval(next_tick_interval(self._ticks_fired, self._clock.elapsed()))

    # --- PARAMETERS ---
    def set_tension(self, value: float) -> None:
        self._check_range("tension", value, TENSION_RANGE)
        self._apply("tension", float(value))

    def set_linear_mass_density(self, value: float) -> None:
        self._check_range("linear mass density", value, DENSITY_RANGE)
        self._apply("linear_mass_density", float(value))

    def set_harmonic_mode(self, value: int) -> None:
        if int(value) != value:
            logger.error(f"Harmonic mode must be an integer, got {value!r}.")
            raise ValueError(f"Harmonic mode must be an integer, got {value!r}.")
        self._check_range("harmonic mode", value, HARMONIC_MODE_RANGE)
        self._apply("harmonic_mode", int(value))

    def reset(self) -> None:
        """Restore default parameters and phase."""
        old_frequency = self.state.frequency
        self.state.reset()
        self.parameters_changed.emit(self.state)
        if self.state.frequency != old_frequency:
            self.frequency_changed.emit(self.state.frequency)

    # --- HELPERS ---
    @staticmethod
    def _check_range(name: str, value: float, limits: tuple[float, float]) -> None:
        lo, hi = limits
        if not lo <= value <= hi:
            logger.error(f"Rejected {name} = {value!r}, allowed range is [{lo}, {hi}].")
            raise ValueError(f"{name.capitalize()} {value!r} is outside [{lo}, {hi}].")

    def _apply(self, attribute: str, value: float) -> None:
        if getattr(self.state, attribute) == value:
            return
        old_frequency = self.state.frequency
        setattr(self.state, attribute, value)
        logger.debug(f"{attribute} set to {value}")

        self.parameters_changed.emit(self.state)
        new_frequency = self.state.frequency
        if new_frequency != old_frequency:
            self.frequency_changed.emit(new_frequency)
