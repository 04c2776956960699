"""
Tests for StringSimulation: parameter setters, notifications, the tick and
the lifecycle of the animation timer.
"""
import logging
import math
import threading

import pytest
from PySide6.QtCore import QElapsedTimer
from PySide6.QtTest import QTest

from stringvibration.config import TICK_PERIOD_MS, TICK_RATE_HZ
from stringvibration.controller.simulation import StringSimulation, next_tick_interval
from stringvibration.model.physics import frequency
from stringvibration.model.state import StringState


@pytest.fixture
def recorder(simulation):
    """Collects every signal emitted by the simulation."""
    events = {"parameters": [], "frequency": [], "phase": []}
    simulation.parameters_changed.connect(lambda s: events["parameters"].append(s))
    simulation.frequency_changed.connect(lambda f: events["frequency"].append(f))
    simulation.phase_advanced.connect(lambda p: events["phase"].append(p))
    return events


# ══════════════════════════════════════════════════════════════════════════════
# PARAMETERS
# ══════════════════════════════════════════════════════════════════════════════

class TestParameters:

    def test_initial_frequency(self, simulation):
        assert simulation.frequency == pytest.approx(11.785113, rel=1e-6)

    def test_uses_given_state(self, qapp):
        state = StringState(tension=100.0)
        with StringSimulation(state) as sim:
            assert sim.state is state

    def test_set_tension_notifies(self, simulation, recorder):
        simulation.set_tension(50.0)
        assert simulation.state.tension == 50.0
        assert recorder["parameters"] == [simulation.state]
        assert recorder["frequency"] == [frequency(50.0, 0.5, 1)]

    def test_unchanged_value_is_silent(self, simulation, recorder):
        simulation.set_tension(25.0)
        simulation.set_linear_mass_density(0.5)
        simulation.set_harmonic_mode(1)
        assert recorder["parameters"] == []
        assert recorder["frequency"] == []

    def test_set_density(self, simulation, recorder):
        simulation.set_linear_mass_density(2.0)
        assert simulation.state.linear_mass_density == 2.0
        assert recorder["frequency"] == [frequency(25.0, 2.0, 1)]

    def test_set_harmonic_mode_doubles_frequency(self, simulation):
        base = simulation.frequency
        simulation.set_harmonic_mode(2)
        assert simulation.frequency == 2 * base

    def test_integral_float_mode_is_accepted(self, simulation):
        simulation.set_harmonic_mode(3.0)
        assert simulation.state.harmonic_mode == 3
        assert isinstance(simulation.state.harmonic_mode, int)

    @pytest.mark.parametrize("setter, value", [
        ("set_tension", 0.5),
        ("set_tension", 100.5),
        ("set_linear_mass_density", 0.0),
        ("set_linear_mass_density", 2.5),
        ("set_harmonic_mode", 0),
        ("set_harmonic_mode", 9),
        ("set_harmonic_mode", 2.5),
    ])
    def test_out_of_range_rejected(self, simulation, recorder, setter, value):
        before = StringState(**vars(simulation.state))
        with pytest.raises(ValueError):
            getattr(simulation, setter)(value)
        assert simulation.state == before
        assert recorder["parameters"] == []

    def test_rejection_is_logged(self, simulation, caplog):
        with caplog.at_level(logging.ERROR, logger="stringvibration"):
            with pytest.raises(ValueError, match="Tension"):
                simulation.set_tension(1000.0)
        assert "Rejected tension" in caplog.text

    def test_reset(self, simulation, recorder):
        simulation.set_tension(90.0)
        simulation.tick()
        simulation.reset()
        assert simulation.state == StringState()
        assert recorder["parameters"][-1] is simulation.state
        assert recorder["frequency"][-1] == pytest.approx(11.785113, rel=1e-6)


# ══════════════════════════════════════════════════════════════════════════════
# TICK
# ══════════════════════════════════════════════════════════════════════════════

class TestTick:

    def test_tick_advances_phase(self, simulation, recorder):
        simulation.tick()
        assert simulation.state.animation_phase == pytest.approx(0.1)
        assert recorder["phase"] == [simulation.state.animation_phase]

    def test_k_ticks(self, simulation):
        for _ in range(25):
            simulation.tick()
        assert math.sin(simulation.state.animation_phase) == pytest.approx(math.sin(2.5), abs=1e-9)

    def test_tick_does_not_change_frequency(self, simulation, recorder):
        simulation.tick()
        assert recorder["frequency"] == []

    def test_requested_tick_is_queued(self, qapp, simulation):
        simulation.request_tick()
        assert simulation.state.animation_phase == 0.0
        qapp.processEvents()
        assert simulation.state.animation_phase == pytest.approx(0.1)

    def test_tick_requested_from_other_thread(self, qapp, simulation, recorder):
        worker = threading.Thread(target=simulation.request_tick)
        worker.start()
        worker.join()
        assert simulation.state.animation_phase == 0.0

        qapp.processEvents()
        assert simulation.state.animation_phase == pytest.approx(0.1)
        assert len(recorder["phase"]) == 1


# ══════════════════════════════════════════════════════════════════════════════
# LIFECYCLE
# ══════════════════════════════════════════════════════════════════════════════

class TestLifecycle:

    def test_timer_cadence(self, simulation):
        assert simulation.timer.interval() == 17
        assert not simulation.is_running

    def test_measured_tick_rate(self, simulation):
        clock = QElapsedTimer()
        clock.start()
        simulation.start()
        QTest.qWait(2000)
        simulation.stop()
        elapsed_s = clock.elapsed() / 1000.0

        ticks = round(simulation.state.animation_phase / simulation.phase_step)
        rate = ticks / elapsed_s
        assert abs(rate - TICK_RATE_HZ) < 1.0, f"{ticks} ticks in {elapsed_s:.3f}s -> {rate:.2f} Hz"

    def test_start_and_stop(self, simulation):
        simulation.start()
        assert simulation.is_running
        simulation.start()
        assert simulation.is_running
        simulation.stop()
        assert not simulation.is_running

    def test_timer_drives_phase(self, simulation):
        simulation.start()
        QTest.qWait(200)
        simulation.stop()
        assert simulation.state.animation_phase > 0.0

    def test_shutdown_cancels_timer(self, simulation):
        simulation.start()
        simulation.shutdown()
        assert not simulation.is_running
        assert simulation.is_closed

        phase = simulation.state.animation_phase
        QTest.qWait(100)
        assert simulation.state.animation_phase == phase

    def test_shutdown_is_idempotent(self, simulation):
        simulation.shutdown()
        simulation.shutdown()
        assert simulation.is_closed

    def test_start_after_shutdown_fails(self, simulation):
        simulation.shutdown()
        with pytest.raises(RuntimeError):
            simulation.start()

    def test_queued_tick_dropped_after_shutdown(self, qapp, simulation):
        simulation.request_tick()
        simulation.shutdown()
        qapp.processEvents()
        assert simulation.state.animation_phase == 0.0

    def test_context_manager_shuts_down(self, qapp):
        with StringSimulation() as sim:
            sim.start()
            assert sim.is_running
        assert not sim.is_running
        assert sim.is_closed

    def test_context_manager_shuts_down_on_error(self, qapp):
        with pytest.raises(KeyError):
            with StringSimulation() as sim:
                sim.start()
                raise KeyError("boom")
        assert sim.is_closed


# ══════════════════════════════════════════════════════════════════════════════
# TICK SCHEDULE
# ══════════════════════════════════════════════════════════════════════════════

class TestTickSchedule:

    def test_first_interval(self):
        assert next_tick_interval(0, 0) == 17

    def test_intervals_alternate(self):
        elapsed = 0
        intervals = []
        for fired in range(6):
            interval = next_tick_interval(fired, elapsed)
            intervals.append(interval)
            elapsed += interval
        assert intervals == [17, 16, 17, 17, 16, 17]

    def test_one_second_holds_exactly_sixty_ticks(self):
        elapsed = 0
        for fired in range(TICK_RATE_HZ):
            elapsed += next_tick_interval(fired, elapsed)
        assert elapsed == 1000

    def test_average_period_over_long_run(self):
        elapsed = 0
        n = 6000
        for fired in range(n):
            elapsed += next_tick_interval(fired, elapsed)
        assert elapsed / n == pytest.approx(TICK_PERIOD_MS, abs=1e-3)

    def test_late_clock_catches_up(self):
        # Tick 3 was due at 50 ms but the loop only got here at 80 ms
        assert next_tick_interval(2, 80) == 0

    def test_early_wakeup_waits_longer(self):
        assert next_tick_interval(1, 10) == 23
