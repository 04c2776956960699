import os

# Qt must not need a display in CI
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from stringvibration.controller.simulation import StringSimulation


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole test session."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def simulation(qapp):
    """Fresh simulation with default state; always shut down afterwards."""
    sim = StringSimulation()
    yield sim
    sim.shutdown()
