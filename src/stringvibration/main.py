"""
Application Initialization
==========================
This module wires the MVC pieces together and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the simulation (state + animation clock).
2. Instantiates the Main Window (View) and passes the simulation into it.
3. Guarantees the clock is cancelled before the application exits.
"""
import logging

from stringvibration.application import create_app
from stringvibration.controller.simulation import StringSimulation
from stringvibration.logging_config import DEFAULT_MODULE_LEVELS, setup_logging
from stringvibration.view.main_window import MainWindow


def main() -> int:
    # Package at INFO, controller at DEBUG so slider edits are traced
    setup_logging(level=logging.INFO, module_levels=DEFAULT_MODULE_LEVELS)

    app = create_app()

    with StringSimulation() as simulation:
        app.aboutToQuit.connect(simulation.shutdown)

        window = MainWindow(simulation)
        window.show()

        simulation.start()
        return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
