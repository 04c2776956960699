"""
Logging Configuration
Sets up the global logger for the application.

Submodules can be made chattier than the rest of the package, e.g. to trace
slider edits in the controller without the view noise:

    setup_logging(logging.INFO, module_levels={"controller": logging.DEBUG})
"""
import logging
import sys
from typing import Dict, Optional

PACKAGE_LOGGER = "stringvibration"

# Parameter edits are logged at DEBUG by the controller
DEFAULT_MODULE_LEVELS: Dict[str, int] = {"controller": logging.DEBUG}


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    module_levels: Optional[Dict[str, int]] = None,
) -> logging.Logger:
    """
    Configures the logger for the 'stringvibration' namespace.

    Args:
        level: Level of the package logger (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        module_levels: Per-submodule overrides, keyed relative to the package
            ("controller", "view.main_window", ...).

    Returns:
        The configured package logger.
    """
    module_levels = module_levels or {}

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Re-running setup (tests, restarts) must not duplicate output
    if logger.hasHandlers():
        logger.handlers.clear()

    # Handlers must pass the most verbose override through
    handler_level = min([level, *module_levels.values()])

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(handler_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(handler_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    for module, module_level in module_levels.items():
        logging.getLogger(f"{PACKAGE_LOGGER}.{module}").setLevel(module_level)

    logger.info("Logging initialized.")
    if module_levels:
        logger.debug(f"Module level overrides: {module_levels}")
    return logger
