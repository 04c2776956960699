"""Vibrating string (standing wave) simulation."""
__version__ = "0.1.0"
