"""Timing, serialization, configuration, listeners and Xbus tools for real-time sensor data."""

__version__ = "0.1.0"