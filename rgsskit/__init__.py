"""Configuration, data types, file systems, draw ordering, scene objects, fonts and events for RGSS-style games."""

__version__ = "0.1.0"