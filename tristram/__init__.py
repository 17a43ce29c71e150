"""Level file readers, isometric geometry, pixel surfaces and utilities for an isometric role-playing game engine."""

__version__ = "0.1.0"