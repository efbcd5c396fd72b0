"""Shelf configurator divider interaction engine."""

__version__ = "1.0.0"
