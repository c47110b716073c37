"""Analog clock face renderer."""

__version__ = "0.1.0"
