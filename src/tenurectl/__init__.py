"""tenurectl — professional experience calculator."""

__version__ = "0.1.0"
