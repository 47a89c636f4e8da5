"""Product sync - normalized product export for an external personalization service."""

__version__ = "0.1.0"
