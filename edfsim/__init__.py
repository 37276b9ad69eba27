"""Earliest Deadline First scheduling simulator for periodic task sets."""

__version__ = "0.1.0"
__all__ = ["__version__"]