"""Holded Bridge - Holded time-tracking endpoints and descriptors for a host automation platform."""

__version__ = "0.1.0"
