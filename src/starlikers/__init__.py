"""Starlikers - star chart and moon phase images from the Astronomy API."""

__version__ = "0.1.0"
