"""802.1X configuration generator."""

__version__ = "1.0.0"
