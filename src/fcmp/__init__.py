"""File compare utility: pick the most recently modified path."""

__version__ = "0.3.1"
