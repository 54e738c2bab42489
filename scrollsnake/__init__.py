"""Single-player scrolling snake served to the browser."""

__version__ = "0.1.0"
