"""Learning classifier system components (XCS/XCSR) and benchmark environments."""

__version__ = "0.1.0"