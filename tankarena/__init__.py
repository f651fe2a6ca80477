"""Turn-based tank battle simulator on a wrapping grid with scripted tanks."""

__version__ = "0.1.0"