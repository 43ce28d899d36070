"""Two-dimensional satellite orbit simulation with a headless drawing model."""

__version__ = "0.1.0"