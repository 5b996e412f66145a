"""Console chess: a simplified rules engine with a text front end."""

__version__ = "1.0.0"
