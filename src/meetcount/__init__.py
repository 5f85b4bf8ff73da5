"""meetcount — count recurring meetings between two dates, minus holidays."""

__version__ = "0.1.0"
