"""Client library for the portfolio dashboard REST backend."""

__version__ = "0.1.0"
