"""Daybook - bullet-journal storage for daily todos and notes."""

__version__ = "0.3.0"
