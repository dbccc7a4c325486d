"""Katsuyo - Japanese verb conjugation charts with English phrasing."""

__version__ = "0.1.0"
