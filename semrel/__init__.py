"""Conventional-commit release decisions, changelogs and version planning."""

__version__ = "0.1.0"
