"""Scaffold frontend development projects and keep the tool itself up to date."""

__version__ = "1.0.1"