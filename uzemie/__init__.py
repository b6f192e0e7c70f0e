"""Territorial units with yearly population data, CSV loading, a navigable hierarchy and supporting data structures."""

__version__ = "0.1.0"