"""City-builder simulation core: shared resources, satisfaction, transport and utilities."""

__version__ = "0.1.0"