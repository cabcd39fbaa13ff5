"""Receipt-text interpretation for inventory item capture."""

__version__ = "0.1.0"
