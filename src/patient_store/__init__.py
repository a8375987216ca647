"""Patient Store - in-memory patient demographic records with validation."""

__version__ = "0.1.0"
