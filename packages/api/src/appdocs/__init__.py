# This project was developed with assistance from AI tools.
"""Application summary document generation."""

__version__ = "0.1.0"
