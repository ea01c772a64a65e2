"""Wall layout and cutting-stock engine for cabinet fabrication."""

__version__ = "0.1.0"
