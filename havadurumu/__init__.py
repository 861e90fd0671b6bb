"""Hava Durumu - a single-screen terminal weather lookup."""

__version__ = "1.0.0"
