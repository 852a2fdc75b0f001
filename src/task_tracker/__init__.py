"""In-memory task tracker with a text menu, filtering, sorting and JSON export."""

__version__ = "0.1.0"
