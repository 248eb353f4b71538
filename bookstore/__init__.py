"""Bookstore API: a small FastAPI service over an in-memory list of books."""

__version__ = "1.0.0"
