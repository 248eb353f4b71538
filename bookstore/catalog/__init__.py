"""
Catalog package for the bookstore API.

Holds the ``/books/`` and ``/book/{book_id}`` routes. The routes never
own a store themselves: they receive the application's ``BookStore``
through the ``get_book_store`` dependency.
"""

from .router import router as catalog_router  # noqa: F401
