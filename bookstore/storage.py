# bookstore/storage.py
"""
In-memory book store.

Books are kept in a plain list in insertion order and every lookup is a
linear scan by ``id``.  A single ``threading.Lock`` guards all access
because FastAPI runs sync endpoints on a worker threadpool, so several
requests can reach the same store at once.
"""

from __future__ import annotations

import threading
from typing import List, Optional

from .models import Book


class BookStoreError(Exception):
    """Base class for store lookup failures.

    ``message`` is the exact text returned to HTTP clients.
    """

    def __init__(self, book_id: str, message: str) -> None:
        super().__init__(message)
        self.book_id = book_id
        self.message = message


class BookNotFoundError(BookStoreError):
    def __init__(self, book_id: str) -> None:
        super().__init__(book_id, f"Book with id {book_id} not found")


class BookAlreadyExistsError(BookStoreError):
    def __init__(self, book_id: str) -> None:
        super().__init__(book_id, f"Book with id {book_id} already exists")


class BookStore:
    def __init__(self) -> None:
        self._books: List[Book] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def _index_of(self, book_id: str) -> Optional[int]:
        # caller holds the lock
        for i, book in enumerate(self._books):
            if book.id == book_id:
                return i
        return None

    def find_by_id(self, book_id: str) -> Optional[Book]:
        """Return a copy of the first book with ``book_id``, or ``None``."""
        with self._lock:
            i = self._index_of(book_id)
            return self._books[i].model_copy() if i is not None else None

    def get_book(self, book_id: str) -> Book:
        book = self.find_by_id(book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        return book

    def list_books(self) -> List[Book]:
        with self._lock:
            return [b.model_copy() for b in self._books]

    def add_book(self, book: Book) -> None:
        with self._lock:
            if self._index_of(book.id) is not None:
                raise BookAlreadyExistsError(book.id)
            self._books.append(book.model_copy())

    def update_book(self, book: Book) -> None:
        """Replace the stored book that has ``book.id``, keeping its position."""
        with self._lock:
            i = self._index_of(book.id)
            if i is None:
                raise BookNotFoundError(book.id)
            self._books[i] = book.model_copy()

    def delete_book(self, book_id: str) -> None:
        with self._lock:
            i = self._index_of(book_id)
            if i is None:
                raise BookNotFoundError(book_id)
            del self._books[i]
