"""
Route definitions for the book endpoints.

- GET    /books/          : list every stored book
- GET    /book/{book_id}  : get one book
- POST   /book/{book_id}  : add the book from the body (path id unused)
- PUT    /book/{book_id}  : replace the book, id taken from the path
- DELETE /book/{book_id}  : remove the book

``book_id`` is everything after ``/book/``, so an empty id (``/book/``)
or one containing ``/`` still reaches the handlers.

Errors are raised as ``HTTPException`` whose ``detail`` is the plain
message string; ``bookstore.main`` renders it as a JSON string body.
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request

from ..models import Book
from ..storage import BookAlreadyExistsError, BookNotFoundError, BookStore


logger = logging.getLogger(__name__)

router = APIRouter(tags=["books"])


def get_book_store(request: Request) -> BookStore:
    """Return the store owned by the running application."""
    return request.app.state.book_store


@router.get("/books/", response_model=List[Book])
def list_books(store: BookStore = Depends(get_book_store)) -> List[Book]:
    return store.list_books()


@router.get("/book/{book_id:path}", response_model=Book)
def get_book(book_id: str, store: BookStore = Depends(get_book_store)) -> Book:
    try:
        return store.get_book(book_id)
    except BookNotFoundError as exc:
        raise HTTPException(status_code=404, detail=exc.message) from exc


@router.post("/book/{book_id:path}", response_model=List[Book])
def add_book(
    book_id: str,
    book: Book,
    store: BookStore = Depends(get_book_store),
) -> List[Book]:
    """Add ``book`` and return the full list.

    The id stored is the one from the body; ``book_id`` is only part of
    the route.
    """
    logger.info("book.add path_id=%s id=%s", book_id, book.id)
    try:
        store.add_book(book)
    except BookAlreadyExistsError as exc:
        raise HTTPException(status_code=400, detail=exc.message) from exc
    return store.list_books()


@router.put("/book/{book_id:path}", response_model=Book)
def update_book(
    book_id: str,
    book: Book,
    store: BookStore = Depends(get_book_store),
) -> Book:
    logger.info("book.update id=%s", book_id)
    book = book.model_copy(update={"id": book_id})
    try:
        store.update_book(book)
        return store.get_book(book_id)
    except BookNotFoundError as exc:
        raise HTTPException(status_code=400, detail=exc.message) from exc


@router.delete("/book/{book_id:path}", response_model=List[Book])
def delete_book(book_id: str, store: BookStore = Depends(get_book_store)) -> List[Book]:
    logger.info("book.delete id=%s", book_id)
    try:
        store.delete_book(book_id)
    except BookNotFoundError as exc:
        raise HTTPException(status_code=400, detail=exc.message) from exc
    return store.list_books()
