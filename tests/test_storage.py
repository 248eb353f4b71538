from concurrent.futures import ThreadPoolExecutor

import pytest

from bookstore.models import Book
from bookstore.storage import BookAlreadyExistsError, BookNotFoundError, BookStore


def _book(book_id: str, author: str = "A", name: str = "N") -> Book:
    return Book(id=book_id, author=author, name=name)


def test_add_then_find_returns_same_fields(store):
    store.add_book(_book("1", "Ursula K. Le Guin", "The Dispossessed"))
    found = store.find_by_id("1")
    assert found == _book("1", "Ursula K. Le Guin", "The Dispossessed")


def test_find_missing_returns_none(store):
    assert store.find_by_id("nope") is None


def test_get_book_missing_raises(store):
    with pytest.raises(BookNotFoundError) as excinfo:
        store.get_book("7")
    assert excinfo.value.message == "Book with id 7 not found"
    assert excinfo.value.book_id == "7"


def test_find_returns_a_copy(store):
    store.add_book(_book("1"))
    found = store.find_by_id("1")
    found.author = "changed"
    assert store.find_by_id("1").author == "A"


def test_add_duplicate_id_fails_and_keeps_size(store):
    store.add_book(_book("1"))
    with pytest.raises(BookAlreadyExistsError) as excinfo:
        store.add_book(_book("1", "B", "Other"))
    assert str(excinfo.value) == "Book with id 1 already exists"
    assert len(store) == 1
    assert store.find_by_id("1").author == "A"


def test_update_missing_fails_and_leaves_store_unchanged(store):
    store.add_book(_book("1"))
    with pytest.raises(BookNotFoundError):
        store.update_book(_book("2", "B", "M"))
    assert store.list_books() == [_book("1")]


def test_update_replaces_in_place(store):
    for book_id in ("1", "2", "3"):
        store.add_book(_book(book_id))
    store.update_book(_book("2", "B", "M"))
    assert [b.id for b in store.list_books()] == ["1", "2", "3"]
    assert store.find_by_id("2") == _book("2", "B", "M")


def test_delete_removes_exactly_one_and_keeps_order(store):
    for book_id in ("1", "2", "3"):
        store.add_book(_book(book_id))
    store.delete_book("2")
    assert [b.id for b in store.list_books()] == ["1", "3"]
    assert store.find_by_id("2") is None


def test_delete_missing_fails_and_leaves_store_unchanged(store):
    store.add_book(_book("1"))
    with pytest.raises(BookNotFoundError):
        store.delete_book("2")
    assert len(store) == 1


def test_list_is_a_snapshot(store):
    books = store.list_books()
    books.append(_book("x"))
    assert store.list_books() == []


def test_concurrent_adds_all_land():
    store = BookStore()
    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda i: store.add_book(_book(str(i))), range(200)))
    assert len(store) == 200
    assert sorted(int(b.id) for b in store.list_books()) == list(range(200))


def test_concurrent_duplicate_adds_keep_one():
    store = BookStore()
    outcomes = []

    def attempt(_):
        try:
            store.add_book(_book("same"))
            outcomes.append("added")
        except BookAlreadyExistsError:
            outcomes.append("exists")

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(attempt, range(50)))
    assert outcomes.count("added") == 1
    assert len(store) == 1
