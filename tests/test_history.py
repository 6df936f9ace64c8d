"""Tests for the return-history stack and the publication store."""

import pytest

from library_catalog.exceptions import DuplicateIdError, EmptyContainerError
from library_catalog.history import Stack
from library_catalog.store import PublicationStore


class TestStack:
    """Test the LIFO stack."""

    def test_push_pop_order(self):
        stack: Stack[int] = Stack()
        for item in (1, 2, 3):
            stack.push(item)

        assert stack.top() == 3
        assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
        assert stack.is_empty()

    def test_top_does_not_remove(self):
        stack: Stack[str] = Stack()
        stack.push("a")

        assert stack.top() == "a"
        assert len(stack) == 1

    def test_empty_stack_errors(self):
        """Reading from an empty stack is an error."""
        stack: Stack[int] = Stack()

        with pytest.raises(EmptyContainerError):
            stack.top()
        with pytest.raises(EmptyContainerError):
            stack.pop()

    def test_copy_is_independent(self):
        """Draining a copy leaves the original intact."""
        stack: Stack[int] = Stack()
        stack.push(1)
        stack.push(2)

        duplicate = stack.copy()
        duplicate.pop()
        duplicate.pop()

        assert duplicate.is_empty()
        assert len(stack) == 2
        assert list(stack) == [2, 1]


class TestPublicationStore:
    """Test the id-keyed publication store."""

    def test_add_and_get(self, go_book):
        store = PublicationStore()
        store.add(go_book)

        assert store.get(1) is go_book
        assert 1 in store
        assert len(store) == 1
        assert store.get(2) is None

    def test_same_object_twice_is_noop(self, go_book):
        store = PublicationStore()
        store.add(go_book)
        store.add(go_book)

        assert len(store) == 1

    def test_conflicting_id_rejected(self, make_book):
        """Another publication cannot take an id already in use."""
        store = PublicationStore()
        store.add(make_book(1, "Go"))

        with pytest.raises(DuplicateIdError):
            store.add(make_book(1, "C"))

    def test_views_by_kind(self, make_book, make_magazine):
        """Books and magazines are listed separately in insertion order."""
        store = PublicationStore()
        book_b = make_book(3, "B")
        magazine = make_magazine(2, "Byte", 1985, 1)
        book_a = make_book(1, "A")
        for publication in (book_b, magazine, book_a):
            store.add(publication)

        assert store.books() == [book_b, book_a]
        assert store.magazines() == [magazine]
        assert list(store) == [book_b, magazine, book_a]
