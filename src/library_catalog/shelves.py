"""
Shelves for the Library Catalog.

A shelf is a grouped index over one publication variant:
- BookShelf: groups books by author full name, each group ordered by title
- MagazineShelf: groups magazines by title, each group ordered by
  (year of publication, issue number)

Shelves only hold publication ids. The publication objects live in a
PublicationStore shared with the library, so a shelf never carries a copy
that could drift from the library's master lists.

Capacity and floor are recorded for display; capacity is not enforced and an
overfull shelf only logs a warning.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Hashable
from typing import Any

from .exceptions import (
    InvalidCopyCountError,
    NotFoundOrUnavailableError,
    PublicationNotFoundError,
    TypeMismatchError,
)
from .models.publication import Book, Magazine, Publication, PublicationKind
from .store import PublicationStore

logger = logging.getLogger(__name__)


class Shelf(ABC):
    """
    Base shelf implementing the operations shared by every variant.

    Subclasses declare which publication kind they accept and how entries
    are grouped and ordered.
    """

    def __init__(self, max_capacity: int, floor: int, store: PublicationStore | None = None):
        if max_capacity < 0:
            raise ValueError("Shelf capacity must be >= 0")

        self.max_capacity = max_capacity
        self.floor = floor
        self.store = store if store is not None else PublicationStore()
        self._groups: dict[str, list[int]] = {}

    @property
    @abstractmethod
    def kind(self) -> PublicationKind:
        """Publication kind accepted by this shelf."""

    @abstractmethod
    def group_key(self, publication: Publication) -> str:
        """Key of the group a publication is filed under."""

    @abstractmethod
    def sort_key(self, publication: Publication) -> Hashable:
        """Ordering of publications within a group."""

    # ------------------------------------------------------------------ #
    # Shelf operations
    # ------------------------------------------------------------------ #

    def add_publication(self, publication: Publication) -> None:
        """
        File a publication on the shelf.

        The publication is registered in the shelf's store, appended to its
        group and the group is re-sorted. Filing an already shelved
        publication again does nothing.

        Raises:
            TypeMismatchError: If the publication is of another kind
            DuplicateIdError: If the store holds another publication with its id
        """
        self._check_kind(publication, "add")
        self.store.add(publication)

        group = self._groups.setdefault(self.group_key(publication), [])
        if publication.id in group:
            return
        group.append(publication.id)
        group.sort(key=lambda publication_id: self.sort_key(self._resolve(publication_id)))

        if len(self) > self.max_capacity:
            logger.warning(
                "%s on floor %d holds %d publications, capacity is %d",
                type(self).__name__,
                self.floor,
                len(self),
                self.max_capacity,
            )
        logger.debug("Shelved %s %d under '%s'", self.kind.value, publication.id, self.group_key(publication))

    def remove_publication(self, publication_id: int) -> None:
        """Remove every entry with this id. Does nothing if none exists."""
        for key in list(self._groups):
            group = [pid for pid in self._groups[key] if pid != publication_id]
            if group:
                self._groups[key] = group
            else:
                del self._groups[key]

    def borrow_publication(self, publication_id: int) -> Publication:
        """
        Take one copy of a shelved publication.

        Returns:
            The publication whose available copies were decremented

        Raises:
            NotFoundOrUnavailableError: If the id is not shelved or no copy is on hand
        """
        for publication in self.publications():
            if publication.id == publication_id and publication.available_copies > 0:
                publication.available_copies -= 1
                return publication

        raise NotFoundOrUnavailableError(publication_id)

    def return_publication(self, publication: Publication) -> None:
        """
        Put one copy of a publication back on the shelf.

        Raises:
            TypeMismatchError: If the publication is of another kind
            PublicationNotFoundError: If the id is not shelved
            InvalidCopyCountError: If every copy is already on hand
        """
        self._check_kind(publication, "return")

        shelved = self._find(publication.id)
        if shelved.available_copies >= shelved.total_copies:
            raise InvalidCopyCountError(
                f"All {shelved.total_copies} copies of '{shelved.title}' are already on hand"
            )
        shelved.available_copies += 1

    def add_exemplar(self, publication_id: int) -> None:
        """
        Add one more copy of a shelved publication.

        Raises:
            PublicationNotFoundError: If the id is not shelved
        """
        publication = self._find(publication_id)
        publication.total_copies += 1
        publication.available_copies += 1
        logger.info(
            "Added exemplar of '%s' (%d/%d available)",
            publication.title,
            publication.available_copies,
            publication.total_copies,
        )

    # ------------------------------------------------------------------ #
    # Views
    # ------------------------------------------------------------------ #

    def contains(self, publication_id: int) -> bool:
        return any(publication_id in group for group in self._groups.values())

    def group_keys(self) -> list[str]:
        """Group keys in sorted order."""
        return sorted(self._groups)

    def group(self, key: str) -> list[Publication]:
        """Publications filed under a key, in shelf order."""
        return [self._resolve(pid) for pid in self._groups.get(key, [])]

    def publications(self) -> list[Publication]:
        """Every shelved publication, group by group."""
        return [pub for key in self.group_keys() for pub in self.group(key)]

    def __len__(self) -> int:
        return sum(len(group) for group in self._groups.values())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(max_capacity={self.max_capacity}, "
            f"floor={self.floor}, size={len(self)})"
        )

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    def _check_kind(self, publication: Any, action: str) -> None:
        if getattr(publication, "kind", None) != self.kind:
            raise TypeMismatchError(
                f"Can only {action} {self.kind.value}s on {type(self).__name__}"
            )

    def _resolve(self, publication_id: int) -> Publication:
        publication = self.store.get(publication_id)
        if publication is None:
            raise PublicationNotFoundError(publication_id, "publication store")
        return publication

    def _find(self, publication_id: int) -> Publication:
        if not self.contains(publication_id):
            raise PublicationNotFoundError(publication_id, type(self).__name__)
        return self._resolve(publication_id)


class BookShelf(Shelf):
    """Shelf of books grouped by author."""

    @property
    def kind(self) -> PublicationKind:
        return PublicationKind.BOOK

    def group_key(self, publication: Publication) -> str:
        return publication.author.full_name  # type: ignore[union-attr]

    def sort_key(self, publication: Publication) -> Hashable:
        return publication.title

    def books_by_author(self, author_name: str) -> list[Book]:
        """All books by an author, ordered by title."""
        return self.group(author_name)  # type: ignore[return-value]

    def available_books_by_author(self, author_name: str) -> list[Book]:
        """Books by an author with at least one copy on hand."""
        return [book for book in self.books_by_author(author_name) if book.is_available]

    def available_books(self) -> list[Book]:
        """Every shelved book with at least one copy on hand."""
        return [book for book in self.publications() if book.is_available]  # type: ignore[misc]


class MagazineShelf(Shelf):
    """Shelf of magazines grouped by title."""

    @property
    def kind(self) -> PublicationKind:
        return PublicationKind.MAGAZINE

    def group_key(self, publication: Publication) -> str:
        return publication.title

    def sort_key(self, publication: Publication) -> Hashable:
        return (publication.year_of_publication, publication.issue_number)  # type: ignore[union-attr]

    def magazines_with_title(self, title: str) -> list[Magazine]:
        """All issues of a title, oldest first."""
        return self.group(title)  # type: ignore[return-value]

    def available_magazines_with_title_and_year(self, title: str, year: int) -> list[Magazine]:
        """Issues of a title from one year with at least one copy on hand."""
        return [
            magazine
            for magazine in self.magazines_with_title(title)
            if magazine.year_of_publication == year and magazine.is_available
        ]
