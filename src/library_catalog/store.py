"""
Publication store for the Library Catalog.

The store owns every publication object, keyed by id. The library's book and
magazine lists and the shelves' grouped indexes are views over it, so a
publication is never duplicated between collections and updates made through
one view are seen by all others.
"""

import logging
from collections.abc import Iterator

from .exceptions import DuplicateIdError
from .models.publication import Book, Magazine, Publication, PublicationKind

logger = logging.getLogger(__name__)


class PublicationStore:
    """Id-keyed collection of publications, kept in insertion order."""

    def __init__(self) -> None:
        self._publications: dict[int, Publication] = {}

    def add(self, publication: Publication) -> None:
        """
        Register a publication under its id.

        Registering the same object twice is a no-op.

        Raises:
            DuplicateIdError: If another publication already uses the id
        """
        existing = self._publications.get(publication.id)
        if existing is publication:
            return
        if existing is not None:
            raise DuplicateIdError(
                f"Publication id {publication.id} already used by '{existing.title}'"
            )

        self._publications[publication.id] = publication
        logger.debug("Stored %s %d", publication.kind.value, publication.id)

    def get(self, publication_id: int) -> Publication | None:
        return self._publications.get(publication_id)

    def of_kind(self, kind: PublicationKind) -> list[Publication]:
        """Publications of one variant, in insertion order."""
        return [p for p in self._publications.values() if p.kind == kind]

    def books(self) -> list[Book]:
        return self.of_kind(PublicationKind.BOOK)  # type: ignore[return-value]

    def magazines(self) -> list[Magazine]:
        return self.of_kind(PublicationKind.MAGAZINE)  # type: ignore[return-value]

    def __contains__(self, publication_id: object) -> bool:
        return publication_id in self._publications

    def __len__(self) -> int:
        return len(self._publications)

    def __iter__(self) -> Iterator[Publication]:
        return iter(list(self._publications.values()))
