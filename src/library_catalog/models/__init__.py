"""
Library Catalog models.

Pydantic models for the catalog entities:
- Author: Immutable name pair
- Book / Magazine: Publication variants tagged by ``kind``
- Customer: Library member with a borrow list
"""

from .author import Author
from .customer import Customer
from .publication import Book, Magazine, Publication, PublicationBase, PublicationKind

__all__ = [
    "Author",
    "Book",
    "Customer",
    "Magazine",
    "Publication",
    "PublicationBase",
    "PublicationKind",
]
