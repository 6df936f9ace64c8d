"""
Publication models for the Library Catalog.

A publication is anything the library lends out. Two variants exist:
- Book: written by an Author, has a page count
- Magazine: identified within its title by an issue number

Each variant carries a ``kind`` tag. Shelves and the publication store
dispatch on that tag, and ``Publication`` is the tagged union of both
variants for fields and signatures that accept either.
"""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .author import Author


class PublicationKind(str, Enum):
    """Tag identifying the publication variant."""

    BOOK = "book"
    MAGAZINE = "magazine"


class PublicationBase(BaseModel):
    """
    Fields shared by every publication.

    Copy counters are mutated in place by shelves and the library. The
    invariant 0 <= available_copies <= total_copies is validated on creation
    and on every assignment.
    """

    id: int = Field(
        ...,
        description="Identifier, unique among all publications of a library",
        ge=1,
        examples=[1, 42],
    )

    title: str = Field(
        ...,
        description="Title of the publication",
        min_length=1,
        max_length=500,
        examples=["The Go Programming Language", "National Geographic"],
    )

    year_of_publication: int = Field(
        ...,
        description="Year the publication was issued",
        examples=[1925, 2020],
    )

    total_copies: int = Field(
        ...,
        description="Number of copies owned by the library",
        ge=0,
        examples=[1, 5],
    )

    available_copies: int = Field(
        ...,
        description="Number of copies currently on hand",
        ge=0,
        examples=[0, 3],
    )

    @model_validator(mode="after")
    def validate_copies(self) -> "PublicationBase":
        """Ensure available copies doesn't exceed total copies."""
        if self.available_copies > self.total_copies:
            raise ValueError("Available copies cannot exceed total copies")
        return self

    @property
    def is_available(self) -> bool:
        """Check if at least one copy can be borrowed."""
        return self.available_copies > 0

    @property
    def borrowed_copies(self) -> int:
        """Number of copies not currently on hand."""
        return self.total_copies - self.available_copies

    model_config = ConfigDict(
        validate_assignment=True,
        str_strip_whitespace=True,
        extra="forbid",
    )


class Book(PublicationBase):
    """A book, shelved by its author's full name."""

    kind: Literal[PublicationKind.BOOK] = PublicationKind.BOOK

    author: Author = Field(
        ...,
        description="Author of the book, stored by value",
    )

    page_count: int = Field(
        ...,
        description="Number of pages",
        ge=0,
        examples=[300, 1200],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Go",
                "author": {"first_name": "Rob", "last_name": "Pike"},
                "year_of_publication": 2020,
                "page_count": 300,
                "total_copies": 2,
                "available_copies": 2,
            }
        },
    )


class Magazine(PublicationBase):
    """A magazine issue, shelved by title."""

    kind: Literal[PublicationKind.MAGAZINE] = PublicationKind.MAGAZINE

    issue_number: int = Field(
        ...,
        description="Issue number within the year",
        ge=0,
        examples=[1, 12],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 7,
                "title": "Byte",
                "year_of_publication": 1985,
                "issue_number": 4,
                "total_copies": 1,
                "available_copies": 1,
            }
        },
    )


Publication = Annotated[Book | Magazine, Field(discriminator="kind")]
