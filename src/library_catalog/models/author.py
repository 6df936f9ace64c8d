"""
Author model for the Library Catalog.

Authors are plain name pairs stored by value inside each book. Book shelves
group their books by the author's full name.
"""

from pydantic import BaseModel, ConfigDict, Field


class Author(BaseModel):
    """
    Represents the author of a book.

    Authors are immutable: two books written by the same person simply carry
    equal Author values.
    """

    first_name: str = Field(
        ...,
        description="Author's first name",
        min_length=1,
        max_length=100,
        examples=["Rob", "Harper"],
    )

    last_name: str = Field(
        ...,
        description="Author's last name",
        min_length=1,
        max_length=100,
        examples=["Pike", "Lee"],
    )

    @property
    def full_name(self) -> str:
        """First and last name separated by a single space."""
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        return self.full_name

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "first_name": "Rob",
                "last_name": "Pike",
            }
        },
    )
