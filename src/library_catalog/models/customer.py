"""
Customer model for the Library Catalog.

A customer holds the publications currently borrowed. The borrow list keeps
references to the catalog's own publication objects, so copy counters seen
through a customer are always current.
"""

import logging

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import DuplicateTitleError, PublicationNotFoundError
from .publication import Publication

logger = logging.getLogger(__name__)


class Customer(BaseModel):
    """
    Represents a library customer.

    A customer may hold at most one publication per title. Borrowing and
    returning here only maintains the borrow list; copy counters belong to
    the library and its shelves.
    """

    id: int = Field(
        ...,
        description="Unique identifier for the customer",
        ge=1,
        examples=[1, 2],
    )

    first_name: str = Field(
        ...,
        description="Customer's first name",
        min_length=1,
        max_length=100,
        examples=["Ann"],
    )

    last_name: str = Field(
        ...,
        description="Customer's last name",
        min_length=1,
        max_length=100,
        examples=["Lee"],
    )

    borrowed_publications: list[Publication] = Field(
        default_factory=list,
        description="Publications currently borrowed, in borrow order",
    )

    @property
    def full_name(self) -> str:
        """First and last name separated by a single space."""
        return f"{self.first_name} {self.last_name}"

    def has_borrowed(self, publication_id: int) -> bool:
        """Check if the customer holds the publication with this id."""
        return any(p.id == publication_id for p in self.borrowed_publications)

    def borrow_publication(self, publication: Publication) -> None:
        """
        Add a publication to the borrow list.

        Args:
            publication: The publication being lent out

        Raises:
            DuplicateTitleError: If a publication with the same title is held
        """
        if any(p.title == publication.title for p in self.borrowed_publications):
            raise DuplicateTitleError(self.id, publication.title)

        self.borrowed_publications.append(publication)
        logger.debug("Customer %d borrowed publication %d", self.id, publication.id)

    def return_publication(self, publication_id: int) -> Publication:
        """
        Remove a publication from the borrow list.

        Args:
            publication_id: Id of the publication being handed back

        Returns:
            The removed publication

        Raises:
            PublicationNotFoundError: If the customer does not hold it
        """
        for index, publication in enumerate(self.borrowed_publications):
            if publication.id == publication_id:
                del self.borrowed_publications[index]
                logger.debug("Customer %d returned publication %d", self.id, publication_id)
                return publication

        raise PublicationNotFoundError(publication_id, f"customer {self.id}'s borrowed list")

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "first_name": "Ann",
                "last_name": "Lee",
                "borrowed_publications": [],
            }
        },
    )
