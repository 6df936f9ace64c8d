"""
Exceptions raised by the Library Catalog.

Every catalog operation checks its preconditions before mutating anything
and raises one of these at the point of violation. Callers (the menu) catch
``CatalogError``, report the message and carry on.
"""


class CatalogError(Exception):
    """Base exception for catalog operations."""


class NotFoundError(CatalogError):
    """Raised when an entity is not found."""


class CustomerNotFoundError(NotFoundError):
    """Raised when a customer id is not registered."""

    def __init__(self, customer_id: int):
        super().__init__(f"Customer {customer_id} not found")
        self.customer_id = customer_id


class BookNotFoundError(NotFoundError):
    """Raised when a book id is not in the catalog."""

    def __init__(self, book_id: int):
        super().__init__(f"Book {book_id} not found")
        self.book_id = book_id


class PublicationNotFoundError(NotFoundError):
    """Raised when a publication is missing from a shelf or a borrow list."""

    def __init__(self, publication_id: int, where: str):
        super().__init__(f"Publication {publication_id} not found in {where}")
        self.publication_id = publication_id
        self.where = where


class NotFoundOrUnavailableError(NotFoundError):
    """Raised when a shelf has no available copy of the requested publication."""

    def __init__(self, publication_id: int):
        super().__init__(f"Publication {publication_id} not found or not available")
        self.publication_id = publication_id


class TypeMismatchError(CatalogError):
    """Raised when a publication is routed to a shelf of another kind."""


class DuplicateTitleError(CatalogError):
    """Raised when a customer already holds a publication with the same title."""

    def __init__(self, customer_id: int, title: str):
        super().__init__(f"Customer {customer_id} already has a publication titled '{title}'")
        self.customer_id = customer_id
        self.title = title


class DuplicateIdError(CatalogError):
    """Raised when a different publication is already registered under an id."""


class NoCopiesAvailableError(CatalogError):
    """Raised when borrowing a publication with no copies on hand."""

    def __init__(self, publication_id: int, title: str):
        super().__init__(f"No available copies of '{title}' (id {publication_id})")
        self.publication_id = publication_id
        self.title = title


class InvalidCopyCountError(CatalogError):
    """Raised when a change would break 0 <= available_copies <= total_copies."""


class EmptyContainerError(CatalogError):
    """Raised when reading from or popping an empty stack."""
