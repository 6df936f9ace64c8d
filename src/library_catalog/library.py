"""
Library aggregate for the Library Catalog.

The Library owns every piece of catalog state and orchestrates the
operations that touch more than one entity:

1. Registration: customers, books, magazines and shelves
2. Circulation: borrowing and returning books
3. History: a LIFO record of returned publications
4. Sample data: bulk generation of customers and books

Publications live in a single PublicationStore. ``list_books()`` and the
shelves' indexes are views over that store, so there is exactly one object
per publication.

All lookups by id return ``None`` when nothing matches, while circulation
operations raise a CatalogError subclass. Every check runs before any state
is changed, so a failed operation leaves the library untouched.
"""

import logging

from .config import CatalogConfig, get_config
from .exceptions import (
    BookNotFoundError,
    CustomerNotFoundError,
    DuplicateIdError,
    InvalidCopyCountError,
    NoCopiesAvailableError,
    PublicationNotFoundError,
)
from .history import Stack
from .models.author import Author
from .models.customer import Customer
from .models.publication import Book, Magazine, Publication, PublicationKind
from .shelves import BookShelf, MagazineShelf, Shelf
from .store import PublicationStore

logger = logging.getLogger(__name__)


class Library:
    """Top-level catalog state: customers, publications, shelves and history."""

    def __init__(self, config: CatalogConfig | None = None):
        self.config = config if config is not None else get_config()
        self.store = PublicationStore()
        self.customers: list[Customer] = []
        self.shelves: list[Shelf] = []
        self.returned_publications: Stack[Publication] = Stack()
        self._next_customer_id = 1
        self._next_publication_id = 1

    # ------------------------- Registration ------------------------- #

    def add_customer(self, first_name: str, last_name: str) -> Customer:
        """Register a customer under the next free customer id."""
        customer = Customer(id=self._next_customer_id, first_name=first_name, last_name=last_name)
        self.customers.append(customer)
        self._next_customer_id += 1
        logger.info("Added customer %d: %s", customer.id, customer.full_name)
        return customer

    def add_book(
        self,
        title: str,
        author_first_name: str,
        author_last_name: str,
        year: int,
        pages: int,
        total_copies: int,
        available_copies: int,
    ) -> Book:
        """
        Create a book and file it on the first book shelf.

        Without a book shelf the book is only recorded in the catalog.

        Raises:
            pydantic.ValidationError: If a field is invalid, e.g. more
                available than total copies
        """
        book = Book(
            id=self._next_publication_id,
            title=title,
            author=Author(first_name=author_first_name, last_name=author_last_name),
            year_of_publication=year,
            page_count=pages,
            total_copies=total_copies,
            available_copies=available_copies,
        )
        self._register(book)
        logger.info("Added book %d: '%s' by %s", book.id, book.title, book.author.full_name)
        return book

    def add_magazine(
        self,
        title: str,
        year: int,
        issue_number: int,
        total_copies: int,
        available_copies: int,
    ) -> Magazine:
        """Create a magazine issue and file it on the first magazine shelf."""
        magazine = Magazine(
            id=self._next_publication_id,
            title=title,
            year_of_publication=year,
            issue_number=issue_number,
            total_copies=total_copies,
            available_copies=available_copies,
        )
        self._register(magazine)
        logger.info("Added magazine %d: '%s' #%d", magazine.id, magazine.title, magazine.issue_number)
        return magazine

    def add_shelf(self, shelf: Shelf) -> Shelf:
        """
        Attach a shelf to the library.

        Anything already on the shelf joins the library's publication store,
        and the shelf reads from that store from then on.

        Raises:
            DuplicateIdError: If a shelved publication clashes with a catalog id
        """
        if shelf.store is not self.store:
            incoming = list(shelf.store)
            for publication in incoming:
                existing = self.store.get(publication.id)
                if existing is not None and existing is not publication:
                    raise DuplicateIdError(
                        f"Publication id {publication.id} already used by '{existing.title}'"
                    )
            for publication in incoming:
                self.store.add(publication)
                self._next_publication_id = max(self._next_publication_id, publication.id + 1)
            shelf.store = self.store

        self.shelves.append(shelf)
        logger.info("Added %r", shelf)
        return shelf

    def book_shelf(self) -> BookShelf | None:
        """First shelf accepting books, if any."""
        return self._first_shelf(PublicationKind.BOOK)  # type: ignore[return-value]

    def magazine_shelf(self) -> MagazineShelf | None:
        """First shelf accepting magazines, if any."""
        return self._first_shelf(PublicationKind.MAGAZINE)  # type: ignore[return-value]

    # ------------------------- Circulation ------------------------- #

    def borrow_book(self, customer_id: int, book_id: int) -> Book:
        """
        Lend one copy of a book to a customer.

        Args:
            customer_id: Id of the borrowing customer
            book_id: Id of the book

        Returns:
            The borrowed book

        Raises:
            CustomerNotFoundError: If the customer is unknown
            BookNotFoundError: If the book is unknown
            NoCopiesAvailableError: If no copy is on hand
            DuplicateTitleError: If the customer holds a publication with that title
        """
        customer = self._require_customer(customer_id)
        book = self._require_book(book_id)

        if book.available_copies == 0:
            raise NoCopiesAvailableError(book.id, book.title)

        # The customer check may still fail, so the copy is taken afterwards
        customer.borrow_publication(book)
        book.available_copies -= 1

        logger.info(
            "Customer %d borrowed book %d ('%s'), %d/%d available",
            customer.id,
            book.id,
            book.title,
            book.available_copies,
            book.total_copies,
        )
        return book

    def return_book(self, customer_id: int, book_id: int) -> Book:
        """
        Take a book back from a customer and record it in the return history.

        With the ``restore`` return policy the copy becomes available again,
        through the book's shelf when it is shelved. With the ``historical``
        policy availability is left as it was.

        Raises:
            CustomerNotFoundError: If the customer is unknown
            BookNotFoundError: If the book is unknown
            PublicationNotFoundError: If the customer does not hold the book
            InvalidCopyCountError: If restoring would exceed the total copies
        """
        customer = self._require_customer(customer_id)
        book = self._require_book(book_id)

        if not customer.has_borrowed(book.id):
            raise PublicationNotFoundError(book.id, f"customer {customer.id}'s borrowed list")

        if self.config.restores_on_return:
            self._restore_copy(book)
        customer.return_publication(book.id)
        self.returned_publications.push(book)

        logger.info(
            "Customer %d returned book %d ('%s'), %d/%d available",
            customer.id,
            book.id,
            book.title,
            book.available_copies,
            book.total_copies,
        )
        return book

    def add_exemplar(self, book_id: int) -> Book:
        """
        Add one copy of a book.

        Raises:
            BookNotFoundError: If the book is unknown
        """
        book = self._require_book(book_id)

        shelf = self._shelf_holding(book)
        if shelf is not None:
            shelf.add_exemplar(book.id)
        else:
            book.total_copies += 1
            book.available_copies += 1
            logger.info("Added exemplar of unshelved book %d", book.id)
        return book

    # ------------------------- Queries ------------------------- #

    def find_customer(self, customer_id: int) -> Customer | None:
        for customer in self.customers:
            if customer.id == customer_id:
                return customer
        return None

    def find_book(self, book_id: int) -> Book | None:
        publication = self.store.get(book_id)
        if publication is not None and publication.kind == PublicationKind.BOOK:
            return publication
        return None

    def find_magazine(self, magazine_id: int) -> Magazine | None:
        publication = self.store.get(magazine_id)
        if publication is not None and publication.kind == PublicationKind.MAGAZINE:
            return publication
        return None

    def list_customers(self) -> list[Customer]:
        return list(self.customers)

    def list_books(self) -> list[Book]:
        return self.store.books()

    def list_magazines(self) -> list[Magazine]:
        return self.store.magazines()

    def returned_books(self) -> list[Publication]:
        """Returned publications, most recent first. The history is not consumed."""
        returned: list[Publication] = []
        history = self.returned_publications.copy()
        while not history.is_empty():
            returned.append(history.pop())
        return returned

    def borrowed_books(self) -> list[tuple[Customer, Publication]]:
        """Every (customer, publication) loan, in customer order."""
        return [
            (customer, publication)
            for customer in self.customers
            for publication in customer.borrowed_publications
        ]

    # ------------------------- Sample data ------------------------- #

    def bulk_generate(self, count: int) -> tuple[list[Customer], list[Book]]:
        """
        Create ``count`` sample customers and books.

        A book shelf is created first if the library has none. Each generated
        entity is numbered with the id it receives: customer ``i`` is
        ``Customer{i} LastName{i}`` and book ``i`` is ``Book{i}`` by
        ``Author {i}``, published in ``2000 + i`` with ``200 + i`` pages.

        Raises:
            ValueError: If count is negative
        """
        if count < 0:
            raise ValueError("Number of objects must be >= 0")

        if self.book_shelf() is None:
            self.add_shelf(
                BookShelf(self.config.default_shelf_capacity, self.config.default_shelf_floor)
            )

        customers = []
        for _ in range(count):
            i = self._next_customer_id
            customers.append(self.add_customer(f"Customer{i}", f"LastName{i}"))

        books = []
        for _ in range(count):
            i = self._next_publication_id
            books.append(
                self.add_book(
                    f"Book{i}",
                    "Author",
                    str(i),
                    2000 + i,
                    200 + i,
                    self.config.bulk_copies,
                    self.config.bulk_copies,
                )
            )

        logger.info("Generated %d customers and %d books", len(customers), len(books))
        return customers, books

    # ------------------------- Helpers ------------------------- #

    def _register(self, publication: Publication) -> None:
        self.store.add(publication)
        self._next_publication_id = max(self._next_publication_id, publication.id + 1)

        shelf = self._first_shelf(publication.kind)
        if shelf is None:
            logger.debug("No %s shelf, %d left unshelved", publication.kind.value, publication.id)
            return
        shelf.add_publication(publication)

    def _first_shelf(self, kind: PublicationKind) -> Shelf | None:
        for shelf in self.shelves:
            if shelf.kind == kind:
                return shelf
        return None

    def _shelf_holding(self, publication: Publication) -> Shelf | None:
        for shelf in self.shelves:
            if shelf.kind == publication.kind and shelf.contains(publication.id):
                return shelf
        return None

    def _restore_copy(self, book: Book) -> None:
        shelf = self._shelf_holding(book)
        if shelf is not None:
            shelf.return_publication(book)
            return

        if book.available_copies >= book.total_copies:
            raise InvalidCopyCountError(
                f"All {book.total_copies} copies of '{book.title}' are already on hand"
            )
        book.available_copies += 1

    def _require_customer(self, customer_id: int) -> Customer:
        customer = self.find_customer(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        return customer

    def _require_book(self, book_id: int) -> Book:
        book = self.find_book(book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        return book
