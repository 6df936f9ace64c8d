"""Interactive menu for the Library Catalog.

The menu is a thin caller over ``Library``: it prompts for values, runs one
catalog operation per selection and prints the outcome with rich. Catalog
errors and invalid field values are reported and the loop continues; only
the Exit entry (or end of input) stops it.
"""

import logging
import sys
from typing import TextIO

from pydantic import ValidationError
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import IntPrompt, Prompt
from rich.table import Table

from .config import CatalogConfig, get_config
from .exceptions import CatalogError
from .library import Library
from .shelves import BookShelf

logger = logging.getLogger(__name__)

MENU_ITEMS = [
    ("1", "Create a customer"),
    ("2", "Show list of customers"),
    ("3", "Create a book"),
    ("4", "Show list of books"),
    ("5", "Borrow a book"),
    ("6", "Return a book"),
    ("7", "Show returned books"),
    ("8", "Show borrowed books"),
    ("9", "Create customers and books automatically"),
    ("10", "Add an exemplar of a book"),
    ("0", "Exit"),
]


class _StreamEndMixin:
    """Raise EOFError once a scripted input stream is exhausted."""

    @classmethod
    def get_input(cls, console, prompt, password, stream=None):
        value = super().get_input(console, prompt, password, stream=stream)
        # readline() returns "" only at end of stream
        if stream is not None and value == "":
            raise EOFError
        return value


class _Prompt(_StreamEndMixin, Prompt):
    pass


class _IntPrompt(_StreamEndMixin, IntPrompt):
    pass


def configure_logging(config: CatalogConfig) -> None:
    """Send log records to stderr so stdout stays clean for the menu."""
    logging.basicConfig(
        level=config.effective_log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


class CatalogMenu:
    """Menu loop bound to one library, one console and one input stream."""

    def __init__(self, library: Library, console: Console | None = None, stream: TextIO | None = None):
        self.library = library
        self.console = console or Console()
        # None reads from the terminal
        self.stream = stream

    # ------------------------- Prompts ------------------------- #

    def ask(self, prompt: str) -> str:
        return _Prompt.ask(prompt, console=self.console, stream=self.stream).strip()

    def ask_int(self, prompt: str) -> int:
        return _IntPrompt.ask(prompt, console=self.console, stream=self.stream)

    def error(self, exc: Exception) -> None:
        self.console.print(f"[bold red]Error:[/] {escape(str(exc))}")

    # ------------------------- Actions ------------------------- #

    def create_customer(self) -> None:
        first_name = self.ask("Enter customer's first name")
        last_name = self.ask("Enter customer's last name")
        try:
            customer = self.library.add_customer(first_name, last_name)
        except ValidationError as exc:
            self.error(exc)
            return
        self.console.print(f"[green]Customer created successfully (id {customer.id}).[/]")

    def show_customers(self) -> None:
        table = Table(title="Customers", header_style="bold cyan")
        table.add_column("ID", justify="right", style="magenta")
        table.add_column("Name")
        table.add_column("Borrowed", justify="right")
        for customer in self.library.list_customers():
            table.add_row(
                str(customer.id), escape(customer.full_name), str(len(customer.borrowed_publications))
            )
        self.console.print(table)

    def create_book(self) -> None:
        title = self.ask("Enter book title")
        author_first_name = self.ask("Enter author's first name")
        author_last_name = self.ask("Enter author's last name")
        year = self.ask_int("Enter publication year")
        pages = self.ask_int("Enter number of pages")
        total = self.ask_int("Enter total copies")
        available = self.ask_int("Enter available copies")
        try:
            book = self.library.add_book(
                title, author_first_name, author_last_name, year, pages, total, available
            )
        except (CatalogError, ValidationError) as exc:
            self.error(exc)
            return
        self.console.print(f"[green]Book added successfully (id {book.id}).[/]")

    def show_books(self) -> None:
        table = Table(title="Books", header_style="bold cyan")
        table.add_column("ID", justify="right", style="magenta")
        table.add_column("Title")
        table.add_column("Author")
        table.add_column("Year", justify="right")
        table.add_column("Available", justify="right")
        for book in self.library.list_books():
            table.add_row(
                str(book.id),
                escape(book.title),
                escape(book.author.full_name),
                str(book.year_of_publication),
                f"{book.available_copies}/{book.total_copies}",
            )
        self.console.print(table)

    def borrow_book(self) -> None:
        customer_id = self.ask_int("Enter customer ID")
        book_id = self.ask_int("Enter book ID")
        try:
            self.library.borrow_book(customer_id, book_id)
        except CatalogError as exc:
            self.error(exc)
            return
        self.console.print("[green]Book borrowed successfully.[/]")

    def return_book(self) -> None:
        customer_id = self.ask_int("Enter customer ID")
        book_id = self.ask_int("Enter book ID")
        try:
            self.library.return_book(customer_id, book_id)
        except CatalogError as exc:
            self.error(exc)
            return
        self.console.print("[green]Book returned successfully.[/]")

    def show_returned_books(self) -> None:
        table = Table(title="Returned books (most recent first)", header_style="bold cyan")
        table.add_column("ID", justify="right", style="magenta")
        table.add_column("Title")
        for publication in self.library.returned_books():
            table.add_row(str(publication.id), escape(publication.title))
        self.console.print(table)

    def show_borrowed_books(self) -> None:
        table = Table(title="Borrowed books", header_style="bold cyan")
        table.add_column("Customer")
        table.add_column("Book ID", justify="right", style="magenta")
        table.add_column("Title")
        for customer, publication in self.library.borrowed_books():
            table.add_row(escape(customer.full_name), str(publication.id), escape(publication.title))
        self.console.print(table)

    def generate(self) -> None:
        count = self.ask_int("Enter number of objects")
        try:
            customers, books = self.library.bulk_generate(count)
        except ValueError as exc:
            self.error(exc)
            return
        self.console.print(
            f"[green]Created {len(customers)} customers and {len(books)} books.[/]"
        )

    def add_exemplar(self) -> None:
        book_id = self.ask_int("Enter book ID")
        try:
            book = self.library.add_exemplar(book_id)
        except CatalogError as exc:
            self.error(exc)
            return
        self.console.print(
            f"[green]'{escape(book.title)}' now has {book.available_copies}/{book.total_copies} copies available.[/]"
        )

    # ------------------------- Loop ------------------------- #

    def render(self) -> None:
        table = Table.grid(padding=(0, 2))
        table.add_column(justify="right", style="bold cyan", width=4)
        table.add_column(justify="left")
        for key, label in MENU_ITEMS:
            table.add_row(key, label)
        self.console.print(
            Panel(
                table,
                title="Library Management System",
                border_style="cyan",
                box=box.ROUNDED,
                padding=(0, 1),
            )
        )

    def run(self) -> None:
        actions = {
            "1": self.create_customer,
            "2": self.show_customers,
            "3": self.create_book,
            "4": self.show_books,
            "5": self.borrow_book,
            "6": self.return_book,
            "7": self.show_returned_books,
            "8": self.show_borrowed_books,
            "9": self.generate,
            "10": self.add_exemplar,
        }
        while True:
            self.render()
            try:
                # An empty answer selects Exit
                choice = _Prompt.ask(
                    "Enter your choice",
                    choices=[key for key, _ in MENU_ITEMS],
                    default="0",
                    console=self.console,
                    stream=self.stream,
                )
                if choice == "0":
                    break
                actions[choice]()
            except EOFError:
                logger.debug("Input ended, leaving the menu")
                break
        self.console.print("Thank you for using the Library Management System.")


def build_library(config: CatalogConfig) -> Library:
    """Library with one book shelf, so every book added from the menu is shelved."""
    library = Library(config)
    library.add_shelf(BookShelf(config.default_shelf_capacity, config.default_shelf_floor))
    return library


def main() -> None:
    """Entry point for the ``library-catalog`` command."""
    config = get_config()
    configure_logging(config)
    logger.info("Starting %s (return policy: %s)", config.app_name, config.return_policy.value)

    try:
        CatalogMenu(build_library(config)).run()
    except (KeyboardInterrupt, EOFError):
        logger.info("Stopped by user")


if __name__ == "__main__":
    main()
