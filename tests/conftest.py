"""Test configuration and fixtures for the Library Catalog.

Every test gets:
1. A fresh configuration - the global config cache is reset around each test
2. Isolated libraries - built from explicit configs, never from shared state
3. Ready-made entities - authors, books and magazines for model and shelf tests
"""

from collections.abc import Generator

import pytest

from library_catalog.config import CatalogConfig, ReturnPolicy, reset_config
from library_catalog.library import Library
from library_catalog.models import Author, Book, Magazine
from library_catalog.shelves import BookShelf, MagazineShelf

# === Configuration Fixtures ===


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep environment variables and the config cache from leaking between tests."""
    for name in (
        "LIBRARY_CATALOG_APP_NAME",
        "LIBRARY_CATALOG_DEBUG",
        "LIBRARY_CATALOG_LOG_LEVEL",
        "LIBRARY_CATALOG_RETURN_POLICY",
        "LIBRARY_CATALOG_DEFAULT_SHELF_CAPACITY",
        "LIBRARY_CATALOG_DEFAULT_SHELF_FLOOR",
        "LIBRARY_CATALOG_BULK_COPIES",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def test_config() -> CatalogConfig:
    """Default configuration, ignoring any local .env file."""
    return CatalogConfig(_env_file=None)


@pytest.fixture
def historical_config() -> CatalogConfig:
    """Configuration where returns leave availability untouched."""
    return CatalogConfig(_env_file=None, return_policy=ReturnPolicy.HISTORICAL)


# === Library Fixtures ===


@pytest.fixture
def library(test_config: CatalogConfig) -> Library:
    """Empty library without shelves."""
    return Library(test_config)


@pytest.fixture
def shelved_library(test_config: CatalogConfig) -> Library:
    """Library with one book shelf and one magazine shelf."""
    lib = Library(test_config)
    lib.add_shelf(BookShelf(max_capacity=100, floor=1))
    lib.add_shelf(MagazineShelf(max_capacity=50, floor=2))
    return lib


# === Entity Fixtures ===


@pytest.fixture
def pike() -> Author:
    return Author(first_name="Rob", last_name="Pike")


@pytest.fixture
def go_book(pike: Author) -> Book:
    """The book used by the borrow/return scenarios."""
    return Book(
        id=1,
        title="Go",
        author=pike,
        year_of_publication=2020,
        page_count=300,
        total_copies=2,
        available_copies=2,
    )


@pytest.fixture
def make_book():
    """Factory for books with sensible defaults."""

    def _make(book_id: int, title: str, first: str = "Rob", last: str = "Pike", **overrides) -> Book:
        fields = {
            "id": book_id,
            "title": title,
            "author": Author(first_name=first, last_name=last),
            "year_of_publication": 2000 + book_id,
            "page_count": 100,
            "total_copies": 3,
            "available_copies": 3,
        }
        fields.update(overrides)
        return Book(**fields)

    return _make


@pytest.fixture
def make_magazine():
    """Factory for magazine issues with sensible defaults."""

    def _make(magazine_id: int, title: str, year: int, issue: int, **overrides) -> Magazine:
        fields = {
            "id": magazine_id,
            "title": title,
            "year_of_publication": year,
            "issue_number": issue,
            "total_copies": 1,
            "available_copies": 1,
        }
        fields.update(overrides)
        return Magazine(**fields)

    return _make
