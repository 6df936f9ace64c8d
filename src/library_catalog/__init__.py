"""
Library Catalog Package.

An in-memory catalog of books and magazines, the customers who borrow them
and the history of returns, driven by an interactive text menu.

Key Components:
- models: Pydantic models for authors, publications and customers
- store: Id-keyed publication store shared by every view of the catalog
- shelves: Grouped indexes over one publication variant
- library: The aggregate orchestrating circulation
- config: Configuration management with pydantic-settings
- cli: Interactive rich menu
"""

__version__ = "0.1.0"

from .exceptions import CatalogError
from .library import Library

__all__ = [
    "CatalogError",
    "Library",
    "__version__",
]
