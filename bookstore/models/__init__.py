"""
BookStore Backend: ORM Models
================================

Importing this package registers every table on `Base.metadata` and makes
the string targets of `relationship()` resolvable.
"""

from bookstore.models.author import Author
from bookstore.models.book import Book
from bookstore.models.category import Category

__all__ = ["Author", "Book", "Category"]
