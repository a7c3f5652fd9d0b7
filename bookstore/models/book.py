"""
BookStore Backend: Book SQLAlchemy Model
===========================================

What:  ORM model representing the `books` table and its two many-to-one
       links (author, category).
Who:   Used by the books collection in bookstore.storage.

Table Design:
    - author_id / category_id: plain foreign keys, nullable, no ON DELETE
      action. Removing an Author or Category leaves the Book row untouched;
      its resolved reference then reads as null.
    - author / category: relationship attributes, loaded with `lazy="raise"`
      so every read path has to ask for them explicitly (the books
      collection joins both in the same SELECT).
"""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookstore.database import Base
from bookstore.models.author import Author
from bookstore.models.category import Category


class Book(Base):
    """
    A book in the catalogue.

    Editable fields: title, description, author_id, category_id.
    The relationship attributes are read-only views of the foreign keys.
    """

    __tablename__ = "books"

    # ── Primary Key ───────────────────────────────────────────────────────
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Storage-assigned identifier",
    )

    # ── Content ───────────────────────────────────────────────────────────
    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Book title",
    )

    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        default=None,
        comment="Free-form description",
    )

    # ── Foreign Keys ──────────────────────────────────────────────────────
    author_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("authors.id"),
        nullable=True,
        index=True,
        comment="Author of this book (authors.id)",
    )

    category_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("categories.id"),
        nullable=True,
        index=True,
        comment="Category of this book (categories.id)",
    )

    # ── Relationships ─────────────────────────────────────────────────────
    author: Mapped[Optional[Author]] = relationship(lazy="raise")
    category: Mapped[Optional[Category]] = relationship(lazy="raise")

    def __repr__(self) -> str:
        return (
            f"<Book(id={self.id}, title='{self.title}', "
            f"author_id={self.author_id}, category_id={self.category_id})>"
        )
