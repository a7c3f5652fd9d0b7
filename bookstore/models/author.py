"""
BookStore Backend: Author SQLAlchemy Model
=============================================

What:  ORM model representing the `authors` table.
Who:   Referenced by Book.author_id; queried by the authors collection.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from bookstore.database import Base


class Author(Base):
    """A book author. Only `name` is editable after creation."""

    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Storage-assigned identifier",
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name of the author",
    )

    def __repr__(self) -> str:
        return f"<Author(id={self.id}, name='{self.name}')>"
