"""
BookStore Backend: Book Schemas
==================================

What:  Request and response bodies for the /books endpoints.

Response shape (camelCase on the wire):
    {
        "id": 1,
        "title": "1984",
        "description": null,
        "authorId": 1,
        "categoryId": 1,
        "author": {"id": 1, "name": "Orwell"},
        "category": {"id": 1, "name": "Fiction"}
    }

`author` / `category` are null when the foreign key is null or points at a
row that no longer exists.
"""

from typing import Optional

from pydantic import BaseModel, Field

from bookstore.schemas.author import AuthorResponse
from bookstore.schemas.category import CategoryResponse
from bookstore.schemas.common import ENTITY_MODEL_CONFIG


class BookIn(BaseModel):
    """
    Request body for POST /books and PUT /books/{id}.

    Only title, description, authorId and categoryId are stored. `id` and
    any nested `author` / `category` objects sent by the client are ignored.
    """
    id: Optional[int] = Field(default=None, description="Ignored; assigned by storage")
    title: str = Field(description="Book title")
    description: Optional[str] = Field(default=None, description="Free-form description")
    author_id: Optional[int] = Field(default=None, description="Author identifier")
    category_id: Optional[int] = Field(default=None, description="Category identifier")

    model_config = ENTITY_MODEL_CONFIG


class BookResponse(BaseModel):
    """A book with its Author and Category resolved at read time."""
    id: int = Field(description="Book identifier")
    title: str = Field(description="Book title")
    description: Optional[str] = Field(default=None, description="Free-form description")
    author_id: Optional[int] = Field(default=None, description="Author identifier")
    category_id: Optional[int] = Field(default=None, description="Category identifier")
    author: Optional[AuthorResponse] = Field(default=None, description="Resolved author")
    category: Optional[CategoryResponse] = Field(default=None, description="Resolved category")

    model_config = ENTITY_MODEL_CONFIG
