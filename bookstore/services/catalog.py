"""
BookStore Backend: Catalog Services
======================================

The three EntityService singletons used by the routes. Each one lists the
fields an update is allowed to overwrite.
"""

from bookstore.schemas.author import AuthorResponse
from bookstore.schemas.book import BookResponse
from bookstore.schemas.category import CategoryResponse
from bookstore.services.entity_service import EntityService

book_service: EntityService[BookResponse] = EntityService(
    collection="books",
    resource="book",
    response_model=BookResponse,
    editable_fields=("title", "description", "author_id", "category_id"),
)

author_service: EntityService[AuthorResponse] = EntityService(
    collection="authors",
    resource="author",
    response_model=AuthorResponse,
    editable_fields=("name",),
)

category_service: EntityService[CategoryResponse] = EntityService(
    collection="categories",
    resource="category",
    response_model=CategoryResponse,
    editable_fields=("name",),
)
