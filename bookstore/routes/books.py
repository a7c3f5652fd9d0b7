"""
BookStore Backend: Book Route Handlers
=========================================

What:  CRUD endpoints for books. Every response body carries the book's
       Author and Category resolved at read time.
How:   Each handler receives a request-scoped BookStore from get_store and
       delegates to book_service.

Status codes:
    GET    /books          200
    GET    /books/{id}     200 | 404
    POST   /books          201 + Location: /books/{id}
    PUT    /books/{id}     200 | 404
    DELETE /books/{id}     204 (also when the id does not exist)
"""

from typing import List

from fastapi import APIRouter, Depends, Response

from bookstore.schemas.book import BookIn, BookResponse
from bookstore.schemas.common import ErrorResponse
from bookstore.services.catalog import book_service
from bookstore.storage import BookStore, get_store

router = APIRouter(prefix="/books", tags=["Books"])


@router.get(
    "",
    response_model=List[BookResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List all books with their author and category",
)
async def list_books(store: BookStore = Depends(get_store)) -> List[BookResponse]:
    return await book_service.list_all(store)


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    responses={
        404: {"description": "Book not found (empty body)"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a single book by ID",
)
async def get_book(book_id: int, store: BookStore = Depends(get_store)) -> BookResponse:
    return await book_service.get(store, book_id)


@router.post(
    "",
    status_code=201,
    response_model=BookResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Create a book",
    description=(
        "Stores title, description, authorId and categoryId. Any id in the body "
        "is ignored. The Location header points at the new book."
    ),
)
async def create_book(
    payload: BookIn,
    response: Response,
    store: BookStore = Depends(get_store),
) -> BookResponse:
    book = await book_service.create(store, payload)
    response.headers["Location"] = f"/books/{book.id}"
    return book


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    responses={
        404: {"description": "Book not found (empty body)"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Update a book",
    description="Overwrites title, description, authorId and categoryId.",
)
async def update_book(
    book_id: int,
    payload: BookIn,
    store: BookStore = Depends(get_store),
) -> BookResponse:
    return await book_service.update(store, book_id, payload)


@router.delete(
    "/{book_id}",
    status_code=204,
    response_class=Response,
    summary="Delete a book",
    description="Returns 204 whether or not the book existed.",
)
async def delete_book(book_id: int, store: BookStore = Depends(get_store)) -> Response:
    await book_service.delete(store, book_id)
    return Response(status_code=204)
