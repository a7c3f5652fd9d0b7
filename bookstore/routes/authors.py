"""
BookStore Backend: Author Route Handlers
===========================================

What:  CRUD endpoints for authors. Only `name` is stored or updated.
"""

from typing import List

from fastapi import APIRouter, Depends, Response

from bookstore.schemas.author import AuthorIn, AuthorResponse
from bookstore.schemas.common import ErrorResponse
from bookstore.services.catalog import author_service
from bookstore.storage import BookStore, get_store

router = APIRouter(prefix="/authors", tags=["Authors"])


@router.get(
    "",
    response_model=List[AuthorResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List all authors",
)
async def list_authors(store: BookStore = Depends(get_store)) -> List[AuthorResponse]:
    return await author_service.list_all(store)


@router.get(
    "/{author_id}",
    response_model=AuthorResponse,
    responses={404: {"description": "Author not found (empty body)"}},
    summary="Get a single author by ID",
)
async def get_author(author_id: int, store: BookStore = Depends(get_store)) -> AuthorResponse:
    return await author_service.get(store, author_id)


@router.post(
    "",
    status_code=201,
    response_model=AuthorResponse,
    summary="Create an author",
)
async def create_author(
    payload: AuthorIn,
    response: Response,
    store: BookStore = Depends(get_store),
) -> AuthorResponse:
    author = await author_service.create(store, payload)
    response.headers["Location"] = f"/authors/{author.id}"
    return author


@router.put(
    "/{author_id}",
    response_model=AuthorResponse,
    responses={404: {"description": "Author not found (empty body)"}},
    summary="Rename an author",
)
async def update_author(
    author_id: int,
    payload: AuthorIn,
    store: BookStore = Depends(get_store),
) -> AuthorResponse:
    return await author_service.update(store, author_id, payload)


@router.delete(
    "/{author_id}",
    status_code=204,
    response_class=Response,
    summary="Delete an author",
    description=(
        "Returns 204 whether or not the author existed. Books that still "
        "reference the author keep their authorId and resolve it as null."
    ),
)
async def delete_author(author_id: int, store: BookStore = Depends(get_store)) -> Response:
    await author_service.delete(store, author_id)
    return Response(status_code=204)
