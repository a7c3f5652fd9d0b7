"""
BookStore Backend: Category Route Handlers
=============================================
"""

from typing import List

from fastapi import APIRouter, Depends, Response

from bookstore.schemas.category import CategoryIn, CategoryResponse
from bookstore.services.catalog import category_service
from bookstore.storage import BookStore, get_store

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("", response_model=List[CategoryResponse], summary="List all categories")
async def list_categories(store: BookStore = Depends(get_store)) -> List[CategoryResponse]:
    return await category_service.list_all(store)


@router.get(
    "/{category_id}",
    response_model=CategoryResponse,
    responses={404: {"description": "Category not found (empty body)"}},
    summary="Get a single category by ID",
)
async def get_category(
    category_id: int,
    store: BookStore = Depends(get_store),
) -> CategoryResponse:
    return await category_service.get(store, category_id)


@router.post("", status_code=201, response_model=CategoryResponse, summary="Create a category")
async def create_category(
    payload: CategoryIn,
    response: Response,
    store: BookStore = Depends(get_store),
) -> CategoryResponse:
    category = await category_service.create(store, payload)
    response.headers["Location"] = f"/categories/{category.id}"
    return category


@router.put(
    "/{category_id}",
    response_model=CategoryResponse,
    responses={404: {"description": "Category not found (empty body)"}},
    summary="Rename a category",
)
async def update_category(
    category_id: int,
    payload: CategoryIn,
    store: BookStore = Depends(get_store),
) -> CategoryResponse:
    return await category_service.update(store, category_id, payload)


@router.delete(
    "/{category_id}",
    status_code=204,
    response_class=Response,
    summary="Delete a category",
    description="Returns 204 whether or not the category existed.",
)
async def delete_category(
    category_id: int,
    store: BookStore = Depends(get_store),
) -> Response:
    await category_service.delete(store, category_id)
    return Response(status_code=204)
