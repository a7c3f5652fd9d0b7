"""
BookStore Backend: Category Schemas
======================================
"""

from typing import Optional

from pydantic import BaseModel, Field

from bookstore.schemas.common import ENTITY_MODEL_CONFIG


class CategoryIn(BaseModel):
    """Request body for POST /categories and PUT /categories/{id}. `id` is ignored."""
    id: Optional[int] = Field(default=None, description="Ignored; assigned by storage")
    name: str = Field(description="Category name")

    model_config = ENTITY_MODEL_CONFIG


class CategoryResponse(BaseModel):
    id: int = Field(description="Category identifier")
    name: str = Field(description="Category name")

    model_config = ENTITY_MODEL_CONFIG
