"""
BookStore Backend: Author Schemas
====================================
"""

from typing import Optional

from pydantic import BaseModel, Field

from bookstore.schemas.common import ENTITY_MODEL_CONFIG


class AuthorIn(BaseModel):
    """
    Request body for POST /authors and PUT /authors/{id}.

    `id` is accepted for symmetry with the response shape and ignored.
    """
    id: Optional[int] = Field(default=None, description="Ignored; assigned by storage")
    name: str = Field(description="Author name")

    model_config = ENTITY_MODEL_CONFIG


class AuthorResponse(BaseModel):
    id: int = Field(description="Author identifier")
    name: str = Field(description="Author name")

    model_config = ENTITY_MODEL_CONFIG
