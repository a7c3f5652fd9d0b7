"""
BookStore Backend: Entity Service
====================================

What:  Generic CRUD logic for one entity collection (books, authors or
       categories).
How:   Each operation is one fetch → mutate → persist cycle on the storage
       handle passed in by the route. Missing rows become NotFoundError;
       SQLAlchemy failures become DatabaseError (the session dependency then
       rolls back).
Who:   Instantiated once per entity in bookstore.services.catalog.

Operation contract:
    list_all(store)                → [Response]
    get(store, id)                 → Response        | NotFoundError
    create(store, payload)         → Response (new id)
    update(store, id, payload)     → Response        | NotFoundError
    delete(store, id)              → None, also when the id is absent

Every Response is re-read from storage after persist(), so a Book returned by
create/update carries the Author/Category its foreign keys point at now.
"""

import logging
from contextlib import contextmanager
from typing import Generic, Iterator, List, Sequence, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from bookstore.exceptions import DatabaseError, NotFoundError
from bookstore.storage import BookStore, Collection

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class EntityService(Generic[ResponseT]):
    """
    CRUD operations over one BookStore collection.

    Args:
        collection:      Attribute name on BookStore ("books", "authors", ...)
        resource:        Singular label used in logs and NotFoundError
        response_model:  Pydantic model validated from ORM rows
        editable_fields: Whitelist of fields create/update copy from payloads
    """

    def __init__(
        self,
        collection: str,
        resource: str,
        response_model: Type[ResponseT],
        editable_fields: Sequence[str],
    ):
        self.collection = collection
        self.resource = resource
        self.response_model = response_model
        self.editable_fields = tuple(editable_fields)

    def _rows(self, store: BookStore) -> Collection:
        return getattr(store, self.collection)

    @contextmanager
    def _storage_errors(self, action: str, **context) -> Iterator[None]:
        """Translate SQLAlchemy failures inside the block into DatabaseError."""
        try:
            yield
        except SQLAlchemyError as e:
            logger.error(
                "Database error while trying to %s %s: %s",
                action,
                self.resource,
                str(e),
                exc_info=True,
            )
            raise DatabaseError(
                message=f"Could not {action} the {self.resource}. Please try again.",
                context={"resource": self.resource, "error_type": type(e).__name__, **context},
            ) from e

    async def list_all(self, store: BookStore) -> List[ResponseT]:
        """Every row of the collection, ordered by id."""
        with self._storage_errors("list"):
            rows = await self._rows(store).list()
            return [self.response_model.model_validate(row) for row in rows]

    async def get(self, store: BookStore, entity_id: int) -> ResponseT:
        """
        One row by id.

        Raises:
            NotFoundError: No row with this id (→ 404)
            DatabaseError: Query failed (→ 500)
        """
        with self._storage_errors("retrieve", entity_id=entity_id):
            row = await self._rows(store).get(entity_id)
            if row is None:
                raise NotFoundError(resource=self.resource, resource_id=str(entity_id))
            return self.response_model.model_validate(row)

    async def create(self, store: BookStore, payload: BaseModel) -> ResponseT:
        """
        Insert a new row built from the whitelisted payload fields.

        Any `id` in the payload is ignored; storage assigns it.
        """
        rows = self._rows(store)
        with self._storage_errors("create"):
            entity = rows.model(**payload.model_dump(include=set(self.editable_fields)))
            new_id = await rows.add(entity)
            await store.persist()
        logger.info("Created %s %s", self.resource, new_id)
        return await self.get(store, new_id)

    async def update(self, store: BookStore, entity_id: int, payload: BaseModel) -> ResponseT:
        """
        Overwrite the whitelisted fields of an existing row in place.

        Raises:
            NotFoundError: No row with this id (→ 404)
        """
        with self._storage_errors("update", entity_id=entity_id):
            row = await self._rows(store).get(entity_id)
            if row is None:
                raise NotFoundError(resource=self.resource, resource_id=str(entity_id))
            for field in self.editable_fields:
                setattr(row, field, getattr(payload, field))
            await store.persist()
        logger.info("Updated %s %s", self.resource, entity_id)
        return await self.get(store, entity_id)

    async def delete(self, store: BookStore, entity_id: int) -> None:
        """
        Remove the row with this id if it exists.

        An absent id is a silent no-op: callers get the same outcome either
        way and cannot tell "deleted" from "already gone".
        """
        with self._storage_errors("delete", entity_id=entity_id):
            removed = await self._rows(store).remove(entity_id)
            if removed:
                await store.persist()
        if removed:
            logger.info("Deleted %s %s", self.resource, entity_id)
        else:
            logger.debug("Delete of missing %s %s ignored", self.resource, entity_id)
