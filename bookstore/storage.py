"""
BookStore Backend: Storage Handle
====================================

What:  `BookStore`, the per-request object mediating every read and write,
       and the `get_store` dependency that builds it.
How:   Wraps one AsyncSession and exposes three collections (`books`,
       `authors`, `categories`) with list / get / add / remove, plus
       `persist()` which commits pending changes.
Who:   Injected into route handlers via Depends(get_store), passed on to
       the services.

Eager loading:
    The books collection's SELECT joins `authors` and `categories`
    (LEFT OUTER JOIN through joinedload) and sets populate_existing, so a
    Book already in the session's identity map gets its Author/Category
    overwritten with the rows current at read time.
"""

from typing import Generic, List, Optional, Type, TypeVar

from fastapi import Depends
from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from bookstore.database import Base, get_db_session
from bookstore.models import Author, Book, Category

ModelT = TypeVar("ModelT", bound=Base)


class Collection(Generic[ModelT]):
    """One entity table, seen through a request-scoped session."""

    def __init__(self, model: Type[ModelT], session: AsyncSession):
        self.model = model
        self.session = session

    def _select(self) -> Select:
        return select(self.model)

    async def list(self) -> List[ModelT]:
        """All rows, ordered by id."""
        result = await self.session.execute(self._select().order_by(self.model.id))
        return list(result.scalars().all())

    async def get(self, entity_id: int) -> Optional[ModelT]:
        """The row with this id, or None."""
        result = await self.session.execute(
            self._select().where(self.model.id == entity_id)
        )
        return result.scalar_one_or_none()

    async def add(self, entity: ModelT) -> int:
        """
        Stage a new row and return its storage-assigned id.

        The INSERT is flushed so the id exists; it is durable only after
        BookStore.persist().
        """
        self.session.add(entity)
        await self.session.flush()
        return entity.id

    async def remove(self, entity_id: int) -> bool:
        """Stage deletion of the row with this id. Returns False if absent."""
        entity = await self.get(entity_id)
        if entity is None:
            return False
        await self.session.delete(entity)
        return True


class BookCollection(Collection[Book]):
    """Books, always read together with their Author and Category."""

    def __init__(self, session: AsyncSession):
        super().__init__(Book, session)

    def _select(self) -> Select:
        return (
            select(Book)
            .options(joinedload(Book.author), joinedload(Book.category))
            .execution_options(populate_existing=True)
        )


class BookStore:
    """
    Storage handle for one request.

    Attributes:
        books:       BookCollection (eager-loads author and category)
        authors:     Collection[Author]
        categories:  Collection[Category]
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.books = BookCollection(session)
        self.authors: Collection[Author] = Collection(Author, session)
        self.categories: Collection[Category] = Collection(Category, session)

    async def persist(self) -> None:
        """Durably apply pending add / update / remove operations."""
        await self.session.commit()


async def get_store(db: AsyncSession = Depends(get_db_session)) -> BookStore:
    """FastAPI dependency: a BookStore over the request's session."""
    return BookStore(db)
