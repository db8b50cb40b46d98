import logging
from typing import Any, Generic, Mapping, Optional, Sequence, Type, TypeVar

from sqlalchemy import delete, inspect, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from chemquiz.core.helpers import SearchCriteria, apply_search
from chemquiz.core.models import Base, DatabaseError, NotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    """
    Generic async CRUD over one mapped table.

    Subclasses set ``search_columns`` (criteria field name -> column) to make
    ``search`` available.
    """

    search_columns: Mapping[str, Any] = {}

    def __init__(self, model: Type[T]):
        self.model = model

    async def _unavailable(self, db: AsyncSession, action: str, error: SQLAlchemyError):
        """Roll back and report a datastore failure that is not a constraint violation."""
        await db.rollback()
        logger.error("%s failed: %s", action, error)
        raise DatabaseError(f"{action} failed: database unavailable", status_code=503) from error

    @property
    def primary_key(self):
        return inspect(self.model).primary_key[0]

    async def create(self, db: AsyncSession, item, schema=None):
        obj = self.model(**item.model_dump())
        db.add(obj)
        try:
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            logger.info("Creating %s failed: %s", self.model.__name__, e.orig)
            raise DatabaseError(f"Creating {self.model.__name__}: conflicts with an existing record")
        except SQLAlchemyError as e:
            await self._unavailable(db, f"Creating {self.model.__name__}", e)
        await db.refresh(obj)
        if schema:
            return schema.model_validate(obj)
        return obj

    async def get_by_id(self, db: AsyncSession, item_id, schema=None):
        obj = await db.get(self.model, item_id)
        if obj is None:
            raise NotFoundError(f"{self.model.__name__} {item_id} not found")
        if schema:
            return schema.model_validate(obj)
        return obj

    async def get_all(self, db: AsyncSession, schema=None) -> Sequence:
        result = await db.execute(select(self.model).order_by(self.primary_key))
        items = result.scalars().all()
        if schema:
            return [schema.model_validate(item) for item in items]
        return items

    async def update(self, db: AsyncSession, item_data, item_id, schema=None):
        obj = await self.get_by_id(db, item_id)
        update_values = item_data.model_dump(exclude_unset=True)
        for key, value in update_values.items():
            setattr(obj, key, value)
        try:
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            logger.info("Updating %s %s failed: %s", self.model.__name__, item_id, e.orig)
            raise DatabaseError(f"Updating {self.model.__name__}: conflicts with an existing record")
        except SQLAlchemyError as e:
            await self._unavailable(db, f"Updating {self.model.__name__} {item_id}", e)
        await db.refresh(obj)
        if schema:
            return schema.model_validate(obj)
        return obj

    async def delete(self, db: AsyncSession, item_id) -> None:
        """Delete by primary key. Deleting a missing id is not an error."""
        try:
            await db.execute(delete(self.model).where(self.primary_key == item_id))
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            logger.info("Deleting %s %s failed: %s", self.model.__name__, item_id, e.orig)
            raise DatabaseError(f"Deleting {self.model.__name__}: still referenced by other records")
        except SQLAlchemyError as e:
            await self._unavailable(db, f"Deleting {self.model.__name__} {item_id}", e)

    def get_search_query(self):
        return select(self.model)

    async def search(self, db: AsyncSession, criteria: Optional[SearchCriteria], schema=None) -> Sequence:
        query = self.get_search_query()
        if criteria is not None:
            query = apply_search(query, criteria, self.search_columns)
        result = await db.execute(query)
        items = result.scalars().all()
        if schema:
            return [schema.model_validate(item) for item in items]
        return items
