"""
Base Repository

Generic repository with the CRUD operations shared by every entity.
Entity-specific repositories inherit from this class.

What This Provides:
===================
- get(id)        → Fetch single record by primary key
- get_by_ids()   → Fetch multiple records by primary keys
- list()         → List records with pagination and filtering
- count()        → Count records with filtering
- exists()       → Check if record exists
- create()       → Create new record from field values
- save()         → Insert a new instance or flush changes to a loaded one
- delete()       → Hard delete record

Generic Type Pattern:
=====================
    class FolderRepository(BaseRepository[Folder]):
        def __init__(self, session: AsyncSession) -> None:
            super().__init__(Folder, session)

    folder = await repo.get(42)  # Folder | None

flush() vs commit():
====================
Repositories only flush(): SQL is sent and errors (constraint violations)
surface inside the request, but the transaction is committed or rolled back
by the get_db() dependency once the request finishes.
"""

from typing import Any, Generic, Hashable, Optional, Sequence, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from mypass.shared.models.base import Base


# TypeVar bound to Base ensures we only work with SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Type Parameter:
        ModelType: The SQLAlchemy model class this repository manages

    Attributes:
        model: The SQLAlchemy model class
        session: The async database session
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        """
        Initialize the repository.

        Args:
            model: SQLAlchemy model class (e.g., User, Folder, Secret)
            session: Async database session from get_db()
        """
        self.model = model
        self.session = session

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: Hashable) -> Optional[ModelType]:
        """
        Get a single record by primary key.

        Args:
            record_id: Primary key value

        Returns:
            The model instance if found, None otherwise
        """
        return await self.session.get(self.model, record_id)

    async def get_by_ids(self, ids: Sequence[Hashable]) -> list[ModelType]:
        """
        Get multiple records by primary key in a single IN query.

        Args:
            ids: Primary keys to fetch

        Returns:
            Found instances (may be fewer than requested)
        """
        if not ids:
            return []

        result = await self.session.execute(select(self.model).where(self.model.id.in_(ids)))
        return list(result.scalars().all())

    async def list(
        self,
        *,
        offset: int = 0,
        limit: int = 100,
        filters: Optional[dict[str, Any]] = None,
        order_by: Optional[str] = None,
        order_desc: bool = False,
    ) -> list[ModelType]:
        """
        List records with pagination and optional equality filters.

        Args:
            offset: Number of records to skip
            limit: Maximum records to return
            filters: Dict of field=value for WHERE clauses
            order_by: Field name to order results by
            order_desc: Order descending instead of ascending

        Returns:
            List of model instances
        """
        query = select(self.model)

        if filters:
            for field, value in filters.items():
                if hasattr(self.model, field):
                    query = query.where(getattr(self.model, field) == value)

        if order_by and hasattr(self.model, order_by):
            order_field = getattr(self.model, order_by)
            query = query.order_by(order_field.desc() if order_desc else order_field)

        query = query.offset(offset).limit(limit)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count(self, filters: Optional[dict[str, Any]] = None) -> int:
        """
        Count records with optional equality filters.

        Returns:
            Number of matching records
        """
        query = select(sql_count()).select_from(self.model)

        if filters:
            for field, value in filters.items():
                if hasattr(self.model, field):
                    query = query.where(getattr(self.model, field) == value)

        result = await self.session.execute(query)
        return result.scalar() or 0

    async def exists(self, record_id: Hashable) -> bool:
        """Check if a record exists without loading it."""
        result = await self.session.execute(
            select(sql_count()).select_from(self.model).where(self.model.id == record_id)
        )
        return (result.scalar() or 0) > 0

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new record from field values.

        Returns:
            The created instance with DB-generated values (id, defaults)
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def save(self, instance: ModelType) -> ModelType:
        """
        Persist an instance.

        New instances are inserted; instances already loaded in this session
        have their pending changes written.

        Returns:
            The same instance, with generated values populated
        """
        self.session.add(instance)
        await self.session.flush()
        return instance

    async def delete(self, record_id: Hashable) -> bool:
        """
        Hard delete a record by primary key.

        Store errors (e.g. a foreign key still pointing at the row) are raised
        from the flush.

        Returns:
            True if deleted, False if not found
        """
        instance = await self.get(record_id)
        if instance is None:
            return False

        await self.session.delete(instance)
        await self.session.flush()
        return True
