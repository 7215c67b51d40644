"""
Shared Module

Everything below the HTTP layer:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic transfer objects
- Mappers: Entity ↔ DTO conversion
- Cache: Region-partitioned entity cache
- Core: Logging, exceptions

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database session management
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── mappers/        ← Entity ↔ DTO conversion
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    ├── cache/          ← CacheService and region names
    ├── migrations/     ← Alembic environment and revisions
    └── utils/          ← Password hashing, tokens

Usage:
======
    from mypass.shared.models import User, Folder
    from mypass.shared.repositories import FolderRepository
    from mypass.shared.services import FolderService
    from mypass.shared.schemas import FolderDTO, UserDTO
    from mypass.shared.core import logger, MyPassException
"""
