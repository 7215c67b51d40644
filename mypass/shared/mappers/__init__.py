"""
Mappers

Conversion between SQLAlchemy entities and transfer objects.

Entity → DTO conversions expect the relations they read to be loaded
already. DTO → entity conversions never touch the session; services resolve
related rows first and pass them in.

Usage:
======
    from mypass.shared.mappers import FolderMapper

    dto = FolderMapper.to_dto(folder)
    folder = FolderMapper.to_entity(dto, shared_withs=users)
"""

from mypass.shared.mappers.user_mapper import UserMapper
from mypass.shared.mappers.secret_mapper import SecretMapper
from mypass.shared.mappers.folder_mapper import FolderMapper

__all__ = [
    "UserMapper",
    "SecretMapper",
    "FolderMapper",
]
