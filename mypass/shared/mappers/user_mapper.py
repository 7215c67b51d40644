"""
User mapper.
"""

from mypass.shared.models.user import User
from mypass.shared.schemas.user import UserDTO


class UserMapper:
    """User ↔ UserDTO."""

    @staticmethod
    def to_dto(user: User) -> UserDTO:
        """Map a user with its authorities, the password hash is never copied."""
        return UserDTO(
            id=user.id,
            login=user.login,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            activated=user.activated,
            authorities=user.authority_names,
        )

    @staticmethod
    def to_dtos(users: list[User]) -> list[UserDTO]:
        """Map users, ordered by id."""
        return [UserMapper.to_dto(user) for user in sorted(users, key=lambda u: u.id)]
