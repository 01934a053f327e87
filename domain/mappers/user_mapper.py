"""
User domain mappers.
Handles transformation between ORM models and DTOs for users.
"""

from domain.models import User
from domain.schemas.user_schemas import UserCreate, UserResponse


class UserMapper:
    """Mapper for user-related transformations."""

    @staticmethod
    def to_entity(payload: UserCreate) -> User:
        """
        Build a new User from the create payload.

        Args:
            payload: Validated POST /users body

        Returns:
            Transient User (no id until it is persisted)
        """
        return User(
            full_name=payload.full_name,
            height=payload.height,
            weight=payload.weight,
            birth_date=payload.birth_date,
        )

    @staticmethod
    def to_response(user: User) -> UserResponse:
        """
        Convert User ORM model to UserResponse DTO.

        Args:
            user: Persisted User instance

        Returns:
            UserResponse DTO
        """
        return UserResponse(
            id=user.id,
            full_name=user.full_name,
            height=user.height,
            weight=user.weight,
            birth_date=user.birth_date,
        )
