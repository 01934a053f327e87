from sqlalchemy.orm import Session
import logging

from domain.models import User
from domain.schemas.user_schemas import UserCreate, UserUpdate
from domain.mappers import UserMapper
from repositories import UserRepository
from app.exceptions import NotFoundError

logger = logging.getLogger("mealtrack.users")


class UserService:
    """Business logic for user accounts"""

    @staticmethod
    def get_user(db: Session, user_id: int) -> User:
        """
        Load a user by id.

        Raises:
            NotFoundError: If no user has this id
        """
        user = UserRepository(db).get_by_id(user_id)
        if not user:
            logger.warning(f"user_not_found user_id={user_id}")
            raise NotFoundError(f"User {user_id} not found")

        logger.info(f"user_fetched user_id={user_id}")
        return user

    @staticmethod
    def create_user(db: Session, payload: UserCreate) -> User:
        """Map the payload to a new User and persist it"""
        user = UserRepository(db).create(UserMapper.to_entity(payload))
        logger.info(f"user_created user_id={user.id}")
        return user

    @staticmethod
    def update_user(db: Session, user_id: int, payload: UserUpdate) -> User:
        """
        Overwrite a user's height and weight.

        Full name and birth date are left untouched.

        Raises:
            NotFoundError: If no user has this id
        """
        user_repo = UserRepository(db)
        user = user_repo.get_by_id(user_id)
        if not user:
            logger.warning(f"user_not_found user_id={user_id}")
            raise NotFoundError(f"User {user_id} not found")

        user.update(payload.height, payload.weight)
        user = user_repo.update(user)

        logger.info(
            f"user_updated user_id={user_id} height={user.height} weight={user.weight}"
        )
        return user
