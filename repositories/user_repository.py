"""
User Repository - Data access layer for user-related operations
"""

from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import User


class UserRepository(BaseRepository[User]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, User)
