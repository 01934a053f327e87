"""
Meal Repository - Data access layer for a user's meals
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Meal


class MealRepository(BaseRepository[Meal]):
    """Repository for meal data access.

    Owner-facing queries are scoped to the owning user and only see active
    meals; a meal id on its own is never enough to reach a record.
    """

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def get_active_by_user_id(self, user_id: int) -> List[Meal]:
        """Get all active meals for a user, oldest first"""
        return (
            self.db.query(Meal)
            .filter(Meal.user_id == user_id, Meal.active.is_(True))
            .order_by(Meal.id)
            .all()
        )

    def get_for_user(self, user_id: int, meal_id: int) -> Optional[Meal]:
        """Get an active meal by its id and its owner's id (composite key)"""
        return (
            self.db.query(Meal)
            .filter(
                Meal.id == meal_id,
                Meal.user_id == user_id,
                Meal.active.is_(True),
            )
            .one_or_none()
        )
