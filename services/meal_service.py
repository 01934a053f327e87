from typing import List
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from domain.models import Meal
from domain.schemas.meal_schemas import MealCreate, MealUpdate
from domain.mappers import MealMapper
from repositories import MealRepository, UserRepository
from app.exceptions import NotFoundError, ServiceValidationError

logger = logging.getLogger("mealtrack.meals")


class MealService:
    """Business logic for a user's meal log"""

    @staticmethod
    def list_meals(db: Session, user_id: int) -> List[Meal]:
        """Return the user's active meals. An unknown user simply has none."""
        meals = MealRepository(db).get_active_by_user_id(user_id)
        logger.info(f"meals_listed user_id={user_id} count={len(meals)}")
        return meals

    @staticmethod
    def get_meal(db: Session, user_id: int, meal_id: int) -> Meal:
        """
        Load one active meal by its id and owner.

        Raises:
            NotFoundError: If the meal does not exist, belongs to another
                user or has been deactivated
        """
        meal = MealRepository(db).get_for_user(user_id, meal_id)
        if not meal:
            logger.warning(f"meal_not_found user_id={user_id} meal_id={meal_id}")
            raise NotFoundError(f"Meal {meal_id} not found for user {user_id}")
        return meal

    @staticmethod
    def create_meal(db: Session, user_id: int, payload: MealCreate) -> Meal:
        """
        Create a meal owned by ``user_id``.

        The owner always comes from the caller's path, never from the body.

        Raises:
            NotFoundError: If the owning user does not exist
            ServiceValidationError: If the database rejects the row
        """
        if not UserRepository(db).exists(user_id):
            logger.warning(f"meal_owner_not_found user_id={user_id}")
            raise NotFoundError(f"User {user_id} not found")

        meal = MealMapper.to_entity(payload, user_id)
        try:
            meal = MealRepository(db).create(meal)
        except IntegrityError as e:
            db.rollback()
            logger.warning(f"meal_rejected user_id={user_id} error={e.orig}")
            raise ServiceValidationError(
                f"Meal for user {user_id} could not be stored",
                details={"user_id": user_id},
                code="MEAL_REJECTED",
            )

        logger.info(f"meal_created user_id={user_id} meal_id={meal.id}")
        return meal

    @staticmethod
    def update_meal(
        db: Session, user_id: int, meal_id: int, payload: MealUpdate
    ) -> Meal:
        """Overwrite description, calories and date of an active meal"""
        meal_repo = MealRepository(db)
        meal = MealService.get_meal(db, user_id, meal_id)

        meal.update(payload.description, payload.calories, payload.date)
        meal = meal_repo.update(meal)

        logger.info(f"meal_updated user_id={user_id} meal_id={meal_id}")
        return meal

    @staticmethod
    def deactivate_meal(db: Session, user_id: int, meal_id: int) -> Meal:
        """
        Soft-delete an active meal.

        A meal that is already inactive is not found, so a repeated delete
        raises NotFoundError.
        """
        meal_repo = MealRepository(db)
        meal = MealService.get_meal(db, user_id, meal_id)

        meal.deactivate()
        meal = meal_repo.update(meal)

        logger.info(f"meal_deactivated user_id={user_id} meal_id={meal_id}")
        return meal
