"""
Meal domain mappers.
"""

from typing import Iterable, List

from domain.models import Meal
from domain.schemas.meal_schemas import MealCreate, MealResponse


class MealMapper:
    """Mapper for meal-related transformations."""

    @staticmethod
    def to_entity(payload: MealCreate, user_id: int) -> Meal:
        """Build a new Meal owned by ``user_id`` from the create payload."""
        return Meal(
            description=payload.description,
            calories=payload.calories,
            date=payload.date,
            user_id=user_id,
        )

    @staticmethod
    def to_response(meal: Meal) -> MealResponse:
        return MealResponse(
            id=meal.id,
            description=meal.description,
            calories=meal.calories,
            date=meal.date,
        )

    @staticmethod
    def to_response_list(meals: Iterable[Meal]) -> List[MealResponse]:
        return [MealMapper.to_response(m) for m in meals]
