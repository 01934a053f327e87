"""Meal log routes, nested under the owning user"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
import logging
from typing import List

from app.config import settings
from api.dependencies import get_db
from domain.schemas.meal_schemas import MealCreate, MealUpdate, MealResponse
from domain.mappers import MealMapper
from services import MealService

router = APIRouter(prefix="/users/{user_id}/meals", tags=["Meals"])
logger = logging.getLogger("mealtrack.api.meals")


@router.get("", response_model=List[MealResponse])
def list_meals(user_id: int, db: Session = Depends(get_db)):
    """Return every active meal of the user. An empty list is a valid answer."""
    meals = MealService.list_meals(db, user_id)
    return MealMapper.to_response_list(meals)


@router.get("/{meal_id}", response_model=MealResponse)
def get_meal(user_id: int, meal_id: int, db: Session = Depends(get_db)):
    """Return one meal of the user, 404 if it is missing, inactive or someone else's."""
    meal = MealService.get_meal(db, user_id, meal_id)
    return MealMapper.to_response(meal)


@router.post("", response_model=MealCreate, status_code=status.HTTP_201_CREATED)
def create_meal(
    user_id: int,
    meal: MealCreate,
    response: Response,
    db: Session = Depends(get_db),
):
    """
    Log a meal for the user.

    Example request:

        {
            "description": "Chicken salad",
            "calories": 400,
            "date": "2021-02-12T12:30:00"
        }

    The meal is always owned by the user in the path. Responds 201 with a
    Location header and the submitted body; 404 if the user does not exist.
    """
    new_meal = MealService.create_meal(db, user_id, meal)
    response.headers["Location"] = (
        f"{settings.api_prefix}/users/{user_id}/meals/{new_meal.id}"
    )
    return meal


@router.put("/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_meal(
    user_id: int,
    meal_id: int,
    meal: MealUpdate,
    db: Session = Depends(get_db),
):
    """
    Replace description, calories and date of a meal.

    Example request:

        {"description": "Chicken salad", "calories": 700, "date": "2021-02-12T12:30:00"}
    """
    MealService.update_meal(db, user_id, meal_id, meal)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_meal(user_id: int, meal_id: int, db: Session = Depends(get_db)):
    """Soft-delete a meal. It disappears from listings and lookups."""
    MealService.deactivate_meal(db, user_id, meal_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
