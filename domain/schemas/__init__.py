"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.user_schemas import UserCreate, UserUpdate, UserResponse
from domain.schemas.meal_schemas import MealCreate, MealUpdate, MealResponse

__all__ = [
    # User schemas
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    # Meal schemas
    "MealCreate",
    "MealUpdate",
    "MealResponse",
]
