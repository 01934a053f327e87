"""Services package - Business logic layer"""

from services.user_service import UserService
from services.meal_service import MealService

__all__ = [
    "UserService",
    "MealService",
]
