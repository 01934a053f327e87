from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from datetime import datetime

from domain.schemas.validators import to_naive_utc


class MealCreate(BaseModel):
    """Input payload for POST /users/{userId}/meals.

    There is no owner field: the owning user always comes from the URL.
    """

    description: str = Field(..., min_length=1, description="What was eaten")
    calories: int = Field(..., description="Energy in kcal")
    date: datetime = Field(
        ..., description="When the meal was eaten; offsets are converted to naive UTC"
    )

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v: datetime) -> datetime:
        return to_naive_utc(v)


class MealUpdate(MealCreate):
    """Input payload for PUT /users/{userId}/meals/{mealId}"""


class MealResponse(BaseModel):
    id: int
    description: str
    calories: int
    date: datetime

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }
