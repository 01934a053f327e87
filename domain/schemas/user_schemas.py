from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from datetime import datetime

from domain.schemas.validators import to_naive_utc


class UserCreate(BaseModel):
    """Input payload for POST /users"""

    full_name: str = Field(..., min_length=1, description="User's full name")
    height: float = Field(
        ..., allow_inf_nan=False, description="Height in metres (e.g. 1.75)"
    )
    weight: float = Field(..., allow_inf_nan=False, description="Weight in kilograms")
    birth_date: datetime = Field(
        ..., description="Date of birth; offsets are converted to naive UTC"
    )

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @field_validator("birth_date")
    @classmethod
    def normalize_birth_date(cls, v: datetime) -> datetime:
        return to_naive_utc(v)


class UserUpdate(BaseModel):
    """Input payload for PUT /users/{id}. Only measurements can change."""

    height: float = Field(..., allow_inf_nan=False)
    weight: float = Field(..., allow_inf_nan=False)

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class UserResponse(BaseModel):
    id: int
    full_name: str
    height: float
    weight: float
    birth_date: datetime

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }
