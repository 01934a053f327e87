"""User management routes"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
import logging

from app.config import settings
from api.dependencies import get_db
from domain.schemas.user_schemas import UserCreate, UserUpdate, UserResponse
from domain.mappers import UserMapper
from services import UserService

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger("mealtrack.api.users")


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, db: Session = Depends(get_db)):
    """Return a user's details.

    Responses: 200 with the user, 404 if no user has this id.
    """
    user = UserService.get_user(db, user_id)
    return UserMapper.to_response(user)


@router.post("", response_model=UserCreate, status_code=status.HTTP_201_CREATED)
def create_user(
    user: UserCreate, response: Response, db: Session = Depends(get_db)
):
    """
    Register a user.

    Example request:

        {
            "fullName": "Ann Lee",
            "height": 1.70,
            "weight": 60,
            "birthDate": "1990-01-01T00:00:00"
        }

    Responds 201 with a Location header pointing at the new user and the
    submitted body echoed back; 400 if the body is malformed.
    """
    new_user = UserService.create_user(db, user)
    response.headers["Location"] = f"{settings.api_prefix}/users/{new_user.id}"
    return user


@router.put("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_user(
    user_id: int, user: UserUpdate, db: Session = Depends(get_db)
):
    """
    Update a user's height and weight.

    Example request:

        {"height": 1.75, "weight": 70}

    Responds 204 on success, 404 if the user does not exist.
    """
    UserService.update_user(db, user_id, user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
