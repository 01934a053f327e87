"""
Meal log model.
"""

from datetime import datetime

from sqlalchemy import Column, ForeignKey, Integer, Text, TIMESTAMP
from sqlalchemy.orm import relationship

from domain.models.database import Base
from domain.models.base import BaseEntity


class Meal(BaseEntity, Base):
    """A meal eaten by one user"""

    __tablename__ = "meal"

    description = Column(Text, nullable=False)
    calories = Column(Integer, nullable=False)
    date = Column(TIMESTAMP(timezone=False), nullable=False)
    user_id = Column(
        Integer,
        ForeignKey("app_user.id"),
        nullable=False,
        index=True,
    )

    user = relationship("User", back_populates="meals")

    def __init__(self, description: str, calories: int, date: datetime, user_id: int):
        super().__init__()
        self.description = description
        self.calories = calories
        self.date = date
        self.user_id = user_id

    def update(self, description: str, calories: int, date: datetime) -> None:
        """Overwrite description, calories and date. The owner is fixed."""
        self.description = description
        self.calories = calories
        self.date = date

    def __repr__(self) -> str:
        return f"<Meal id={self.id} user_id={self.user_id} active={self.active}>"
