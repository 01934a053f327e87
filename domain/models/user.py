"""
User-related database models.
"""

from datetime import datetime

from sqlalchemy import Column, Float, Text, TIMESTAMP
from sqlalchemy.orm import relationship

from domain.models.database import Base
from domain.models.base import BaseEntity


class User(BaseEntity, Base):
    """User account model"""

    __tablename__ = "app_user"

    full_name = Column(Text, nullable=False)
    height = Column(Float, nullable=False)
    weight = Column(Float, nullable=False)
    birth_date = Column(TIMESTAMP(timezone=False), nullable=False)

    # Relationships
    meals = relationship("Meal", back_populates="user")

    def __init__(
        self, full_name: str, height: float, weight: float, birth_date: datetime
    ):
        super().__init__()
        self.full_name = full_name
        self.height = height
        self.weight = weight
        self.birth_date = birth_date

    def update(self, height: float, weight: float) -> None:
        """Overwrite the body measurements. Name and birth date never change."""
        self.height = height
        self.weight = weight

    def __repr__(self) -> str:
        return f"<User id={self.id} full_name={self.full_name!r} active={self.active}>"
