"""
Shared entity columns and lifecycle.
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, Integer, TIMESTAMP


class BaseEntity:
    """Identity, creation time and active flag common to every record.

    ``id`` is assigned by the database on insert, ``created_at`` is fixed when
    the object is constructed and ``active`` only ever goes from True to False
    through :meth:`deactivate`. Records are never physically deleted.
    """

    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False)
    active = Column(Boolean, nullable=False, default=True)

    def __init__(self):
        self.created_at = datetime.now(timezone.utc)
        self.active = True

    def deactivate(self) -> None:
        """Mark the record inactive. Calling it again has no further effect."""
        self.active = False
