"""
User profile database model.

Defines the single-row user_profile table consumed by the score engine.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from app.core.clock import utc_now


class UserProfile(SQLModel, table=True):
    """
    Profile of the one user this system serves.

    At most one row exists; saving a profile always updates that row in place.
    """
    __tablename__ = "user_profile"

    id: Optional[int] = Field(default=None, primary_key=True)
    birth_date: datetime.date = Field(nullable=False)
    sex: str = Field(nullable=False, max_length=16)
    height_cm: float = Field(nullable=False)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utc_now)
    updated_at: datetime.datetime = Field(default_factory=utc_now)
