"""
User profile API schemas.
"""

import datetime

from pydantic import BaseModel, Field


class UserProfileBase(BaseModel):
    """Base profile schema with common fields."""

    birth_date: datetime.date = Field(..., description="Birth date (YYYY-MM-DD)")
    sex: str = Field(
        ..., min_length=1, max_length=16,
        description='Biological sex; "male" selects the male VO2max baseline',
    )
    height_cm: float = Field(..., gt=50.0, le=272.0, description="Height (cm)")


class UserProfileUpdate(UserProfileBase):
    """Schema for saving the profile (create or replace)."""
    pass


class UserProfileResponse(UserProfileBase):
    """Schema for the profile in API responses."""

    id: int
    age: int = Field(..., description="Age today, as used by the score engine")
    created_at: datetime.datetime
    updated_at: datetime.datetime
