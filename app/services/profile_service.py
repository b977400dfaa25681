"""
User profile service.

Business logic for reading and saving the single user profile.
"""

import datetime

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.profile import UserProfileRepository
from app.longevity.dates import age_on
from app.models.profile import UserProfile
from app.schemas.profile import UserProfileResponse, UserProfileUpdate


class ProfileService:
    """Service for profile business logic."""

    def __init__(self, session: Session):
        self.repository = UserProfileRepository(session)

    def get(self, today: datetime.date) -> UserProfileResponse:
        profile = self.repository.get()
        if not profile:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="No profile saved yet",
            )
        return self._to_response(profile, today)

    def save(self, data: UserProfileUpdate, today: datetime.date) -> UserProfileResponse:
        if data.birth_date > today:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Birth date cannot be in the future",
            )
        profile = self.repository.save(data.birth_date, data.sex.strip().lower(), data.height_cm)
        return self._to_response(profile, today)

    @staticmethod
    def _to_response(profile: UserProfile, today: datetime.date) -> UserProfileResponse:
        return UserProfileResponse(
            id=profile.id,
            birth_date=profile.birth_date,
            sex=profile.sex,
            height_cm=profile.height_cm,
            age=age_on(profile.birth_date, today),
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )
