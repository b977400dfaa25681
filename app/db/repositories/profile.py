"""
User profile repository.

Handles database operations for the single :class:`UserProfile` row.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.core.clock import utc_now
from app.models.profile import UserProfile


class UserProfileRepository:
    """Repository for UserProfile database operations."""

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def get(self) -> Optional[UserProfile]:
        """
        Get the user profile.

        Returns:
            The profile if one has been saved, None otherwise
        """
        statement = select(UserProfile).order_by(UserProfile.id.desc()).limit(1)
        return self.session.exec(statement).first()

    def save(self, birth_date: datetime.date, sex: str, height_cm: float) -> UserProfile:
        """
        Create the profile on first save, update it in place afterwards.

        Args:
            birth_date: Calendar birth date
            sex: Biological sex ("male" selects the male fitness baseline)
            height_cm: Height in centimeters

        Returns:
            The stored profile
        """
        profile = self.get()
        if profile is None:
            profile = UserProfile(birth_date=birth_date, sex=sex, height_cm=height_cm)
        else:
            profile.birth_date = birth_date
            profile.sex = sex
            profile.height_cm = height_cm
            profile.updated_at = utc_now()

        self.session.add(profile)
        self.session.commit()
        self.session.refresh(profile)
        return profile
