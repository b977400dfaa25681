"""
User profile endpoints.
"""

import datetime

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.db.session import get_db
from app.schemas.profile import UserProfileResponse, UserProfileUpdate
from app.services.profile_service import ProfileService

router = APIRouter()


@router.get("", summary="Get the user profile.", response_model=UserProfileResponse, )
def get_profile(db: Session = Depends(get_db), ):
    return ProfileService(db).get(datetime.date.today())


@router.put("", summary="Create or replace the user profile.", response_model=UserProfileResponse, )
def save_profile(data: UserProfileUpdate, db: Session = Depends(get_db), ):
    """Saving never creates a second profile; an existing one is updated in place."""
    return ProfileService(db).save(data, datetime.date.today())
