"""
Push subscription database model.

Defines the push_subscriptions table used by the reminder scheduler.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from app.core.clock import utc_now


class PushSubscription(SQLModel, table=True):
    """
    A browser Web Push subscription plus its weekly reminder slot.

    ``reminder_day`` counts from Sunday (0) to Saturday (6) and
    ``reminder_time`` is ``HH:MM`` in the subscriber's own ``timezone``.
    """
    __tablename__ = "push_subscriptions"

    id: Optional[int] = Field(default=None, primary_key=True)
    endpoint: str = Field(unique=True, index=True, nullable=False)
    p256dh: str = Field(nullable=False)
    auth: str = Field(nullable=False)

    reminder_day: int = Field(default=0, nullable=False)
    reminder_time: str = Field(default="09:00", max_length=5, nullable=False)
    timezone: str = Field(default="UTC", max_length=64, nullable=False)

    created_at: datetime.datetime = Field(default_factory=utc_now)
    updated_at: datetime.datetime = Field(default_factory=utc_now)
