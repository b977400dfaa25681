"""
Push subscription API schemas.

The ``subscription`` object mirrors ``PushSubscription.toJSON()`` in the
browser; the reminder slot travels next to it.
"""

import datetime

from pydantic import BaseModel, Field


class PushKeys(BaseModel):
    """Client key material from the browser subscription."""

    p256dh: str = Field(..., min_length=1)
    auth: str = Field(..., min_length=1)


class BrowserSubscription(BaseModel):
    endpoint: str = Field(..., min_length=1, description="Push service URL")
    keys: PushKeys


class PushSubscribeRequest(BaseModel):
    """Subscribe (or re-subscribe) with a weekly reminder slot."""

    subscription: BrowserSubscription
    reminder_day: int = Field(0, ge=0, le=6, description="0 = Sunday ... 6 = Saturday")
    reminder_time: str = Field(
        "09:00", pattern=r"^([01]\d|2[0-3]):[0-5]\d$",
        description="Local reminder time (HH:MM)",
    )
    timezone: str = Field("UTC", min_length=1, max_length=64, description="IANA time zone name")


class PushUnsubscribeRequest(BaseModel):
    endpoint: str = Field(..., min_length=1)


class PushSubscriptionResponse(BaseModel):
    endpoint: str
    reminder_day: int
    reminder_time: str
    timezone: str
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True


class VapidPublicKeyResponse(BaseModel):
    public_key: str = Field(..., description="applicationServerKey for PushManager.subscribe()")
