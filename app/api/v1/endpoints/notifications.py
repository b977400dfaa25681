"""
Push notification endpoints — VAPID key discovery and (un)subscription.
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session

from app.core.config import settings
from app.db.session import get_db
from app.notifications.vapid import VapidKeyError, decode_private_key, public_key_b64
from app.schemas.push import (
    PushSubscribeRequest,
    PushSubscriptionResponse,
    PushUnsubscribeRequest,
    VapidPublicKeyResponse,
)
from app.services.subscription_service import SubscriptionService

router = APIRouter()


@router.get("/vapid-public-key", summary="Application server key for the browser.",
            response_model=VapidPublicKeyResponse, )
def get_vapid_public_key():
    if settings.VAPID_PUBLIC_KEY:
        return VapidPublicKeyResponse(public_key=settings.VAPID_PUBLIC_KEY)
    try:
        key = decode_private_key(settings.VAPID_PRIVATE_KEY)
    except VapidKeyError:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                            detail="Push notifications are not configured")
    return VapidPublicKeyResponse(public_key=public_key_b64(key))


@router.post("/subscribe", summary="Subscribe to weekly reminders.", response_model=PushSubscriptionResponse, )
def subscribe(data: PushSubscribeRequest, response: Response, db: Session = Depends(get_db), ):
    """Re-subscribing with a known endpoint updates its keys and reminder slot."""
    subscription, created = SubscriptionService(db).subscribe(data)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return subscription


@router.post("/unsubscribe", summary="Stop weekly reminders for an endpoint.",
             status_code=status.HTTP_204_NO_CONTENT, )
def unsubscribe(data: PushUnsubscribeRequest, db: Session = Depends(get_db), ):
    SubscriptionService(db).unsubscribe(data.endpoint)
