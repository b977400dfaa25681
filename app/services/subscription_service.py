"""
Push subscription service.

Subscribe / unsubscribe for weekly reminders.
"""

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.push_subscription import PushSubscriptionRepository
from app.models.push_subscription import PushSubscription
from app.schemas.push import PushSubscribeRequest, PushSubscriptionResponse


class SubscriptionService:
    """Service for push subscription business logic."""

    def __init__(self, session: Session):
        self.repository = PushSubscriptionRepository(session)

    def subscribe(self, data: PushSubscribeRequest) -> tuple[PushSubscriptionResponse, bool]:
        """Create a subscription, or update the slot of a known endpoint.

        Returns:
            Tuple of (response, created).
        """
        subscription = PushSubscription(
            endpoint=data.subscription.endpoint,
            p256dh=data.subscription.keys.p256dh,
            auth=data.subscription.keys.auth,
            reminder_day=data.reminder_day,
            reminder_time=data.reminder_time,
            timezone=data.timezone,
        )
        stored, created = self.repository.upsert(subscription)
        return PushSubscriptionResponse.model_validate(stored), created

    def unsubscribe(self, endpoint: str) -> None:
        if not self.repository.delete_by_endpoint(endpoint):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Subscription not found",
            )
