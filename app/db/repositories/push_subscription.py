"""
Push subscription repository.

Handles database operations for :class:`PushSubscription`, keyed by endpoint.
"""

from typing import Optional

from sqlmodel import Session, select

from app.core.clock import utc_now
from app.models.push_subscription import PushSubscription


class PushSubscriptionRepository:
    """Repository for PushSubscription database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_all(self) -> list[PushSubscription]:
        statement = select(PushSubscription).order_by(PushSubscription.id)
        return list(self.session.exec(statement).all())

    def get_by_endpoint(self, endpoint: str) -> Optional[PushSubscription]:
        statement = select(PushSubscription).where(PushSubscription.endpoint == endpoint)
        return self.session.exec(statement).first()

    def upsert(self, subscription: PushSubscription) -> tuple[PushSubscription, bool]:
        """Insert a subscription, or refresh keys and reminder slot of an existing endpoint.

        Returns:
            Tuple of (subscription, created).
        """
        existing = self.get_by_endpoint(subscription.endpoint)
        if existing is None:
            self.session.add(subscription)
            self.session.commit()
            self.session.refresh(subscription)
            return subscription, True

        existing.p256dh = subscription.p256dh
        existing.auth = subscription.auth
        existing.reminder_day = subscription.reminder_day
        existing.reminder_time = subscription.reminder_time
        existing.timezone = subscription.timezone
        existing.updated_at = utc_now()
        self.session.add(existing)
        self.session.commit()
        self.session.refresh(existing)
        return existing, False

    def delete_by_endpoint(self, endpoint: str) -> bool:
        subscription = self.get_by_endpoint(endpoint)
        if subscription:
            self.session.delete(subscription)
            self.session.commit()
            return True
        return False
