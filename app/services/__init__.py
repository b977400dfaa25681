"""Business logic services."""

from app.services.profile_service import ProfileService
from app.services.metrics_service import MetricsService
from app.services.subscription_service import SubscriptionService

__all__ = [
    "ProfileService",
    "MetricsService",
    "SubscriptionService",
]
