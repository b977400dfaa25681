"""Database repositories."""

from app.db.repositories.profile import UserProfileRepository
from app.db.repositories.metrics import WeeklyMetricsRepository
from app.db.repositories.push_subscription import PushSubscriptionRepository

__all__ = [
    "UserProfileRepository",
    "WeeklyMetricsRepository",
    "PushSubscriptionRepository",
]
