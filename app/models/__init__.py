"""SQLModel database models."""

from app.models.profile import UserProfile
from app.models.metrics import HealthMetrics, FitnessMetrics, CognitionMetrics
from app.models.push_subscription import PushSubscription

__all__ = [
    "UserProfile",
    "HealthMetrics",
    "FitnessMetrics",
    "CognitionMetrics",
    "PushSubscription",
]
