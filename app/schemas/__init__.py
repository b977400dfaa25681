"""Pydantic schemas for request/response validation."""

from app.schemas.profile import UserProfileResponse, UserProfileUpdate
from app.schemas.metrics import (
    HealthMetricsCreate,
    HealthMetricsResponse,
    FitnessMetricsCreate,
    FitnessMetricsResponse,
    CognitionMetricsCreate,
    CognitionMetricsResponse,
    WeekStatusResponse,
)
from app.schemas.score import CurrentScoreResponse, MasterScoreEntry
from app.schemas.push import (
    PushKeys,
    BrowserSubscription,
    PushSubscribeRequest,
    PushUnsubscribeRequest,
    PushSubscriptionResponse,
    VapidPublicKeyResponse,
)

__all__ = [
    "UserProfileResponse",
    "UserProfileUpdate",
    "HealthMetricsCreate",
    "HealthMetricsResponse",
    "FitnessMetricsCreate",
    "FitnessMetricsResponse",
    "CognitionMetricsCreate",
    "CognitionMetricsResponse",
    "WeekStatusResponse",
    "CurrentScoreResponse",
    "MasterScoreEntry",
    "PushKeys",
    "BrowserSubscription",
    "PushSubscribeRequest",
    "PushUnsubscribeRequest",
    "PushSubscriptionResponse",
    "VapidPublicKeyResponse",
]
