"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import metrics, notifications, profile, scores

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    profile.router, prefix="/profile", tags=["Profile"]
)
api_router.include_router(
    metrics.router, prefix="/metrics", tags=["Weekly metrics"]
)
api_router.include_router(
    scores.router, prefix="/scores", tags=["Longevity score"]
)
api_router.include_router(
    notifications.router, prefix="/notifications", tags=["Notifications"]
)
