"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.profile import UserProfile  # noqa: F401
from app.models.metrics import HealthMetrics, FitnessMetrics, CognitionMetrics  # noqa: F401
from app.models.push_subscription import PushSubscription  # noqa: F401
