"""
Weekly metric database models.

One table per pillar.  Every row is keyed by the canonical week date (the
Sunday closing the week), unique per table, so saving the same week twice
overwrites the earlier record.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from app.core.clock import utc_now


class HealthMetrics(SQLModel, table=True):
    """Health pillar: sleep, waist, resting heart rate, nutrition."""
    __tablename__ = "health_metrics"

    id: Optional[int] = Field(default=None, primary_key=True)
    date: datetime.date = Field(nullable=False, unique=True, index=True)

    sleep_score: int = Field(nullable=False)
    waist_cm: float = Field(nullable=False)
    rhr: int = Field(nullable=False)
    nutrition_score: float = Field(nullable=False)

    created_at: datetime.datetime = Field(default_factory=utc_now)
    updated_at: datetime.datetime = Field(default_factory=utc_now)


class FitnessMetrics(SQLModel, table=True):
    """Fitness pillar: VO2max, workouts, steps, mobility, cardio recovery."""
    __tablename__ = "fitness_metrics"

    id: Optional[int] = Field(default=None, primary_key=True)
    date: datetime.date = Field(nullable=False, unique=True, index=True)

    vo2_max: float = Field(nullable=False)
    weekly_workouts: int = Field(nullable=False)
    daily_steps: int = Field(nullable=False)
    weekly_mobility: int = Field(nullable=False)
    cardio_recovery: int = Field(nullable=False)

    created_at: datetime.datetime = Field(default_factory=utc_now)
    updated_at: datetime.datetime = Field(default_factory=utc_now)


class CognitionMetrics(SQLModel, table=True):
    """Cognition pillar: dual n-back, reaction time, mindfulness."""
    __tablename__ = "cognition_metrics"

    id: Optional[int] = Field(default=None, primary_key=True)
    date: datetime.date = Field(nullable=False, unique=True, index=True)

    dual_n_back_level: int = Field(nullable=False)
    reaction_time_ms: int = Field(nullable=False)
    weekly_mindfulness: int = Field(nullable=False)

    created_at: datetime.datetime = Field(default_factory=utc_now)
    updated_at: datetime.datetime = Field(default_factory=utc_now)
