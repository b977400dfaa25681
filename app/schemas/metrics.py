"""
Weekly metric API schemas.

One Create / Response pair per pillar.  The date is never supplied by the
client: entries are always filed under the current week.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------

class HealthMetricsCreate(BaseModel):
    """Health pillar values for one week."""

    sleep_score: int = Field(..., ge=0, le=100, description="Weekly average sleep score (0-100)")
    waist_cm: float = Field(..., gt=0.0, le=250.0, description="Waist circumference (cm)")
    rhr: int = Field(..., ge=25, le=150, description="Resting heart rate (bpm)")
    nutrition_score: float = Field(..., ge=1.0, le=10.0, description="Self-assessed nutrition (1-10)")


class HealthMetricsResponse(HealthMetricsCreate):
    date: datetime.date

    class Config:
        from_attributes = True


# ---------------------------------------------------------------------------
# Fitness
# ---------------------------------------------------------------------------

class FitnessMetricsCreate(BaseModel):
    """Fitness pillar values for one week."""

    vo2_max: float = Field(..., gt=0.0, le=100.0, description="Current VO2max (ml/kg/min)")
    weekly_workouts: int = Field(..., ge=0, le=50)
    daily_steps: int = Field(..., ge=0, le=100000, description="Average daily steps")
    weekly_mobility: int = Field(..., ge=0, le=50, description="Mobility sessions this week")
    cardio_recovery: int = Field(..., ge=0, le=120, description="Heart rate drop after 60s (bpm)")


class FitnessMetricsResponse(FitnessMetricsCreate):
    date: datetime.date

    class Config:
        from_attributes = True


# ---------------------------------------------------------------------------
# Cognition
# ---------------------------------------------------------------------------

class CognitionMetricsCreate(BaseModel):
    """Cognition pillar values for one week."""

    dual_n_back_level: int = Field(..., ge=0, le=20)
    reaction_time_ms: int = Field(..., gt=0, le=2000, description="Simple reaction time (ms)")
    weekly_mindfulness: int = Field(..., ge=0, le=50, description="Mindfulness sessions this week")


class CognitionMetricsResponse(CognitionMetricsCreate):
    date: datetime.date

    class Config:
        from_attributes = True


# ---------------------------------------------------------------------------
# Week status
# ---------------------------------------------------------------------------

class WeekStatusResponse(BaseModel):
    """Which pillars have been logged for the current week."""

    date: datetime.date = Field(..., description="Canonical week date (Sunday)")
    label: str = Field(..., description='Monday-Sunday label, e.g. "Feb 23 - Mar 1"')
    health: Optional[HealthMetricsResponse] = None
    fitness: Optional[FitnessMetricsResponse] = None
    cognition: Optional[CognitionMetricsResponse] = None
    is_complete: bool
