"""
Pillar scorers — one week's raw metrics to signed points.

Each pillar compares the week against a reference value per metric and
converts the difference into points.  Positive points mean "better than
baseline".  Nothing is clamped here; the compounding engine only clamps the
running total.

Health
------
    (sleep_score − 75) × 2
  + (0.48 − waist_cm / height_cm) × 1000
  + (rhr_baseline − rhr) × 5
  + (nutrition_score − 7) × 5

Fitness
-------
    (vo2_max − vo2max_baseline) × 20
  + (weekly_workouts − 3) × 20
  + (daily_steps − 8000) / 150
  + (weekly_mobility − 3) × 10
  + (cardio_recovery − cardio_recovery_baseline) × 3

Cognition
---------
    (dual_n_back_level − 2) × 20
  + (reaction_baseline − reaction_time_ms) / 2
  + (weekly_mindfulness − 3) × 5
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from app.core.config import settings
from app.models.metrics import CognitionMetrics, FitnessMetrics, HealthMetrics


class ScoringConfig(BaseModel):
    """Reference values for the pillar formulas.

    Only the cardio-recovery reference is deployment-specific; the rest are
    exposed so tests and simulations can inject alternatives.
    """

    sleep_reference: float = 75.0
    waist_to_height_reference: float = 0.48
    nutrition_reference: float = 7.0

    workouts_reference: int = 3
    steps_reference: int = 8000
    steps_per_point: float = 150.0
    mobility_reference: int = 3
    cardio_recovery_baseline: int = Field(default_factory=lambda: settings.CARDIO_RECOVERY_BASELINE)

    dual_n_back_reference: int = 2
    mindfulness_reference: int = 3


DEFAULT_SCORING_CONFIG = ScoringConfig()


def health_pillar(metrics: HealthMetrics, rhr_baseline: float, waist_to_height: float,
                  config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> float:
    """Health points for one week."""
    sleep_points = (metrics.sleep_score - config.sleep_reference) * 2
    whtr_points = (config.waist_to_height_reference - waist_to_height) * 1000
    rhr_points = (rhr_baseline - metrics.rhr) * 5
    nutrition_points = (metrics.nutrition_score - config.nutrition_reference) * 5
    return sleep_points + whtr_points + rhr_points + nutrition_points


def fitness_pillar(metrics: FitnessMetrics, vo2max_baseline: float,
                   config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> float:
    """Fitness points for one week."""
    vo2_points = (metrics.vo2_max - vo2max_baseline) * 20
    workout_points = (metrics.weekly_workouts - config.workouts_reference) * 20
    step_points = (metrics.daily_steps - config.steps_reference) / config.steps_per_point
    mobility_points = (metrics.weekly_mobility - config.mobility_reference) * 10
    recovery_points = (metrics.cardio_recovery - config.cardio_recovery_baseline) * 3
    return vo2_points + workout_points + step_points + mobility_points + recovery_points


def cognition_pillar(metrics: CognitionMetrics, reaction_baseline: int,
                     config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> float:
    """Cognition points for one week."""
    memory_points = (metrics.dual_n_back_level - config.dual_n_back_reference) * 20
    reaction_points = (reaction_baseline - metrics.reaction_time_ms) / 2
    mindfulness_points = (metrics.weekly_mindfulness - config.mindfulness_reference) * 5
    return float(memory_points + reaction_points + mindfulness_points)
