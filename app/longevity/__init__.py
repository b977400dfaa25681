"""Longevity core — baselines, pillar scorers, compounding score engine."""

from app.longevity.score import (
    ProfileRequiredError,
    ScoreComputationError,
    WeekSnapshot,
    compute_all_weekly_scores,
    compute_weekly_series,
    get_current_score,
)

__all__ = [
    "ProfileRequiredError",
    "ScoreComputationError",
    "WeekSnapshot",
    "compute_all_weekly_scores",
    "compute_weekly_series",
    "get_current_score",
]
