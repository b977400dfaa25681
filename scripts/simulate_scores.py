"""Replay a sample year of weekly metrics through the longevity score fold.

Shows how the aging tax and the completeness gate shape the running score.
Nothing is written to the database.

Usage:
    python scripts/simulate_scores.py
"""

import datetime
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.longevity.dates import week_key
from app.longevity.score import WeekSnapshot, compute_weekly_series
from app.models.metrics import CognitionMetrics, FitnessMetrics, HealthMetrics
from app.models.profile import UserProfile

AS_OF = datetime.date(2026, 10, 18)
PROFILE = UserProfile(birth_date=datetime.date(1985, 4, 12), sex="male", height_cm=180.0)

# Weeks without a cognition entry; they must not move the score.
SKIPPED_COGNITION = {5, 6, 20}


def build_history(weeks: int = 52) -> list[WeekSnapshot]:
    last = week_key(AS_OF)
    history = []
    for i in range(weeks):
        date = last - datetime.timedelta(weeks=weeks - 1 - i)
        trend = i / weeks  # slow improvement over the year
        health = HealthMetrics(date=date, sleep_score=74 + round(6 * trend), waist_cm=88.0 - 4 * trend,
                               rhr=60 - round(4 * trend), nutrition_score=6.5 + trend)
        fitness = FitnessMetrics(date=date, vo2_max=40.0 + 4 * trend, weekly_workouts=3 + (i % 3 == 0),
                                 daily_steps=7500 + int(2500 * trend), weekly_mobility=2 + (i % 2),
                                 cardio_recovery=22 + round(5 * trend))
        cognition = None
        if i not in SKIPPED_COGNITION:
            cognition = CognitionMetrics(date=date, dual_n_back_level=2 + round(2 * trend),
                                         reaction_time_ms=250 - round(15 * trend), weekly_mindfulness=3)
        history.append(WeekSnapshot(date=date, health=health, fitness=fitness, cognition=cognition))
    return history


if __name__ == "__main__":
    history = build_history()
    series = compute_weekly_series(PROFILE, rhr_baseline=0, history=history, as_of=AS_OF)

    print(f"{'week':<12}{'score':>10}{'health':>10}{'fitness':>10}{'cognition':>11}{'tax':>8}")
    for entry in series:
        print(f"{entry.date.isoformat():<12}{entry.score:>10.1f}{entry.health_score:>10.1f}"
              f"{entry.fitness_score:>10.1f}{entry.cognition_score:>11.1f}{entry.aging_tax:>8.2f}")
    print()
    print(f"{len(history)} weeks logged, {len(series)} complete, {len(history) - len(series)} skipped")
