"""
Longevity score — sequential compounding over weekly history.

The score is a **running total**, not a per-week value.  Every complete
week first pays an aging tax proportional to the score carried in from the
previous week, then adds the three pillar scores:

    rate      = age² / 8000 / 52
    tax       = running × rate
    new_score = max(0, running − tax + health + fitness + cognition)

The series always starts at 1000.0 and is recomputed from raw metrics on
every call.  Nothing is cached, so editing a past week or the profile
(birth date, sex, height) rewrites the whole history.

Key design choices
------------------

1. **Data-completeness gate** — a week contributes only when health,
   fitness and cognition records all exist for its date.  Incomplete weeks
   are skipped entirely: no tax, no bonus, no entry.  Without the gate the
   tax would compound against weeks the user never logged.
2. **Strict chronological fold** — week *N*'s tax depends on the score
   carried out of week *N−1*, so snapshots are sorted oldest first before
   folding.
3. **"Now" baselines** — age and the RHR baseline are evaluated at the
   reference date for every historical week, not at the week itself.
4. **All or nothing** — a persistence failure anywhere in the walk aborts
   the computation; callers never see a truncated series.
"""

from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.db.repositories.metrics import WeeklyMetricsRepository
from app.db.repositories.profile import UserProfileRepository
from app.longevity.baselines import reaction_time_baseline, vo2max_baseline
from app.longevity.dates import age_on
from app.longevity.pillars import (
    DEFAULT_SCORING_CONFIG,
    ScoringConfig,
    cognition_pillar,
    fitness_pillar,
    health_pillar,
)
from app.models.metrics import CognitionMetrics, FitnessMetrics, HealthMetrics
from app.models.profile import UserProfile
from app.schemas.score import MasterScoreEntry

logger = logging.getLogger(__name__)

STARTING_SCORE = 1000.0

# Trailing window for the resting heart rate baseline (~3 months).
RHR_BASELINE_DAYS = 90


class ProfileRequiredError(Exception):
    """Raised when scores are requested before a profile exists."""


class ScoreComputationError(Exception):
    """Raised when the history walk cannot be completed."""


@dataclass(frozen=True)
class WeekSnapshot:
    """The three pillar records stored under one week date (any may be missing)."""

    date: datetime.date
    health: Optional[HealthMetrics] = None
    fitness: Optional[FitnessMetrics] = None
    cognition: Optional[CognitionMetrics] = None

    @property
    def is_complete(self) -> bool:
        return self.health is not None and self.fitness is not None and self.cognition is not None


# ======================================================================
# Single-week step
# ======================================================================


def weekly_decay_rate(age: int) -> float:
    """Fraction of the running score removed per week at ``age``."""
    return (age * age / 8000.0) / 52.0


def compound_week(
    running_score: float,
    age: int,
    health_score: float,
    fitness_score: float,
    cognition_score: float,
) -> tuple[float, float]:
    """Apply one week's tax and pillar points.

    Returns:
        ``(new_score, tax)`` with ``new_score`` clamped at zero.
    """
    tax = running_score * weekly_decay_rate(age)
    new_score = (running_score - tax) + health_score + fitness_score + cognition_score
    return max(0.0, new_score), tax


# ======================================================================
# Pure fold
# ======================================================================


def compute_weekly_series(
    profile: UserProfile,
    rhr_baseline: float,
    history: Iterable[WeekSnapshot],
    as_of: datetime.date,
    config: Optional[ScoringConfig] = None,
) -> list[MasterScoreEntry]:
    """Replay ``history`` and return one entry per complete week, oldest first.

    Args:
        profile: User profile (birth date, sex, height).
        rhr_baseline: Trailing resting heart rate average.  ``0`` means
            unavailable, in which case each week uses its own RHR.
        history: Week snapshots in any order.
        as_of: Reference date for the user's age.
        config: Optional :class:`ScoringConfig` override.

    Returns:
        List of :class:`MasterScoreEntry`, oldest first.
    """
    cfg = config or DEFAULT_SCORING_CONFIG

    age = age_on(profile.birth_date, as_of)
    vo2_ref = vo2max_baseline(age, profile.sex)
    reaction_ref = reaction_time_baseline(age)

    entries: list[MasterScoreEntry] = []
    running = STARTING_SCORE

    for week in sorted(history, key=lambda snapshot: snapshot.date):
        if not week.is_complete:
            continue

        week_rhr_ref = rhr_baseline if rhr_baseline else week.health.rhr
        whtr = week.health.waist_cm / profile.height_cm

        h_score = health_pillar(week.health, week_rhr_ref, whtr, cfg)
        f_score = fitness_pillar(week.fitness, vo2_ref, cfg)
        c_score = cognition_pillar(week.cognition, reaction_ref, cfg)

        running, tax = compound_week(running, age, h_score, f_score, c_score)

        entries.append(MasterScoreEntry(
            date=week.date,
            score=running,
            health_score=h_score,
            fitness_score=f_score,
            cognition_score=c_score,
            aging_tax=tax,
        ))

    return entries


# ======================================================================
# Database-backed entry points
# ======================================================================


def load_history(repo: WeeklyMetricsRepository) -> list[WeekSnapshot]:
    """Fetch every week that has at least one pillar record, oldest first."""
    dates = repo.get_all_dates_with_data()  # newest first
    return [
        WeekSnapshot(
            date=date,
            health=repo.get_health_by_date(date),
            fitness=repo.get_fitness_by_date(date),
            cognition=repo.get_cognition_by_date(date),
        )
        for date in reversed(dates)
    ]


def compute_all_weekly_scores(
    session: Session,
    as_of: datetime.date,
    config: Optional[ScoringConfig] = None,
) -> list[MasterScoreEntry]:
    """Compute the full score series from the database.

    Raises:
        ProfileRequiredError: No profile has been saved yet.
        ScoreComputationError: A read failed part-way through the history.
    """
    try:
        profile = UserProfileRepository(session).get()
        if profile is None:
            raise ProfileRequiredError("profile required for master score calculation")

        repo = WeeklyMetricsRepository(session)
        history = load_history(repo)
        rhr_baseline = repo.get_rhr_baseline(as_of, days=RHR_BASELINE_DAYS)
    except SQLAlchemyError as exc:
        raise ScoreComputationError(f"failed to read metric history: {exc}") from exc

    return compute_weekly_series(profile, rhr_baseline, history, as_of, config)


def default_score(as_of: datetime.date) -> MasterScoreEntry:
    """Starting score shown before any complete week exists."""
    return MasterScoreEntry(date=as_of, score=STARTING_SCORE)


def get_current_score(
    session: Session,
    as_of: datetime.date,
    config: Optional[ScoringConfig] = None,
) -> tuple[MasterScoreEntry, bool]:
    """Latest score, falling back to the starting score.

    Returns:
        ``(entry, is_default)``.  Never raises for a missing profile or a
        failed history walk; those are logged and reported as default.
    """
    try:
        scores = compute_all_weekly_scores(session, as_of, config)
    except ProfileRequiredError:
        logger.info("No profile saved yet, showing starting score")
        return default_score(as_of), True
    except ScoreComputationError as exc:
        logger.warning(f"Could not compute longevity score: {exc}")
        return default_score(as_of), True

    if not scores:
        return default_score(as_of), True
    return scores[-1], False
