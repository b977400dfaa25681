"""
Weekly metrics service.

Files every entry under the current week's date and exposes the
per-pillar listings shown on the dashboard.
"""

import datetime

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.metrics import WeeklyMetricsRepository
from app.longevity.dates import week_key, week_label
from app.schemas.metrics import (
    CognitionMetricsCreate,
    CognitionMetricsResponse,
    FitnessMetricsCreate,
    FitnessMetricsResponse,
    HealthMetricsCreate,
    HealthMetricsResponse,
    WeekStatusResponse,
)

PILLARS = ("health", "fitness", "cognition")


class MetricsService:
    """Service for weekly metric business logic."""

    def __init__(self, session: Session):
        self.repository = WeeklyMetricsRepository(session)

    # ------------------------------------------------------------------
    # Save (always the current week)
    # ------------------------------------------------------------------

    def save_health(self, data: HealthMetricsCreate, today: datetime.date) -> HealthMetricsResponse:
        entry = self.repository.upsert_health(week_key(today), data.model_dump())
        return HealthMetricsResponse.model_validate(entry)

    def save_fitness(self, data: FitnessMetricsCreate, today: datetime.date) -> FitnessMetricsResponse:
        entry = self.repository.upsert_fitness(week_key(today), data.model_dump())
        return FitnessMetricsResponse.model_validate(entry)

    def save_cognition(self, data: CognitionMetricsCreate, today: datetime.date) -> CognitionMetricsResponse:
        entry = self.repository.upsert_cognition(week_key(today), data.model_dump())
        return CognitionMetricsResponse.model_validate(entry)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def recent(self, pillar: str, today: datetime.date, limit: int = 5) -> list:
        """Most recent past weeks for ``pillar``; the week in progress is excluded."""
        current = week_key(today)
        if pillar == "health":
            return [HealthMetricsResponse.model_validate(e)
                    for e in self.repository.get_recent_health(limit, exclude_date=current)]
        if pillar == "fitness":
            return [FitnessMetricsResponse.model_validate(e)
                    for e in self.repository.get_recent_fitness(limit, exclude_date=current)]
        if pillar == "cognition":
            return [CognitionMetricsResponse.model_validate(e)
                    for e in self.repository.get_recent_cognition(limit, exclude_date=current)]
        raise self._unknown_pillar(pillar)

    def current_week(self, today: datetime.date) -> WeekStatusResponse:
        date = week_key(today)
        health = self.repository.get_health_by_date(date)
        fitness = self.repository.get_fitness_by_date(date)
        cognition = self.repository.get_cognition_by_date(date)

        return WeekStatusResponse(
            date=date,
            label=week_label(date),
            health=HealthMetricsResponse.model_validate(health) if health else None,
            fitness=FitnessMetricsResponse.model_validate(fitness) if fitness else None,
            cognition=CognitionMetricsResponse.model_validate(cognition) if cognition else None,
            is_complete=health is not None and fitness is not None and cognition is not None,
        )

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    def delete(self, pillar: str, date: datetime.date) -> None:
        if pillar == "health":
            deleted = self.repository.delete_health(date)
        elif pillar == "fitness":
            deleted = self.repository.delete_fitness(date)
        elif pillar == "cognition":
            deleted = self.repository.delete_cognition(date)
        else:
            raise self._unknown_pillar(pillar)

        if not deleted:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No {pillar} entry for {date}",
            )

    @staticmethod
    def _unknown_pillar(pillar: str) -> HTTPException:
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown pillar {pillar!r}; expected one of {', '.join(PILLARS)}",
        )
