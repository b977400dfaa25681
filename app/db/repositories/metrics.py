"""
Weekly metrics repository.

Handles database operations for the three pillar tables.  Includes the
cross-table queries used by the score engine (dates with data, RHR baseline).
"""

import datetime
from typing import Any, Optional, Type, TypeVar

from sqlalchemy import func, union
from sqlmodel import Session, SQLModel, select

from app.core.clock import utc_now

from app.models.metrics import CognitionMetrics, FitnessMetrics, HealthMetrics

MetricT = TypeVar("MetricT", HealthMetrics, FitnessMetrics, CognitionMetrics)

PILLAR_MODELS: dict[str, Type[SQLModel]] = {
    "health": HealthMetrics,
    "fitness": FitnessMetrics,
    "cognition": CognitionMetrics,
}


class WeeklyMetricsRepository:
    """Repository for HealthMetrics / FitnessMetrics / CognitionMetrics."""

    def __init__(self, session: Session):
        self.session = session

    # ------------------------------------------------------------------
    # Lookup by week
    # ------------------------------------------------------------------

    def get_health_by_date(self, date: datetime.date) -> Optional[HealthMetrics]:
        return self._get_by_date(HealthMetrics, date)

    def get_fitness_by_date(self, date: datetime.date) -> Optional[FitnessMetrics]:
        return self._get_by_date(FitnessMetrics, date)

    def get_cognition_by_date(self, date: datetime.date) -> Optional[CognitionMetrics]:
        return self._get_by_date(CognitionMetrics, date)

    def get_all_dates_with_data(self) -> list[datetime.date]:
        """Distinct dates present in any pillar table, newest first."""
        dates = union(
            select(HealthMetrics.date),
            select(FitnessMetrics.date),
            select(CognitionMetrics.date),
        ).subquery()
        statement = select(dates.c.date).distinct().order_by(dates.c.date.desc())
        return list(self.session.exec(statement).all())

    def get_rhr_baseline(self, as_of: datetime.date, days: int = 90) -> float:
        """Mean resting heart rate over the trailing window ending ``as_of``.

        Returns ``0.0`` when there are no readings in the window.
        """
        start = as_of - datetime.timedelta(days=days)
        statement = select(func.avg(HealthMetrics.rhr)).where(
            HealthMetrics.date >= start,
            HealthMetrics.date <= as_of,
        )
        value = self.session.exec(statement).first()
        return float(value) if value is not None else 0.0

    # ------------------------------------------------------------------
    # Listings
    # ------------------------------------------------------------------

    def get_recent_health(self, limit: int = 5, exclude_date: Optional[datetime.date] = None) -> list[HealthMetrics]:
        return self._get_recent(HealthMetrics, limit, exclude_date)

    def get_recent_fitness(self, limit: int = 5, exclude_date: Optional[datetime.date] = None) -> list[FitnessMetrics]:
        return self._get_recent(FitnessMetrics, limit, exclude_date)

    def get_recent_cognition(self, limit: int = 5,
                             exclude_date: Optional[datetime.date] = None) -> list[CognitionMetrics]:
        return self._get_recent(CognitionMetrics, limit, exclude_date)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def upsert_health(self, date: datetime.date, values: dict[str, Any]) -> HealthMetrics:
        return self._upsert(HealthMetrics, date, values)

    def upsert_fitness(self, date: datetime.date, values: dict[str, Any]) -> FitnessMetrics:
        return self._upsert(FitnessMetrics, date, values)

    def upsert_cognition(self, date: datetime.date, values: dict[str, Any]) -> CognitionMetrics:
        return self._upsert(CognitionMetrics, date, values)

    def delete_health(self, date: datetime.date) -> bool:
        return self._delete(HealthMetrics, date)

    def delete_fitness(self, date: datetime.date) -> bool:
        return self._delete(FitnessMetrics, date)

    def delete_cognition(self, date: datetime.date) -> bool:
        return self._delete(CognitionMetrics, date)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_by_date(self, model: Type[MetricT], date: datetime.date) -> Optional[MetricT]:
        statement = select(model).where(model.date == date)
        return self.session.exec(statement).first()

    def _get_recent(self, model: Type[MetricT], limit: int,
                    exclude_date: Optional[datetime.date]) -> list[MetricT]:
        statement = select(model)
        if exclude_date is not None:
            statement = statement.where(model.date != exclude_date)
        statement = statement.order_by(model.date.desc()).limit(limit)
        return list(self.session.exec(statement).all())

    def _upsert(self, model: Type[MetricT], date: datetime.date, values: dict[str, Any]) -> MetricT:
        entry = self._get_by_date(model, date)
        if entry is None:
            entry = model(date=date, **values)
        else:
            for key, value in values.items():
                setattr(entry, key, value)
            entry.updated_at = utc_now()

        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def _delete(self, model: Type[MetricT], date: datetime.date) -> bool:
        entry = self._get_by_date(model, date)
        if entry:
            self.session.delete(entry)
            self.session.commit()
            return True
        return False
