"""
Weekly metric endpoints.

Entries are always filed under the current week (the Sunday closing it);
saving a pillar twice in the same week overwrites the first entry.
"""

import datetime
from typing import Literal

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.db.session import get_db
from app.schemas.metrics import (
    CognitionMetricsCreate,
    CognitionMetricsResponse,
    FitnessMetricsCreate,
    FitnessMetricsResponse,
    HealthMetricsCreate,
    HealthMetricsResponse,
    WeekStatusResponse,
)
from app.services.metrics_service import MetricsService

router = APIRouter()

Pillar = Literal["health", "fitness", "cognition"]


@router.get("/week", summary="Status of the current week.", response_model=WeekStatusResponse, )
def get_current_week(db: Session = Depends(get_db), ):
    return MetricsService(db).current_week(datetime.date.today())


@router.put("/health", summary="Save this week's health metrics.", response_model=HealthMetricsResponse, )
def save_health(data: HealthMetricsCreate, db: Session = Depends(get_db), ):
    return MetricsService(db).save_health(data, datetime.date.today())


@router.put("/fitness", summary="Save this week's fitness metrics.", response_model=FitnessMetricsResponse, )
def save_fitness(data: FitnessMetricsCreate, db: Session = Depends(get_db), ):
    return MetricsService(db).save_fitness(data, datetime.date.today())


@router.put("/cognition", summary="Save this week's cognition metrics.", response_model=CognitionMetricsResponse, )
def save_cognition(data: CognitionMetricsCreate, db: Session = Depends(get_db), ):
    return MetricsService(db).save_cognition(data, datetime.date.today())


@router.get("/{pillar}", summary="Most recent past weeks for a pillar.")
def list_recent(pillar: Pillar,
                limit: int = Query(5, ge=1, le=104, description="Max weeks to return"),
                db: Session = Depends(get_db), ):
    """The week in progress is not included."""
    return MetricsService(db).recent(pillar, datetime.date.today(), limit)


@router.delete("/{pillar}/{date}", summary="Delete one pillar entry.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_entry(pillar: Pillar, date: datetime.date, db: Session = Depends(get_db), ):
    MetricsService(db).delete(pillar, date)
