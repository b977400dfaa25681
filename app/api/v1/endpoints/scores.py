"""
Longevity score endpoints — full history and current score.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlmodel import Session

from app.db.session import get_db
from app.longevity.score import (
    ProfileRequiredError,
    ScoreComputationError,
    compute_all_weekly_scores,
    get_current_score,
)
from app.schemas.score import CurrentScoreResponse, MasterScoreEntry

router = APIRouter()


@router.get(
    "",
    summary="Replay the weekly score history (newest first).",
    response_model=list[MasterScoreEntry],
)
def list_scores(
    as_of: Optional[datetime.date] = Query(None, description="Reference date for age and baselines (defaults to today)"),
    db: Session = Depends(get_db),
):
    ref_date = as_of or datetime.date.today()
    try:
        scores = compute_all_weekly_scores(db, ref_date)
    except ProfileRequiredError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    except ScoreComputationError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc))
    return list(reversed(scores))


@router.get(
    "/current",
    summary="Latest longevity score (starting score when none exists).",
    response_model=CurrentScoreResponse,
)
def current_score(db: Session = Depends(get_db), ):
    entry, is_default = get_current_score(db, datetime.date.today())
    return CurrentScoreResponse(entry=entry, is_default=is_default)
