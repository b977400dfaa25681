"""
Longevity score schemas.

A :class:`MasterScoreEntry` is derived, never stored: the whole series is
replayed from raw weekly metrics on every request.
"""

import datetime

from pydantic import BaseModel, Field


class MasterScoreEntry(BaseModel):
    """Running longevity score after one complete week."""

    date: datetime.date = Field(..., description="Canonical week date (Sunday)")
    score: float = Field(..., ge=0.0, description="Running score after this week")
    health_score: float = Field(0.0, description="Health pillar points for this week")
    fitness_score: float = Field(0.0, description="Fitness pillar points for this week")
    cognition_score: float = Field(0.0, description="Cognition pillar points for this week")
    aging_tax: float = Field(0.0, description="Decay removed from the running score this week")


class CurrentScoreResponse(BaseModel):
    """Latest score plus whether it comes from real data."""

    entry: MasterScoreEntry
    is_default: bool = Field(
        ...,
        description="True when no complete week (or no profile) exists yet",
    )
