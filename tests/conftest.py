"""Shared fixtures: an in-memory SQLite database and metric builders."""

import asyncio
import datetime
import time
from typing import Callable

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.db.base  # noqa: F401  (registers every table on SQLModel.metadata)
from app.models.metrics import CognitionMetrics, FitnessMetrics, HealthMetrics
from app.models.profile import UserProfile


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def session_factory(engine) -> Callable[[], Session]:
    """Factory handing out fresh sessions on the shared in-memory database."""
    return lambda: Session(engine)


@pytest.fixture
def slow_session_factory(engine) -> Callable[[], Session]:
    """Like ``session_factory`` but every session takes 0.3 s to open, as on a locked database."""
    def factory() -> Session:
        time.sleep(0.3)
        return Session(engine)

    return factory


async def run_with_loop_gap(awaitable):
    """Await ``awaitable`` and report the longest stretch the event loop stayed blocked.

    Returns:
        Tuple of (result, max gap in seconds between 10 ms heartbeats).
    """
    gaps: list[float] = []
    done = asyncio.Event()

    async def heartbeat():
        last = time.monotonic()
        while not done.is_set():
            await asyncio.sleep(0.01)
            now = time.monotonic()
            gaps.append(now - last)
            last = now

    beat = asyncio.create_task(heartbeat())
    await asyncio.sleep(0)
    try:
        result = await awaitable
    finally:
        done.set()
        await beat
    return result, max(gaps, default=0.0)


# ======================================================================
# Builders
# ======================================================================


def make_profile(birth_date=datetime.date(1991, 1, 1), sex="female", height_cm=180.0) -> UserProfile:
    return UserProfile(birth_date=birth_date, sex=sex, height_cm=height_cm)


def health_values(**overrides) -> dict:
    values = {"sleep_score": 80, "waist_cm": 80.0, "rhr": 60, "nutrition_score": 8.0}
    values.update(overrides)
    return values


def fitness_values(**overrides) -> dict:
    values = {"vo2_max": 42.0, "weekly_workouts": 4, "daily_steps": 10000,
              "weekly_mobility": 3, "cardio_recovery": 25}
    values.update(overrides)
    return values


def cognition_values(**overrides) -> dict:
    values = {"dual_n_back_level": 3, "reaction_time_ms": 240, "weekly_mindfulness": 4}
    values.update(overrides)
    return values


def make_health(date: datetime.date, **overrides) -> HealthMetrics:
    return HealthMetrics(date=date, **health_values(**overrides))


def make_fitness(date: datetime.date, **overrides) -> FitnessMetrics:
    return FitnessMetrics(date=date, **fitness_values(**overrides))


def make_cognition(date: datetime.date, **overrides) -> CognitionMetrics:
    return CognitionMetrics(date=date, **cognition_values(**overrides))
