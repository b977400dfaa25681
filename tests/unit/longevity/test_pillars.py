"""Tests for the pillar scorers.

Pure functions only: metrics are plain model instances, never persisted.
"""

import datetime

import pytest

from app.longevity.pillars import ScoringConfig, cognition_pillar, fitness_pillar, health_pillar
from tests.conftest import make_cognition, make_fitness, make_health

WEEK = datetime.date(2026, 10, 18)


# ======================================================================
# Health
# ======================================================================


class TestHealthPillar:
    def test_reference_example(self):
        # sleep +10, waist-to-height +35.56, rhr 0, nutrition +5
        score = health_pillar(make_health(WEEK), rhr_baseline=60, waist_to_height=80.0 / 180.0)
        assert score == pytest.approx(50.56, abs=0.01)

    def test_at_baseline_is_zero(self):
        metrics = make_health(WEEK, sleep_score=75, rhr=60, nutrition_score=7.0)
        assert health_pillar(metrics, rhr_baseline=60, waist_to_height=0.48) == pytest.approx(0.0)

    def test_lower_rhr_than_baseline_scores(self):
        metrics = make_health(WEEK, sleep_score=75, rhr=55, nutrition_score=7.0)
        assert health_pillar(metrics, rhr_baseline=60, waist_to_height=0.48) == pytest.approx(25.0)

    def test_can_go_negative(self):
        metrics = make_health(WEEK, sleep_score=50, rhr=70, nutrition_score=3.0)
        assert health_pillar(metrics, rhr_baseline=60, waist_to_height=0.6) < 0


# ======================================================================
# Fitness
# ======================================================================


class TestFitnessPillar:
    def test_reference_example(self):
        # vo2 +80, workouts +20, steps +13.33, mobility 0, recovery 0
        score = fitness_pillar(make_fitness(WEEK), vo2max_baseline=38.0, config=ScoringConfig(cardio_recovery_baseline=25))
        assert score == pytest.approx(113.33, abs=0.01)

    def test_cardio_recovery_baseline_is_configurable(self):
        metrics = make_fitness(WEEK, vo2_max=38.0, weekly_workouts=3, daily_steps=8000, cardio_recovery=25)
        assert fitness_pillar(metrics, 38.0, ScoringConfig(cardio_recovery_baseline=20)) == pytest.approx(15.0)
        assert fitness_pillar(metrics, 38.0, ScoringConfig(cardio_recovery_baseline=25)) == pytest.approx(0.0)

    def test_steps_below_reference(self):
        metrics = make_fitness(WEEK, vo2_max=38.0, weekly_workouts=3, daily_steps=6500, cardio_recovery=25)
        assert fitness_pillar(metrics, 38.0, ScoringConfig(cardio_recovery_baseline=25)) == pytest.approx(-10.0)


# ======================================================================
# Cognition
# ======================================================================


class TestCognitionPillar:
    def test_reference_example(self):
        assert cognition_pillar(make_cognition(WEEK), reaction_baseline=240) == pytest.approx(25.0)

    def test_faster_reaction_scores(self):
        metrics = make_cognition(WEEK, dual_n_back_level=2, reaction_time_ms=200, weekly_mindfulness=3)
        assert cognition_pillar(metrics, reaction_baseline=240) == pytest.approx(20.0)

    def test_returns_float(self):
        assert isinstance(cognition_pillar(make_cognition(WEEK), 240), float)
