"""
Population baselines used by the fitness and cognition pillars.

Both tables are step functions of age.  They are total: every age maps to a
value and any sex other than ``"male"`` uses the lower VO2max table.
"""

from __future__ import annotations

# (upper age bound exclusive, VO2max ml/kg/min) for the non-male table.
_VO2MAX_BY_AGE: list[tuple[int, float]] = [
    (30, 38.0),
    (40, 36.0),
    (50, 33.0),
    (60, 30.0),
    (70, 27.0),
]
_VO2MAX_FLOOR = 24.0

# Male norms sit a constant 6 ml/kg/min above the non-male ones.
MALE_VO2MAX_OFFSET = 6.0

_REACTION_TIME_BY_AGE: list[tuple[int, int]] = [
    (20, 200),
    (30, 220),
    (40, 240),
    (50, 260),
    (60, 280),
    (70, 300),
]
_REACTION_TIME_CEILING = 320


def vo2max_baseline(age: int, sex: str) -> float:
    """Expected VO2max for ``age`` and ``sex``."""
    base = _VO2MAX_FLOOR
    for upper, value in _VO2MAX_BY_AGE:
        if age < upper:
            base = value
            break

    if sex == "male":
        return base + MALE_VO2MAX_OFFSET
    return base


def reaction_time_baseline(age: int) -> int:
    """Expected simple reaction time (ms) for ``age``."""
    for upper, value in _REACTION_TIME_BY_AGE:
        if age < upper:
            return value
    return _REACTION_TIME_CEILING
