"""
Calendar helpers shared by the score engine and the reminder scheduler.

Weekly metrics are keyed by the Sunday that closes the week: the most recent
Sunday at or before the reference date.
"""

from __future__ import annotations

import datetime


def week_key(reference: datetime.date) -> datetime.date:
    """Return the canonical week date for ``reference``."""
    # date.weekday(): Monday=0 ... Sunday=6
    days_since_sunday = (reference.weekday() + 1) % 7
    return reference - datetime.timedelta(days=days_since_sunday)


def week_label(key: datetime.date) -> str:
    """Human label for the Monday–Sunday week ending on ``key``.

    ``"Feb 23 - Mar 1"``, or ``"Dec 30 - Jan 5, 2025"`` across a year boundary.
    """
    monday = key - datetime.timedelta(days=6)
    label = f"{monday.strftime('%b')} {monday.day} - {key.strftime('%b')} {key.day}"
    if monday.year != key.year:
        label += f", {key.year}"
    return label


def age_on(birth_date: datetime.date, on: datetime.date) -> int:
    """Whole years between ``birth_date`` and ``on``."""
    age = on.year - birth_date.year
    if (on.month, on.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def sunday_based_weekday(moment: datetime.datetime) -> int:
    """Weekday of ``moment`` counted from Sunday (0) to Saturday (6)."""
    return (moment.weekday() + 1) % 7
