"""
Timestamp helper for the ``created_at`` / ``updated_at`` columns.

SQLModel's ``DateTime`` binding only accepts timezone-aware values.
"""

import datetime


def utc_now() -> datetime.datetime:
    """Current time as an aware UTC datetime."""
    return datetime.datetime.now(datetime.timezone.utc)
