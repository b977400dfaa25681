"""Web Push reminders — VAPID signing, delivery, weekly scheduler."""

from app.notifications.scheduler import ReminderScheduler
from app.notifications.vapid import VapidError, VapidKeyError, create_vapid_token, decode_private_key

__all__ = [
    "ReminderScheduler",
    "VapidError",
    "VapidKeyError",
    "create_vapid_token",
    "decode_private_key",
]
