"""
Weekly reminder scheduler.

Every tick (one minute by default) the scheduler:

1. loads all push subscriptions (nothing to do without any),
2. checks the current week on the server's local calendar and stops if
   health, fitness and cognition have all been logged,
3. decodes the VAPID private key once (a missing or malformed key skips
   the tick),
4. compares each subscriber's local weekday and ``HH:MM`` with their
   reminder slot, falling back to UTC for unknown time zones,
5. starts one independent asyncio task per due subscriber so a slow push
   service never holds up the others or the next tick.

The scheduler keeps no memory between ticks.  A slot matches for exactly
one wall-clock minute and the job never overlaps itself, so one tick per
minute produces at most one reminder per slot.
"""

from __future__ import annotations

import asyncio
import datetime
import logging
from typing import Callable, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import httpx
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger
from sqlmodel import Session

from app.core.config import Settings, settings
from app.db.repositories.metrics import WeeklyMetricsRepository
from app.db.repositories.push_subscription import PushSubscriptionRepository
from app.db.session import new_session
from app.longevity.dates import sunday_based_weekday, week_key
from app.models.push_subscription import PushSubscription
from app.notifications.push import PushOutcome, send_push
from app.notifications.vapid import VapidKeyError, decode_private_key, public_key_b64

logger = logging.getLogger(__name__)

JOB_ID = "weekly-metric-reminders"


def resolve_timezone(name: str) -> datetime.tzinfo:
    """Zone for ``name``, or UTC when the name is unknown or malformed."""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, TypeError):
        logger.warning(f"Unknown timezone {name!r}, falling back to UTC")
        return datetime.timezone.utc


def is_reminder_due(subscription: PushSubscription, now: datetime.datetime) -> bool:
    """True when ``now`` falls on the subscriber's reminder weekday and minute.

    ``now`` must be timezone-aware; it is converted to the subscriber's zone.
    """
    local = now.astimezone(resolve_timezone(subscription.timezone))
    return (sunday_based_weekday(local) == subscription.reminder_day
            and local.strftime("%H:%M") == subscription.reminder_time)


class ReminderScheduler:
    """Owns the periodic job, the shared HTTP client and in-flight send tasks."""

    def __init__(
        self,
        session_factory: Callable[[], Session] = new_session,
        http_client: Optional[httpx.AsyncClient] = None,
        config: Settings = settings,
    ):
        self.session_factory = session_factory
        self.config = config
        self.http_client = http_client or httpx.AsyncClient(timeout=config.PUSH_TIMEOUT_SECONDS)
        self._scheduler: Optional[AsyncIOScheduler] = None
        self._pending: set[asyncio.Task] = set()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Register the tick job and start the APScheduler loop."""
        self._scheduler = AsyncIOScheduler(timezone="UTC")
        self._scheduler.add_job(
            self.tick,
            IntervalTrigger(seconds=self.config.NOTIFICATION_TICK_SECONDS),
            id=JOB_ID,
            max_instances=1,
            coalesce=True,
            replace_existing=True,
        )
        self._scheduler.start()
        logger.info(f"Reminder scheduler started (every {self.config.NOTIFICATION_TICK_SECONDS}s)")

    async def shutdown(self) -> None:
        """Stop ticking, let in-flight sends finish, then close the HTTP client."""
        if self._scheduler is not None and self._scheduler.running:
            self._scheduler.shutdown(wait=False)
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)
        await self.http_client.aclose()
        logger.info("Reminder scheduler stopped")

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    async def tick(self) -> None:
        """Job entry point; a failing tick is logged and the next one runs normally."""
        try:
            await self.check_and_send()
        except Exception:
            logger.exception("Reminder tick failed")

    async def check_and_send(self, now: Optional[datetime.datetime] = None) -> list[asyncio.Task]:
        """Evaluate every subscription once and start sends for the due ones.

        Args:
            now: Aware reference instant (defaults to the current time).

        Returns:
            The send tasks started by this tick.
        """
        now = now or datetime.datetime.now(datetime.timezone.utc)
        current_week = week_key(now.astimezone().date())

        # SQLite calls may wait on the busy timeout; keep them off the event loop.
        subscriptions, complete = await asyncio.to_thread(self._load_state, current_week)
        if not subscriptions:
            return []

        if complete:
            logger.debug(f"Skipping reminders: data complete for week {current_week}")
            return []

        try:
            private_key = decode_private_key(self.config.VAPID_PRIVATE_KEY)
        except VapidKeyError as exc:
            logger.warning(f"Skipping reminders: {exc}")
            return []
        public_key = self.config.VAPID_PUBLIC_KEY or public_key_b64(private_key)

        tasks: list[asyncio.Task] = []
        for subscription in subscriptions:
            if not is_reminder_due(subscription, now):
                continue

            logger.info(f"Sending reminder to {subscription.endpoint} "
                        f"(timezone {subscription.timezone}, slot {subscription.reminder_time})")
            task = asyncio.create_task(self._deliver(subscription, private_key, public_key))
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)
            tasks.append(task)

        return tasks

    def _load_state(self, current_week: datetime.date) -> tuple[list[PushSubscription], bool]:
        """All subscriptions, and whether ``current_week`` has every pillar logged."""
        with self.session_factory() as session:
            subscriptions = PushSubscriptionRepository(session).get_all()
            if not subscriptions:
                return [], False

            metrics = WeeklyMetricsRepository(session)
            complete = (metrics.get_health_by_date(current_week) is not None
                        and metrics.get_fitness_by_date(current_week) is not None
                        and metrics.get_cognition_by_date(current_week) is not None)
        return subscriptions, complete

    async def _deliver(self, subscription: PushSubscription, private_key, public_key: str) -> PushOutcome:
        try:
            return await send_push(self.http_client, subscription, private_key, public_key,
                                   self.session_factory, self.config)
        except Exception:
            logger.exception(f"Push delivery to {subscription.endpoint} failed")
            return PushOutcome.TRANSPORT_ERROR
