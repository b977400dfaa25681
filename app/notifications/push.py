"""
Web Push delivery for a single subscription.

A reminder push carries no payload: the service worker shows a fixed
"log this week's metrics" notification on any push event, so the request
needs no message encryption, only VAPID authentication.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Callable

import httpx
from cryptography.hazmat.primitives.asymmetric import ec
from sqlmodel import Session

from app.core.config import Settings
from app.db.repositories.push_subscription import PushSubscriptionRepository
from app.models.push_subscription import PushSubscription
from app.notifications.vapid import VapidError, create_vapid_token, push_audience, vapid_headers

logger = logging.getLogger(__name__)

# Status codes with which a push service declares a subscription permanently dead.
STALE_STATUS_CODES = frozenset({404, 410})


class PushOutcome(str, Enum):
    """Result of one delivery attempt."""

    DELIVERED = "delivered"
    STALE = "stale"
    REJECTED = "rejected"
    TRANSPORT_ERROR = "transport_error"
    INVALID = "invalid"


def _purge(session_factory: Callable[[], Session], endpoint: str) -> None:
    with session_factory() as session:
        PushSubscriptionRepository(session).delete_by_endpoint(endpoint)


async def send_push(
    client: httpx.AsyncClient,
    subscription: PushSubscription,
    private_key: ec.EllipticCurvePrivateKey,
    public_key: str,
    session_factory: Callable[[], Session],
    config: Settings,
) -> PushOutcome:
    """Deliver one empty push message and react to the push service's answer.

    404/410 purge the subscription on a worker thread so a locked database
    never stalls the event loop; any other error status or a transport
    failure is only logged and the subscription is kept.
    """
    endpoint = subscription.endpoint

    try:
        token = create_vapid_token(push_audience(endpoint), private_key, config.VAPID_SUBJECT)
    except VapidError as exc:
        logger.error(f"Cannot sign push for {endpoint}: {exc}")
        return PushOutcome.INVALID

    headers = {"TTL": str(config.PUSH_TTL_SECONDS)}
    headers.update(vapid_headers(token, public_key, config.VAPID_AUTH_SCHEME))

    try:
        response = await client.post(endpoint, headers=headers, content=b"")
    except httpx.HTTPError as exc:
        logger.warning(f"Failed to send push to {endpoint}: {exc!r}")
        return PushOutcome.TRANSPORT_ERROR

    if response.status_code in STALE_STATUS_CODES:
        logger.info(f"Push subscription stale ({response.status_code}), purging: {endpoint}")
        await asyncio.to_thread(_purge, session_factory, endpoint)
        return PushOutcome.STALE

    if response.status_code >= 400:
        logger.warning(f"Push service returned error {response.status_code} for {endpoint}")
        return PushOutcome.REJECTED

    return PushOutcome.DELIVERED
