"""Tests for single-subscription push delivery.

The push service is an ``httpx.MockTransport``; nothing leaves the process.
"""

import httpx
import pytest
from cryptography.hazmat.primitives.asymmetric import ec

from app.core.config import Settings
from app.db.repositories.push_subscription import PushSubscriptionRepository
from app.models.push_subscription import PushSubscription
from app.notifications.push import PushOutcome, send_push
from app.notifications.vapid import public_key_b64
from tests.conftest import run_with_loop_gap

ENDPOINT = "https://push.example.com/send/abc123"


@pytest.fixture
def private_key():
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture
def config() -> Settings:
    return Settings(VAPID_SUBJECT="mailto:ops@example.com", PUSH_TTL_SECONDS=30, VAPID_AUTH_SCHEME="webpush")


@pytest.fixture
def stored_subscription(session_factory) -> PushSubscription:
    with session_factory() as session:
        subscription, _ = PushSubscriptionRepository(session).upsert(
            PushSubscription(endpoint=ENDPOINT, p256dh="BPub", auth="secret")
        )
        return subscription


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def _remaining(session_factory) -> list[str]:
    with session_factory() as session:
        return [s.endpoint for s in PushSubscriptionRepository(session).get_all()]


class TestSendPush:
    @pytest.mark.asyncio
    async def test_delivered(self, stored_subscription, private_key, session_factory, config):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201)

        async with _client(handler) as client:
            outcome = await send_push(client, stored_subscription, private_key,
                                      public_key_b64(private_key), session_factory, config)

        assert outcome == PushOutcome.DELIVERED
        [request] = seen
        assert request.method == "POST"
        assert str(request.url) == ENDPOINT
        assert request.headers["TTL"] == "30"
        assert request.headers["Authorization"].startswith("WebPush ")
        assert request.headers["Crypto-Key"] == f"p256ecdsa={public_key_b64(private_key)}"
        assert request.content == b""
        assert _remaining(session_factory) == [ENDPOINT]

    @pytest.mark.asyncio
    async def test_vapid_scheme_header(self, stored_subscription, private_key, session_factory):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201)

        config = Settings(VAPID_AUTH_SCHEME="vapid")
        async with _client(handler) as client:
            await send_push(client, stored_subscription, private_key, "pub", session_factory, config)

        assert seen[0].headers["Authorization"].startswith("vapid t=")
        assert seen[0].headers["Authorization"].endswith(", k=pub")
        assert "Crypto-Key" not in seen[0].headers

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [404, 410])
    async def test_gone_purges_subscription(self, status, stored_subscription, private_key,
                                            session_factory, config):
        async with _client(lambda request: httpx.Response(status)) as client:
            outcome = await send_push(client, stored_subscription, private_key, "pub", session_factory, config)

        assert outcome == PushOutcome.STALE
        assert _remaining(session_factory) == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 413, 429, 500, 503])
    async def test_other_errors_keep_subscription(self, status, stored_subscription, private_key,
                                                  session_factory, config):
        async with _client(lambda request: httpx.Response(status)) as client:
            outcome = await send_push(client, stored_subscription, private_key, "pub", session_factory, config)

        assert outcome == PushOutcome.REJECTED
        assert _remaining(session_factory) == [ENDPOINT]

    @pytest.mark.asyncio
    async def test_transport_error_keeps_subscription(self, stored_subscription, private_key,
                                                      session_factory, config):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with _client(handler) as client:
            outcome = await send_push(client, stored_subscription, private_key, "pub", session_factory, config)

        assert outcome == PushOutcome.TRANSPORT_ERROR
        assert _remaining(session_factory) == [ENDPOINT]

    @pytest.mark.asyncio
    async def test_invalid_endpoint_is_not_sent(self, private_key, session_factory, config):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        subscription = PushSubscription(endpoint="not-a-url", p256dh="BPub", auth="secret")
        async with _client(handler) as client:
            outcome = await send_push(client, subscription, private_key, "pub", session_factory, config)

        assert outcome == PushOutcome.INVALID

    @pytest.mark.asyncio
    async def test_purge_does_not_block_event_loop(self, stored_subscription, private_key,
                                                   session_factory, slow_session_factory, config):
        async with _client(lambda request: httpx.Response(410)) as client:
            outcome, gap = await run_with_loop_gap(
                send_push(client, stored_subscription, private_key, "pub", slow_session_factory, config)
            )

        assert outcome == PushOutcome.STALE
        assert gap < 0.2
        assert _remaining(session_factory) == []
