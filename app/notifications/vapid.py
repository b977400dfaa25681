"""
VAPID (RFC 8292) application-server identification for Web Push.

The server key is stored as the raw 32-byte P-256 private scalar,
base64url-encoded without padding, which is the format browser tooling
emits.  :func:`decode_private_key` is the only place that key material is
validated; the key object it returns is used both as the key-agreement key
(its public point is the ``applicationServerKey`` the browser subscribed
with) and as the ES256 signing key.  The scalar is identical in both roles.

Token layout::

    base64url({"alg":"ES256","typ":"JWT"})
    . base64url({"aud": <origin>, "exp": <now + 24h>, "sub": "mailto:..."})
    . base64url(r || s)

``r`` and ``s`` are each left-padded to 32 bytes.  JOSE requires this raw
64-byte form, not the DER encoding ECDSA libraries produce by default.
"""

from __future__ import annotations

import base64
import binascii
import datetime
import json
from typing import Optional
from urllib.parse import urlsplit

from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import decode_dss_signature

PRIVATE_KEY_LENGTH = 32
SIGNATURE_COMPONENT_LENGTH = 32
TOKEN_LIFETIME = datetime.timedelta(hours=24)

# Order of the P-256 base point.
P256_ORDER = 0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551

_JWT_HEADER = {"alg": "ES256", "typ": "JWT"}


class VapidError(Exception):
    """Base error for VAPID signing."""


class VapidKeyError(VapidError):
    """The configured private key is missing or not a valid P-256 scalar."""


# ======================================================================
# base64url helpers
# ======================================================================


def b64url_encode(data: bytes) -> str:
    """Unpadded base64url."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(value: str) -> bytes:
    """Decode base64url with or without padding, rejecting stray characters."""
    padded = value + "=" * (-len(value) % 4)
    return base64.b64decode(padded, altchars=b"-_", validate=True)


# ======================================================================
# Keys
# ======================================================================


def decode_private_key(encoded: str) -> ec.EllipticCurvePrivateKey:
    """Turn a stored VAPID private key into a P-256 key object.

    Precondition: ``encoded`` is the base64url form of exactly 32 bytes
    holding a big-endian scalar ``d`` with ``1 <= d < n`` (the P-256 order).

    Raises:
        VapidKeyError: The key is empty, not base64url, the wrong length,
            or outside the valid scalar range.
    """
    if not encoded:
        raise VapidKeyError("VAPID private key is not configured")

    try:
        raw = b64url_decode(encoded.strip())
    except (binascii.Error, ValueError) as exc:
        raise VapidKeyError(f"VAPID private key is not valid base64url: {exc}") from exc

    if len(raw) != PRIVATE_KEY_LENGTH:
        raise VapidKeyError(f"invalid private key length: {len(raw)}")

    scalar = int.from_bytes(raw, "big")
    if not 1 <= scalar < P256_ORDER:
        raise VapidKeyError("private key is not a valid P-256 scalar")

    try:
        return ec.derive_private_key(scalar, ec.SECP256R1())
    except ValueError as exc:
        raise VapidKeyError(f"private key rejected: {exc}") from exc


def encode_private_key(key: ec.EllipticCurvePrivateKey) -> str:
    """Inverse of :func:`decode_private_key`."""
    scalar = key.private_numbers().private_value
    return b64url_encode(scalar.to_bytes(PRIVATE_KEY_LENGTH, "big"))


def public_key_b64(key: ec.EllipticCurvePrivateKey) -> str:
    """Uncompressed public point (65 bytes, ``0x04 || X || Y``) as base64url."""
    point = key.public_key().public_bytes(
        serialization.Encoding.X962,
        serialization.PublicFormat.UncompressedPoint,
    )
    return b64url_encode(point)


# ======================================================================
# Token
# ======================================================================


def push_audience(endpoint: str) -> str:
    """``scheme://host[:port]`` of a push endpoint (the JWT ``aud`` claim)."""
    parts = urlsplit(endpoint)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise VapidError(f"invalid push endpoint URL: {endpoint!r}")
    return f"{parts.scheme}://{parts.netloc}"


def _compact_json(value: dict) -> bytes:
    return json.dumps(value, separators=(",", ":")).encode("utf-8")


def create_vapid_token(
    audience: str,
    key: ec.EllipticCurvePrivateKey,
    subject: str,
    now: Optional[datetime.datetime] = None,
) -> str:
    """Sign a VAPID JWT for ``audience``.

    Args:
        audience: Origin of the push service endpoint.
        key: Key returned by :func:`decode_private_key`.
        subject: Contact URI, e.g. ``mailto:admin@example.com``.
        now: Issue time (defaults to the current UTC time).

    Returns:
        Compact three-segment JWT.
    """
    issued = now or datetime.datetime.now(datetime.timezone.utc)
    payload = {
        "aud": audience,
        "exp": int((issued + TOKEN_LIFETIME).timestamp()),
        "sub": subject,
    }

    unsigned = f"{b64url_encode(_compact_json(_JWT_HEADER))}.{b64url_encode(_compact_json(payload))}"

    der_signature = key.sign(unsigned.encode("ascii"), ec.ECDSA(hashes.SHA256()))
    r, s = decode_dss_signature(der_signature)
    raw_signature = (r.to_bytes(SIGNATURE_COMPONENT_LENGTH, "big")
                     + s.to_bytes(SIGNATURE_COMPONENT_LENGTH, "big"))

    return f"{unsigned}.{b64url_encode(raw_signature)}"


def vapid_headers(token: str, public_key: str, scheme: str = "webpush") -> dict[str, str]:
    """Authentication headers for one push request.

    ``webpush`` sends the token in ``Authorization: WebPush`` and the key in
    ``Crypto-Key``; ``vapid`` uses the single RFC 8292 ``Authorization``
    header.
    """
    if scheme == "vapid":
        return {"Authorization": f"vapid t={token}, k={public_key}"}
    return {
        "Authorization": f"WebPush {token}",
        "Crypto-Key": f"p256ecdsa={public_key}",
    }
