# services/webhook_signature.py
"""
HMAC-SHA256 verification of inbound ElevenLabs webhooks.

The digest is computed over the raw request bytes, before any JSON
parsing, and compared in constant time. Anything unexpected fails closed.
"""
from __future__ import annotations

import hashlib
import hmac
import logging
from collections.abc import Mapping

logger = logging.getLogger(__name__)

# Header names seen across provider versions, in lookup order
SIGNATURE_HEADERS: tuple[str, ...] = (
    "x-elevenlabs-signature",
    "elevenlabs-signature",
)


def get_signature_header(headers: Mapping[str, str]) -> str | None:
    """Return the first non-empty signature header value, if any."""
    for name in SIGNATURE_HEADERS:
        value = headers.get(name)
        if value:
            return value.strip()
    return None


def compute_signature(raw_body: bytes, secret: str) -> str:
    return hmac.new(secret.encode("utf-8"), raw_body, hashlib.sha256).hexdigest()


def verify_signature(raw_body: bytes, signature: str | None, secret: str | None) -> bool:
    """True only if `signature` is the hex HMAC-SHA256 of `raw_body` under `secret`."""
    if not signature:
        logger.warning("Webhook rejected: missing signature header")
        return False
    if not secret:
        logger.error("Webhook rejected: no webhook secret configured")
        return False

    try:
        expected = compute_signature(raw_body, secret)
        valid = hmac.compare_digest(expected.encode("ascii"), signature.lower().encode("ascii"))
    except Exception as exc:
        logger.warning("Webhook rejected: signature check raised %s", exc)
        return False

    if not valid:
        logger.warning("Webhook rejected: HMAC signature mismatch")
    return valid
