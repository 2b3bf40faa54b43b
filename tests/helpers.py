# tests/helpers.py
from __future__ import annotations

import hashlib
import hmac
import json

import jwt

WEBHOOK_SECRET = "whsec_test_secret"
JWT_SECRET = "test-jwt-secret-for-hs256-signing-0001"


def sign(body: bytes, secret: str = WEBHOOK_SECRET) -> str:
    return hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()


def webhook_body(payload: dict) -> bytes:
    return json.dumps(payload).encode("utf-8")


def auth_headers(user_id: str = "user_123") -> dict[str, str]:
    token = jwt.encode({"sub": user_id}, JWT_SECRET, algorithm="HS256")
    return {"Authorization": f"Bearer {token}"}
