"""Stripe checkout session and webhook pass-through endpoint tests."""

import hashlib
import hmac
import json
import time
from types import SimpleNamespace

import stripe
from fastapi.testclient import TestClient

from agent_platform.config import settings
from agent_platform.main import app

WEBHOOK_SECRET = "whsec_test_secret"


def _signed_headers(payload: bytes, secret: str = WEBHOOK_SECRET) -> dict[str, str]:
    timestamp = int(time.time())
    signed = f"{timestamp}.{payload.decode()}".encode()
    signature = hmac.new(secret.encode(), signed, hashlib.sha256).hexdigest()
    return {"Stripe-Signature": f"t={timestamp},v1={signature}", "Content-Type": "application/json"}


def _event_payload(event_type: str) -> bytes:
    return json.dumps(
        {
            "id": "evt_test_1",
            "object": "event",
            "type": event_type,
            "data": {"object": {"id": "cs_test_1", "object": "checkout.session"}},
        }
    ).encode()


def test_create_session_requires_amount_and_currency():
    with TestClient(app) as client:
        r = client.post("/payments/create-session", json={"currency": "usd"})
        assert r.status_code == 400
        assert r.json()["message"] == "Amount and currency are required"
        assert client.post("/payments/create-session", json={"amount": 500}).status_code == 400


def test_create_session_without_secret_key_returns_500(monkeypatch):
    monkeypatch.setattr(settings, "stripe_secret_key", "")
    with TestClient(app) as client:
        r = client.post("/payments/create-session", json={"amount": 500, "currency": "usd"})
        assert r.status_code == 500
        assert r.json()["message"] == "Stripe configuration missing"


def test_create_session_passes_line_item_to_stripe(monkeypatch):
    calls = []

    def fake_create(**kwargs):
        calls.append(kwargs)
        return SimpleNamespace(id="cs_test_123", url="https://checkout.stripe.test/cs_test_123")

    monkeypatch.setattr(settings, "stripe_secret_key", "sk_test_123")
    monkeypatch.setattr(settings, "frontend_url", "https://app.example.test")
    monkeypatch.setattr(stripe.checkout.Session, "create", fake_create)

    with TestClient(app) as client:
        r = client.post("/payments/create-session", json={"amount": 1999, "currency": "eur"})

    assert r.status_code == 200
    assert r.json() == {"sessionId": "cs_test_123", "url": "https://checkout.stripe.test/cs_test_123"}
    [call] = calls
    assert call["api_key"] == "sk_test_123"
    assert call["mode"] == "payment"
    assert call["line_items"][0]["price_data"]["unit_amount"] == 1999
    assert call["line_items"][0]["price_data"]["currency"] == "eur"
    assert call["success_url"] == "https://app.example.test/success"


def test_create_session_reports_stripe_errors(monkeypatch):
    def failing_create(**_kwargs):
        raise stripe.StripeError("card processing unavailable")

    monkeypatch.setattr(settings, "stripe_secret_key", "sk_test_123")
    monkeypatch.setattr(stripe.checkout.Session, "create", failing_create)

    with TestClient(app) as client:
        r = client.post("/payments/create-session", json={"amount": 100, "currency": "usd"})

    assert r.status_code == 500
    assert "card processing unavailable" in r.json()["error"]


def test_webhook_without_secret_returns_500(monkeypatch):
    monkeypatch.setattr(settings, "stripe_webhook_secret", "")
    payload = _event_payload("checkout.session.completed")
    with TestClient(app) as client:
        r = client.post("/payments/webhook", content=payload, headers=_signed_headers(payload))
    assert r.status_code == 500


def test_webhook_rejects_bad_or_missing_signature(monkeypatch):
    monkeypatch.setattr(settings, "stripe_webhook_secret", WEBHOOK_SECRET)
    payload = _event_payload("checkout.session.completed")
    with TestClient(app) as client:
        forged = client.post(
            "/payments/webhook",
            content=payload,
            headers=_signed_headers(payload, secret="whsec_someone_else"),
        )
        assert forged.status_code == 400
        assert forged.text.startswith("Webhook Error:")

        unsigned = client.post("/payments/webhook", content=payload)
        assert unsigned.status_code == 400


def test_webhook_accepts_signed_event(monkeypatch):
    monkeypatch.setattr(settings, "stripe_webhook_secret", WEBHOOK_SECRET)
    with TestClient(app) as client:
        for event_type in ("checkout.session.completed", "payment_intent.payment_failed", "customer.created"):
            payload = _event_payload(event_type)
            r = client.post("/payments/webhook", content=payload, headers=_signed_headers(payload))
            assert r.status_code == 200
            assert r.json() == {"received": True}
