"""Stripe Checkout session creation and webhook verification.

Both helpers are direct pass-throughs to the ``stripe`` SDK; route handlers
map ``IntegrationNotConfigured`` and ``stripe`` errors onto HTTP statuses.
"""

import logging
from typing import Any, Optional

import stripe

from .config import settings
from .errors import IntegrationNotConfigured

logger = logging.getLogger(__name__)

PRODUCT_NAME = "Agent Platform Service"


def create_checkout_session(amount: int, currency: str) -> dict[str, Optional[str]]:
    """Create a one-item card Checkout session; returns its id and hosted URL."""

    if not settings.stripe_secret_key:
        raise IntegrationNotConfigured("STRIPE_SECRET_KEY not configured")
    session = stripe.checkout.Session.create(
        api_key=settings.stripe_secret_key,
        payment_method_types=["card"],
        line_items=[
            {
                "price_data": {
                    "currency": currency,
                    "product_data": {"name": PRODUCT_NAME},
                    "unit_amount": amount,
                },
                "quantity": 1,
            }
        ],
        mode="payment",
        success_url=f"{settings.frontend_url}/success",
        cancel_url=f"{settings.frontend_url}/cancel",
    )
    return {"sessionId": session.id, "url": session.url}


def construct_webhook_event(payload: bytes, signature: Optional[str]) -> Any:
    """Verify the ``Stripe-Signature`` header and parse the event.

    Raises ``ValueError`` for an unparsable payload and
    ``stripe.SignatureVerificationError`` for a missing or bad signature.
    """

    if not settings.stripe_webhook_secret:
        raise IntegrationNotConfigured("Webhook secret not configured")
    if not signature:
        raise stripe.SignatureVerificationError("Missing Stripe-Signature header", signature, payload)
    return stripe.Webhook.construct_event(payload, signature, settings.stripe_webhook_secret)


def handle_webhook_event(event: Any) -> str:
    event_type = event["type"]
    obj = event["data"]["object"]
    if event_type == "checkout.session.completed":
        logger.info("Payment succeeded session=%s", obj.get("id"))
    elif event_type == "payment_intent.payment_failed":
        logger.info("Payment failed payment_intent=%s", obj.get("id"))
    else:
        logger.info("Unhandled Stripe event type %s", event_type)
    return event_type
