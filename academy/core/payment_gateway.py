# ============================================================================
# FILE: academy/core/payment_gateway.py
# ============================================================================
"""Stripe payment intent bridge"""

import httpx
import logging

from academy.core.config import settings

logger = logging.getLogger(__name__)


class PaymentGatewayError(Exception):
    """Raised when the payment provider cannot create an intent"""


def to_minor_units(price: float) -> int:
    """Convert a price to integer minor currency units (cents)"""
    return int(round(price * 100))


async def create_payment_intent(price: float) -> str:
    """Create a card payment intent for `price` and return its client secret

    No idempotency key and no retry: a failed call surfaces immediately.
    """
    amount = to_minor_units(price)
    logger.info(f"Creating payment intent for {amount} {settings.PAYMENT_CURRENCY}")

    try:
        async with httpx.AsyncClient(timeout=settings.PAYMENT_TIMEOUT_SECONDS) as http_client:
            response = await http_client.post(
                f"{settings.STRIPE_API_URL}/payment_intents",
                headers={"Authorization": f"Bearer {settings.STRIPE_SECRET_KEY}"},
                data={
                    "amount": amount,
                    "currency": settings.PAYMENT_CURRENCY,
                    "payment_method_types[]": "card",
                },
            )
            response.raise_for_status()
        body = response.json()
    except httpx.HTTPError as e:
        logger.error(f"Stripe API error: {e}")
        raise PaymentGatewayError(str(e)) from e
    except ValueError as e:
        logger.error(f"Stripe returned a non-JSON body: {e}")
        raise PaymentGatewayError("unreadable response") from e

    client_secret = body.get("client_secret") if isinstance(body, dict) else None
    if not client_secret:
        logger.error("Stripe response did not include a client secret")
        raise PaymentGatewayError("missing client secret")
    return client_secret
