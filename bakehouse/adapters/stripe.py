"""
Stripe Payment Backend.

Card payments through the official Stripe SDK, using manual capture:
the intent is authorized at checkout and captured when the order is approved.

Configuration:
    BAKEHOUSE = {
        "PAYMENT_BACKEND": "bakehouse.adapters.stripe.StripePaymentBackend",
        "STRIPE_SECRET_KEY": "sk_live_...",
        "STRIPE_WEBHOOK_SECRET": "whsec_...",
    }
"""

from __future__ import annotations

import logging
from decimal import Decimal

import stripe
from django.core.exceptions import ImproperlyConfigured

from bakehouse.conf import get_setting
from bakehouse.exceptions import BakehouseError
from bakehouse.protocols.payment import (
    PaymentEvent,
    PaymentIntentResult,
    PaymentResult,
    amount_in_cents,
)

logger = logging.getLogger(__name__)


class StripePaymentBackend:
    """
    Stripe implementation of the PaymentBackend protocol.

    Provider errors on capture/cancel are returned as failed PaymentResult
    so callers decide what to do; checkout failures raise PAYMENT_FAILED.
    """

    def __init__(self):
        secret_key = get_setting("STRIPE_SECRET_KEY")
        if not secret_key:
            raise ImproperlyConfigured(
                "BAKEHOUSE['STRIPE_SECRET_KEY'] is required by StripePaymentBackend."
            )

        stripe.api_key = secret_key
        api_version = get_setting("STRIPE_API_VERSION")
        if api_version:
            stripe.api_version = api_version

        logger.info("StripePaymentBackend initialized")

    def authorize(
        self,
        amount: Decimal,
        currency: str,
        metadata: dict[str, str] | None = None,
    ) -> PaymentIntentResult:
        cents = amount_in_cents(amount)
        try:
            intent = stripe.PaymentIntent.create(
                amount=cents,
                currency=currency,
                capture_method="manual",
                metadata=metadata or {},
            )
        except stripe.StripeError as e:
            logger.error(
                f"Stripe: failed to create PaymentIntent - {e}",
                extra={"amount": cents, "currency": currency},
            )
            raise BakehouseError(
                "PAYMENT_FAILED",
                message="Failed to create payment",
                error=getattr(e, "user_message", None) or str(e),
            ) from e

        logger.info(
            f"Stripe: PaymentIntent created - {intent.id} - status={intent.status}",
            extra={"payment_intent": intent.id, "amount": cents},
        )

        return PaymentIntentResult(
            intent_id=intent.id,
            client_secret=intent.client_secret,
            amount=intent.amount,
            currency=intent.currency,
            status=intent.status,
        )

    def capture(self, intent_id: str) -> PaymentResult:
        try:
            intent = stripe.PaymentIntent.capture(intent_id)
        except stripe.StripeError as e:
            logger.error(f"Stripe: capture failed for {intent_id} - {e}")
            return PaymentResult(success=False, intent_id=intent_id, message=str(e))

        logger.info(f"Stripe: captured {intent_id} - status={intent.status}")
        return PaymentResult(success=True, intent_id=intent_id, status=intent.status)

    def cancel(self, intent_id: str) -> PaymentResult:
        try:
            intent = stripe.PaymentIntent.cancel(intent_id)
        except stripe.StripeError as e:
            logger.error(f"Stripe: cancel failed for {intent_id} - {e}")
            return PaymentResult(success=False, intent_id=intent_id, message=str(e))

        logger.info(f"Stripe: cancelled {intent_id}")
        return PaymentResult(success=True, intent_id=intent_id, status=intent.status)

    def parse_event(self, payload: bytes, signature: str, secret: str) -> PaymentEvent:
        try:
            event = stripe.Webhook.construct_event(payload, signature, secret)
        except ValueError as e:
            logger.warning(f"Stripe: webhook payload invalid - {e}")
            raise BakehouseError("WEBHOOK_INVALID", message="Invalid payload") from e
        except stripe.SignatureVerificationError as e:
            logger.warning(f"Stripe: webhook signature invalid - {e}")
            raise BakehouseError("WEBHOOK_INVALID", message="Invalid signature") from e

        obj = event["data"]["object"]
        return PaymentEvent(
            type=event["type"],
            intent_id=obj.get("id"),
            data={"status": obj.get("status")},
        )
