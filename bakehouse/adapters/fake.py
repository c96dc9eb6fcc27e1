"""
Fake Payment Backend -- in-memory card payments.

Use this adapter for development or testing when no Stripe account is
available. Every authorization succeeds; intents listed in ``fail_on``
refuse capture and cancel.

Configuration:
    BAKEHOUSE = {
        "PAYMENT_BACKEND": "bakehouse.adapters.fake.FakePaymentBackend",
    }

Webhook payloads are plain JSON in Stripe's event shape; the signature
must equal the configured webhook secret.
"""

from __future__ import annotations

import itertools
import json
from decimal import Decimal

from bakehouse.exceptions import BakehouseError
from bakehouse.protocols.payment import (
    PaymentEvent,
    PaymentIntentResult,
    PaymentResult,
    amount_in_cents,
)


class FakePaymentBackend:
    """
    In-memory implementation of the PaymentBackend protocol.

    Keeps intents in ``intents`` (id -> dict) so tests can inspect
    what was authorized, captured or cancelled.
    """

    def __init__(self):
        self._counter = itertools.count(1)
        self.intents: dict[str, dict] = {}
        self.fail_on: set[str] = set()

    def authorize(
        self,
        amount: Decimal,
        currency: str,
        metadata: dict[str, str] | None = None,
    ) -> PaymentIntentResult:
        intent_id = f"pi_fake_{next(self._counter)}"
        self.intents[intent_id] = {
            "amount": amount_in_cents(amount),
            "currency": currency,
            "capture_method": "manual",
            "metadata": dict(metadata or {}),
            "status": "requires_capture",
        }
        return PaymentIntentResult(
            intent_id=intent_id,
            client_secret=f"{intent_id}_secret",
            amount=self.intents[intent_id]["amount"],
            currency=currency,
            status="requires_capture",
        )

    def _transition(self, intent_id: str, status: str) -> PaymentResult:
        if intent_id in self.fail_on or intent_id not in self.intents:
            return PaymentResult(
                success=False,
                intent_id=intent_id,
                message=f"No such payment_intent: '{intent_id}'",
            )
        self.intents[intent_id]["status"] = status
        return PaymentResult(success=True, intent_id=intent_id, status=status)

    def capture(self, intent_id: str) -> PaymentResult:
        return self._transition(intent_id, "succeeded")

    def cancel(self, intent_id: str) -> PaymentResult:
        return self._transition(intent_id, "canceled")

    def parse_event(self, payload: bytes, signature: str, secret: str) -> PaymentEvent:
        if signature != secret:
            raise BakehouseError("WEBHOOK_INVALID", message="Invalid signature")
        try:
            event = json.loads(payload)
            obj = event["data"]["object"]
            return PaymentEvent(
                type=event["type"],
                intent_id=obj.get("id"),
                data={"status": obj.get("status")},
            )
        except (ValueError, KeyError, TypeError) as e:
            raise BakehouseError("WEBHOOK_INVALID", message="Invalid payload") from e
