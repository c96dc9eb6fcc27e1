"""
Payment Backend Protocol.

Defines the interface the bakehouse uses to take card payments.

Orders are paid with manual capture:
    authorize()  →  at checkout, funds are held on the card
    capture()    →  when the bakehouse approves the order
    cancel()     →  when the order is cancelled before capture
    parse_event() → provider webhooks (failed/canceled intents)
"""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Protocol, runtime_checkable


def amount_in_cents(amount: Decimal | int | float) -> int:
    """Convert a dollar amount to the smallest currency unit."""
    if not isinstance(amount, Decimal):
        amount = Decimal(str(amount))
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


# ══════════════════════════════════════════════════════════════
# DATA TYPES
# ══════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class PaymentIntentResult:
    """Payment authorized at checkout."""

    intent_id: str
    client_secret: str
    amount: int  # cents
    currency: str
    status: str = "requires_payment_method"


@dataclass(frozen=True)
class PaymentResult:
    """Outcome of a capture or cancel call."""

    success: bool
    intent_id: str
    status: str | None = None
    message: str | None = None


@dataclass(frozen=True)
class PaymentEvent:
    """Verified webhook event."""

    type: str
    intent_id: str | None = None
    data: dict[str, Any] = field(default_factory=dict)


# ══════════════════════════════════════════════════════════════
# PROTOCOL
# ══════════════════════════════════════════════════════════════


@runtime_checkable
class PaymentBackend(Protocol):
    """
    Protocol for card payment providers.

    Implementations:
        - bakehouse.adapters.stripe.StripePaymentBackend
        - bakehouse.adapters.fake.FakePaymentBackend (development, tests)
    """

    def authorize(
        self,
        amount: Decimal,
        currency: str,
        metadata: dict[str, str] | None = None,
    ) -> PaymentIntentResult:
        """
        Create a manual-capture payment intent.

        Raises:
            BakehouseError('PAYMENT_FAILED') if the provider refuses
        """
        ...

    def capture(self, intent_id: str) -> PaymentResult:
        """Capture an authorized payment. Never raises for provider errors."""
        ...

    def cancel(self, intent_id: str) -> PaymentResult:
        """Void an uncaptured payment. Never raises for provider errors."""
        ...

    def parse_event(self, payload: bytes, signature: str, secret: str) -> PaymentEvent:
        """
        Verify a webhook signature and parse the event.

        Raises:
            BakehouseError('WEBHOOK_INVALID') on bad payload or signature
        """
        ...
