"""
Bakehouse Protocols.

Defines interfaces for external integrations.
"""

from bakehouse.protocols.payment import (
    PaymentBackend,
    PaymentEvent,
    PaymentIntentResult,
    PaymentResult,
    amount_in_cents,
)

__all__ = [
    # Payment Protocol
    "PaymentBackend",
    # Result types
    "PaymentIntentResult",
    "PaymentResult",
    "PaymentEvent",
    "amount_in_cents",
]
