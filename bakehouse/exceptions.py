"""
Bakehouse Exceptions.

All bakehouse business errors are wrapped in BakehouseError for consistent handling.
"""

from typing import Any


class BakehouseError(Exception):
    """
    Base exception for all Bakehouse errors.

    Usage:
        raise BakehouseError('INVALID_STATUS', current='completed', requested='planned')

    Attributes:
        code: Error code (INVALID_STATUS, INSUFFICIENT_INGREDIENTS, etc.)
        details: Additional context as keyword arguments
    """

    def __init__(self, code: str, message: str | None = None, **details: Any):
        self.code = code
        self.message = message
        self.details = details
        super().__init__(message or (f"{code}: {details}" if details else code))

    def as_dict(self) -> dict:
        """Return error as dictionary for API responses."""
        payload = {"code": self.code, **self.details}
        payload["message"] = self.message or self.code
        return payload

    def __str__(self) -> str:
        if self.message:
            return self.message
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"BakehouseError({self.code}: {details_str})"
        return f"BakehouseError({self.code})"


# Common error codes
# INVALID_STATUS: Status value unknown or transition not allowed
# INVALID_QUANTITY: Quantity out of range
# PRODUCT_NOT_AVAILABLE: Product missing or inactive at checkout
# INSUFFICIENT_INGREDIENTS: Pantry cannot cover a batch (details: shortages)
# PAYMENT_FAILED: Provider refused to create the payment intent
# CAPTURE_FAILED: Provider refused to capture an authorized payment
# WEBHOOK_INVALID: Webhook payload or signature rejected
# PANTRY_NOT_EMPTY: Seeding requested on a stocked pantry
# PRODUCT_IN_USE: Product still referenced by orders or batches
