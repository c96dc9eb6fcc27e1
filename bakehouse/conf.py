"""
Bakehouse Settings.

Supports two formats (dict takes priority):

    # Option 1: Dict
    BAKEHOUSE = {
        "PAYMENT_BACKEND": "bakehouse.adapters.stripe.StripePaymentBackend",
        "STRIPE_SECRET_KEY": "sk_live_...",
    }

    # Option 2: Flat
    BAKEHOUSE_PAYMENT_BACKEND = "bakehouse.adapters.fake.FakePaymentBackend"
    BAKEHOUSE_CURRENCY = "usd"

All settings have sensible defaults; only Stripe keys are needed in production.
"""

import threading
from decimal import Decimal

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


# ── Defaults ──

DEFAULTS = {
    "PAYMENT_BACKEND": "bakehouse.adapters.stripe.StripePaymentBackend",
    "STRIPE_SECRET_KEY": "",
    "STRIPE_WEBHOOK_SECRET": "",
    "STRIPE_API_VERSION": None,
    "CURRENCY": "usd",
    "TAX_RATE": Decimal("0"),
    "INVOICE_PREFIX": "INV",
    "DEFAULT_ACTOR": "admin",
    "BATCH_PAGE_SIZE": 50,
    "ACTIVITY_LOG_LIMIT": 50,
    "RECENT_ACTIVITY_LIMIT": 20,
    "RECENT_ORDERS_DAYS": 30,
}


# ── Accessors ──

_sentinel = object()


def get_setting(name, default=_sentinel):
    """
    Get a bakehouse setting.

    Looks up in order:
    1. BAKEHOUSE dict (e.g. BAKEHOUSE = {"CURRENCY": "usd"})
    2. Flat setting (e.g. BAKEHOUSE_CURRENCY = "usd")
    3. DEFAULTS
    """
    bakehouse_dict = getattr(settings, "BAKEHOUSE", {})
    if name in bakehouse_dict:
        return bakehouse_dict[name]

    flat_value = getattr(settings, f"BAKEHOUSE_{name}", _sentinel)
    if flat_value is not _sentinel:
        return flat_value

    if default is not _sentinel:
        return default

    return DEFAULTS.get(name)


_payment_backend_lock = threading.Lock()
_payment_backend_instance = None


def get_payment_backend():
    """
    Return the configured payment backend instance.

    The payment backend authorizes card payments at checkout and
    captures or voids them when the bakehouse approves or cancels an order.

    Raises:
        ImproperlyConfigured: If PAYMENT_BACKEND is empty or cannot be imported
    """
    global _payment_backend_instance

    if _payment_backend_instance is None:
        with _payment_backend_lock:
            if _payment_backend_instance is None:  # double-checked
                from django.utils.module_loading import import_string

                path = get_setting("PAYMENT_BACKEND")
                if not path:
                    raise ImproperlyConfigured(
                        "BAKEHOUSE['PAYMENT_BACKEND'] must be configured. "
                        "Example: 'bakehouse.adapters.stripe.StripePaymentBackend'"
                    )
                try:
                    backend_class = import_string(path)
                except ImportError as e:
                    raise ImproperlyConfigured(
                        f"Failed to import payment backend '{path}': {e}"
                    ) from e
                _payment_backend_instance = backend_class()

    return _payment_backend_instance


def reset_payment_backend() -> None:
    """Reset singleton (for tests)."""
    global _payment_backend_instance
    _payment_backend_instance = None
