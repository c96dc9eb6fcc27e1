"""
Bakehouse Adapters.

Implementations of protocols for external systems.
Adapters are loaded by dotted path (see bakehouse.conf.get_payment_backend),
so the stripe SDK is only imported when the Stripe backend is configured.
"""
