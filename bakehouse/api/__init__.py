"""
Bakehouse REST API.

Provides DRF views for:
- Storefront: products, locations, checkout, order lookup (public)
- Stripe webhook, health check, session auth
- Console: orders, catalog, pantry, batches, freezer, invoices, activity, stats
"""
