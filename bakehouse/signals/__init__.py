"""
Bakehouse Signals.

State changes are announced via signals so the audit trail (and any
other listener) stays decoupled from the models.

Signals:
    batch_started: Batch moved to in_progress
    batch_completed: Batch finished, pantry deducted and freezer stocked
    order_approved: Order approved, payment captured and invoice issued
    order_cancelled: Order cancelled (payment voided when possible)
    freezer_stocked: Stock entered in the freezer by hand
"""

from django.dispatch import Signal

# Sent by Batch.start()
# Args: batch, actor
batch_started = Signal()

# Sent by Batch.complete(), inside the completion transaction
# Args: batch, items (list of {product_id, quantity}),
#       deductions (list of {ingredient_id, quantity}), actor
batch_completed = Signal()

# Sent by Order.approve()
# Args: order, invoice, actor
order_approved = Signal()

# Sent by Order.cancel()
# Args: order, actor
order_cancelled = Signal()

# Sent when stock is entered manually
# Args: stock, actor
freezer_stocked = Signal()

__all__ = [
    "batch_started",
    "batch_completed",
    "order_approved",
    "order_cancelled",
    "freezer_stocked",
]
