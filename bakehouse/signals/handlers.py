"""
Bakehouse Signal Handlers.

Write the activity log for every announced state change.

This module is imported in apps.py to register handlers.
"""

import logging

from django.dispatch import receiver

from bakehouse.conf import get_setting
from bakehouse.models import ActivityLog
from bakehouse.signals import (
    batch_completed,
    batch_started,
    freezer_stocked,
    order_approved,
    order_cancelled,
)

logger = logging.getLogger(__name__)


def _actor(actor: str) -> str:
    return actor or get_setting("DEFAULT_ACTOR")


@receiver(batch_started)
def log_batch_started(sender, batch, actor="", **kwargs):
    ActivityLog.record(
        "batch.started",
        "batch",
        batch.pk,
        details={"shift": batch.shift},
        actor=_actor(actor),
    )


@receiver(batch_completed)
def log_batch_completed(sender, batch, items, deductions, actor="", **kwargs):
    """Runs inside the completion transaction: the entry rolls back with it."""
    ActivityLog.record(
        "batch.completed",
        "batch",
        batch.pk,
        details={"items": items, "deductions": deductions},
        actor=_actor(actor),
    )


@receiver(order_approved)
def log_order_approved(sender, order, invoice=None, actor="", **kwargs):
    ActivityLog.record(
        "order.approved",
        "order",
        order.pk,
        details={
            "payment_intent_id": order.payment_intent_id or None,
            "invoice_number": invoice.invoice_number if invoice else None,
        },
        actor=_actor(actor),
    )


@receiver(order_cancelled)
def log_order_cancelled(sender, order, actor="", **kwargs):
    ActivityLog.record(
        "order.cancelled",
        "order",
        order.pk,
        details={"payment_status": order.payment_status},
        actor=_actor(actor),
    )


@receiver(freezer_stocked)
def log_freezer_stocked(sender, stock, actor="", **kwargs):
    ActivityLog.record(
        "freezer.stocked",
        "freezer_stock",
        stock.pk,
        details={"product_id": stock.product_id, "quantity": stock.quantity},
        actor=_actor(actor),
    )
    logger.debug(f"Freezer stocked: {stock}")
