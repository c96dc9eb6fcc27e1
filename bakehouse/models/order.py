"""
Order and OrderItem models.

Order = customer order placed on the storefront, paid with a card that is
authorized at checkout and captured only when the bakehouse approves it.
"""

import logging
import uuid

from django.core.exceptions import ValidationError
from django.db import models, transaction
from django.utils.translation import gettext_lazy as _
from simple_history.models import HistoricalRecords

from bakehouse.exceptions import BakehouseError

logger = logging.getLogger(__name__)


class OrderStatus(models.TextChoices):
    NEW = "new", _("New")
    APPROVED = "approved", _("Approved")
    BAKING = "baking", _("Baking")
    READY = "ready", _("Ready")
    COMPLETED = "completed", _("Completed")
    CANCELLED = "cancelled", _("Cancelled")


class PaymentStatus(models.TextChoices):
    PENDING = "pending", _("Pending")
    AUTHORIZED = "authorized", _("Authorized")
    CAPTURED = "captured", _("Captured")
    CANCELLED = "cancelled", _("Cancelled")
    FAILED = "failed", _("Failed")


class FulfillmentWindow(models.TextChoices):
    MORNING = "morning", _("Morning (8am-12pm)")
    AFTERNOON = "afternoon", _("Afternoon (12pm-4pm)")
    EVENING = "evening", _("Evening (4pm-8pm)")


# Fields an admin may edit after checkout
EDITABLE_ORDER_FIELDS = (
    "customer_name",
    "customer_email",
    "customer_phone",
    "delivery_address",
    "delivery_city",
    "delivery_state",
    "delivery_zip",
    "delivery_instructions",
    "fulfillment_date",
    "fulfillment_window",
    "notes",
)


class Order(models.Model):
    """
    Storefront order.

    Status: NEW → APPROVED → BAKING → READY → COMPLETED
              ↘ CANCELLED

    payment_status tracks the card payment independently:
    PENDING → AUTHORIZED → CAPTURED, or CANCELLED / FAILED.
    """

    uuid = models.UUIDField(
        default=uuid.uuid4,
        editable=False,
        unique=True,
        verbose_name=_("UUID"),
    )

    # Customer
    customer_name = models.CharField(max_length=200, verbose_name=_("Customer name"))
    customer_email = models.EmailField(verbose_name=_("Customer email"))
    customer_phone = models.CharField(max_length=50, blank=True, verbose_name=_("Customer phone"))

    # Delivery
    delivery_address = models.CharField(max_length=255, verbose_name=_("Delivery address"))
    delivery_city = models.CharField(max_length=100, verbose_name=_("City"))
    delivery_state = models.CharField(max_length=50, verbose_name=_("State"))
    delivery_zip = models.CharField(max_length=20, verbose_name=_("ZIP"))
    delivery_instructions = models.TextField(blank=True, verbose_name=_("Delivery instructions"))
    location = models.ForeignKey(
        "bakehouse.Location",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="orders",
        verbose_name=_("Location"),
    )

    fulfillment_date = models.DateField(db_index=True, verbose_name=_("Fulfillment date"))
    fulfillment_window = models.CharField(
        max_length=20,
        choices=FulfillmentWindow.choices,
        verbose_name=_("Fulfillment window"),
    )

    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.NEW,
        db_index=True,
        verbose_name=_("Status"),
    )

    # Money
    subtotal = models.DecimalField(max_digits=10, decimal_places=2, verbose_name=_("Subtotal"))
    total = models.DecimalField(max_digits=10, decimal_places=2, verbose_name=_("Total"))

    # Payment
    payment_intent_id = models.CharField(
        max_length=255,
        blank=True,
        db_index=True,
        verbose_name=_("Payment intent"),
    )
    payment_status = models.CharField(
        max_length=20,
        choices=PaymentStatus.choices,
        default=PaymentStatus.PENDING,
        verbose_name=_("Payment status"),
    )

    notes = models.TextField(blank=True, verbose_name=_("Notes"))

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, db_index=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    # History
    history = HistoricalRecords()

    class Meta:
        db_table = "bakehouse_order"
        verbose_name = _("Order")
        verbose_name_plural = _("Orders")
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:
        return f"Order {self.pk} ({self.customer_name})"

    # ══════════════════════════════════════════════════════════════
    # BUSINESS LOGIC
    # ══════════════════════════════════════════════════════════════

    def set_status(self, status: str, actor: str = ""):
        """
        Change the order status.

        Approving captures the authorized payment and issues the invoice.
        Cancelling voids a payment that was not captured yet.
        Any other known status is stored as is.
        """
        if status not in OrderStatus.values:
            raise BakehouseError(
                "INVALID_STATUS",
                message=f"Invalid status: {status}",
                requested=status,
                allowed=list(OrderStatus.values),
            )

        if status == OrderStatus.APPROVED:
            return self.approve(actor)
        if status == OrderStatus.CANCELLED:
            return self.cancel(actor)

        previous = self.status
        self.status = status
        self.save(update_fields=["status", "updated_at"])
        logger.info(
            f"Order {self.pk}: {previous} -> {status}",
            extra={"order": self.pk, "status": status},
        )

    def approve(self, actor: str = ""):
        """
        Approve the order.

        Behavior:
            - Captures the payment intent (skipped when already captured)
            - A refused capture raises CAPTURE_FAILED and leaves the order untouched
            - Issues the invoice once per order
            - Emits 'order_approved'
        """
        from bakehouse.conf import get_payment_backend
        from bakehouse.models.invoice import Invoice

        if self.status == OrderStatus.CANCELLED:
            raise ValidationError(_("Cancelled orders cannot be approved"))

        if self.payment_intent_id and self.payment_status != PaymentStatus.CAPTURED:
            result = get_payment_backend().capture(self.payment_intent_id)
            if not result.success:
                logger.warning(
                    f"Order {self.pk} not approved: capture failed",
                    extra={
                        "order": self.pk,
                        "payment_intent": self.payment_intent_id,
                        "error": result.message,
                    },
                )
                raise BakehouseError(
                    "CAPTURE_FAILED",
                    message="Failed to capture payment",
                    payment_intent=self.payment_intent_id,
                    error=result.message,
                )
            self.payment_status = PaymentStatus.CAPTURED

        with transaction.atomic():
            self.status = OrderStatus.APPROVED
            self.save(update_fields=["status", "payment_status", "updated_at"])
            invoice = Invoice.create_for_order(self)

            from bakehouse.signals import order_approved

            order_approved.send(
                sender=self.__class__, order=self, invoice=invoice, actor=actor
            )

        logger.info(
            f"Order {self.pk} approved (invoice {invoice.invoice_number})",
            extra={"order": self.pk, "invoice": invoice.invoice_number},
        )
        return invoice

    def cancel(self, actor: str = ""):
        """
        Cancel the order.

        An uncaptured payment is voided. A provider failure is logged and
        the cancellation still goes through.
        """
        from bakehouse.conf import get_payment_backend

        if self.payment_intent_id and self.payment_status not in (
            PaymentStatus.CAPTURED,
            PaymentStatus.CANCELLED,
        ):
            result = get_payment_backend().cancel(self.payment_intent_id)
            if result.success:
                self.payment_status = PaymentStatus.CANCELLED
            else:
                logger.error(
                    f"Failed to cancel payment intent {self.payment_intent_id}",
                    extra={
                        "order": self.pk,
                        "payment_intent": self.payment_intent_id,
                        "error": result.message,
                    },
                )

        self.status = OrderStatus.CANCELLED
        self.save(update_fields=["status", "payment_status", "updated_at"])

        from bakehouse.signals import order_cancelled

        order_cancelled.send(sender=self.__class__, order=self, actor=actor)

        logger.info(f"Order {self.pk} cancelled", extra={"order": self.pk})

    def update_details(self, **fields):
        """Update customer, delivery and notes fields. Other keys are rejected."""
        unknown = set(fields) - set(EDITABLE_ORDER_FIELDS)
        if unknown:
            raise ValidationError(
                _(f"Fields cannot be edited: {', '.join(sorted(unknown))}")
            )
        for name, value in fields.items():
            setattr(self, name, value)
        self.save(update_fields=[*fields, "updated_at"])

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items.all())


class OrderItem(models.Model):
    """One product line of an order, priced at checkout time."""

    order = models.ForeignKey(
        Order,
        on_delete=models.CASCADE,
        related_name="items",
        verbose_name=_("Order"),
    )
    product = models.ForeignKey(
        "bakehouse.Product",
        on_delete=models.PROTECT,
        related_name="order_items",
        verbose_name=_("Product"),
    )
    quantity = models.PositiveIntegerField(verbose_name=_("Quantity"))
    unit_price = models.DecimalField(max_digits=10, decimal_places=2, verbose_name=_("Unit price"))
    total = models.DecimalField(max_digits=10, decimal_places=2, verbose_name=_("Total"))

    class Meta:
        db_table = "bakehouse_order_item"
        verbose_name = _("Order item")
        verbose_name_plural = _("Order items")
        ordering = ["order", "id"]

    def __str__(self) -> str:
        return f"{self.product} x{self.quantity}"
