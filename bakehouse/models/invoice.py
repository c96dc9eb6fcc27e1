"""
Invoice and InvoiceItem models.

An invoice is issued when an order is approved. It snapshots the customer,
delivery address and line prices so later catalog edits don't change it.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal

from django.db import models, transaction
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from bakehouse.exceptions import BakehouseError

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


class InvoiceStatus(models.TextChoices):
    DRAFT = "draft", _("Draft")
    SENT = "sent", _("Sent")
    PAID = "paid", _("Paid")
    CANCELLED = "cancelled", _("Cancelled")


class Invoice(models.Model):
    """
    Customer invoice.

    invoice_number format: {INVOICE_PREFIX}-{YYYY}-{NNNN} (e.g. INV-2026-0001),
    numbered per year from an atomic sequence.
    """

    invoice_number = models.CharField(
        max_length=50,
        unique=True,
        editable=False,
        verbose_name=_("Invoice number"),
    )
    order = models.OneToOneField(
        "bakehouse.Order",
        on_delete=models.PROTECT,
        related_name="invoice",
        verbose_name=_("Order"),
    )

    # Snapshot
    customer_name = models.CharField(max_length=200, verbose_name=_("Customer name"))
    customer_email = models.EmailField(verbose_name=_("Customer email"))
    customer_phone = models.CharField(max_length=50, blank=True, verbose_name=_("Customer phone"))
    delivery_address = models.CharField(max_length=255, verbose_name=_("Delivery address"))
    delivery_city = models.CharField(max_length=100, verbose_name=_("City"))
    delivery_state = models.CharField(max_length=50, verbose_name=_("State"))
    delivery_zip = models.CharField(max_length=20, verbose_name=_("ZIP"))

    subtotal = models.DecimalField(max_digits=10, decimal_places=2, verbose_name=_("Subtotal"))
    tax = models.DecimalField(
        max_digits=10, decimal_places=2, default=Decimal("0"), verbose_name=_("Tax")
    )
    total = models.DecimalField(max_digits=10, decimal_places=2, verbose_name=_("Total"))

    status = models.CharField(
        max_length=20,
        choices=InvoiceStatus.choices,
        default=InvoiceStatus.DRAFT,
        db_index=True,
        verbose_name=_("Status"),
    )
    issued_at = models.DateTimeField(null=True, blank=True, verbose_name=_("issued at"))
    paid_at = models.DateTimeField(null=True, blank=True, verbose_name=_("paid at"))

    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    class Meta:
        db_table = "bakehouse_invoice"
        verbose_name = _("Invoice")
        verbose_name_plural = _("Invoices")
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:
        return self.invoice_number

    @classmethod
    def next_number(cls, year: int | None = None) -> str:
        """Generate the next invoice number for a year."""
        from bakehouse.conf import get_setting
        from bakehouse.models.sequence import CodeSequence

        year = year or timezone.now().year
        prefix = f"{get_setting('INVOICE_PREFIX')}-{year}"
        return f"{prefix}-{CodeSequence.next_value(prefix):04d}"

    @classmethod
    def create_for_order(cls, order) -> "Invoice":
        """
        Issue the invoice of an order.

        Returns the existing invoice when the order already has one.
        Tax is TAX_RATE applied to the order subtotal.
        """
        from bakehouse.conf import get_setting

        existing = cls.objects.filter(order=order).first()
        if existing is not None:
            return existing

        tax_rate = Decimal(str(get_setting("TAX_RATE") or 0))
        tax = (order.subtotal * tax_rate).quantize(CENTS, rounding=ROUND_HALF_UP)

        with transaction.atomic():
            invoice = cls.objects.create(
                invoice_number=cls.next_number(),
                order=order,
                customer_name=order.customer_name,
                customer_email=order.customer_email,
                customer_phone=order.customer_phone,
                delivery_address=order.delivery_address,
                delivery_city=order.delivery_city,
                delivery_state=order.delivery_state,
                delivery_zip=order.delivery_zip,
                subtotal=order.subtotal,
                tax=tax,
                total=order.subtotal + tax,
                status=InvoiceStatus.SENT,
                issued_at=timezone.now(),
            )
            InvoiceItem.objects.bulk_create(
                [
                    InvoiceItem(
                        invoice=invoice,
                        product=item.product,
                        product_name=item.product.name,
                        quantity=item.quantity,
                        unit_price=item.unit_price,
                        total=item.total,
                    )
                    for item in order.items.select_related("product")
                ]
            )

        logger.info(
            f"Invoice {invoice.invoice_number} issued for order {order.pk}",
            extra={"invoice": invoice.invoice_number, "order": order.pk},
        )
        return invoice

    def set_status(self, status: str):
        """Change the status. Setting PAID stamps paid_at."""
        if status not in InvoiceStatus.values:
            raise BakehouseError(
                "INVALID_STATUS",
                message=f"Invalid status: {status}",
                requested=status,
                allowed=list(InvoiceStatus.values),
            )

        self.status = status
        if status == InvoiceStatus.PAID:
            self.paid_at = timezone.now()
        self.save(update_fields=["status", "paid_at", "updated_at"])


class InvoiceItem(models.Model):
    invoice = models.ForeignKey(
        Invoice,
        on_delete=models.CASCADE,
        related_name="items",
        verbose_name=_("Invoice"),
    )
    product = models.ForeignKey(
        "bakehouse.Product",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
        verbose_name=_("Product"),
    )
    product_name = models.CharField(max_length=200, verbose_name=_("Product name"))
    quantity = models.PositiveIntegerField(verbose_name=_("Quantity"))
    unit_price = models.DecimalField(max_digits=10, decimal_places=2, verbose_name=_("Unit price"))
    total = models.DecimalField(max_digits=10, decimal_places=2, verbose_name=_("Total"))

    class Meta:
        db_table = "bakehouse_invoice_item"
        verbose_name = _("Invoice item")
        verbose_name_plural = _("Invoice items")
        ordering = ["invoice", "id"]

    def __str__(self) -> str:
        return f"{self.product_name} x{self.quantity}"
