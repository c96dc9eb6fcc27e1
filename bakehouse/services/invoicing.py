"""
Invoicing service -- thin wrappers over Invoice.
"""

from bakehouse.models import Invoice, Order


class BakehouseInvoicing:
    @classmethod
    def issue_invoice(cls, order: Order) -> Invoice:
        """Delegates to Invoice.create_for_order() (idempotent per order)."""
        return Invoice.create_for_order(order)

    @classmethod
    def set_invoice_status(cls, invoice: Invoice, status: str) -> Invoice:
        invoice.set_status(status)
        invoice.refresh_from_db()
        return invoice
