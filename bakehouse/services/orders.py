"""
Order service -- checkout, status changes, payment webhooks.

All methods are @classmethod so the mixin can be composed into Bakehouse
without instantiation.
"""

import logging
from decimal import Decimal

from django.db import transaction

from bakehouse.conf import get_payment_backend, get_setting
from bakehouse.exceptions import BakehouseError
from bakehouse.models import (
    Location,
    Order,
    OrderItem,
    OrderStatus,
    PaymentStatus,
    Product,
)
from bakehouse.results import OrderPlacement

logger = logging.getLogger(__name__)

CUSTOMER_FIELDS = (
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


class BakehouseOrders:
    """Storefront orders and their card payments."""

    @classmethod
    def place_order(cls, data: dict) -> OrderPlacement:
        """
        Place a storefront order.

        Args:
            data: customer and delivery fields, optional ``location`` (id),
                  and ``items``: [{"product_id": 1, "quantity": 12}, ...]

        Behavior:
            - Every product must exist and be active
            - Lines are priced from the current product price
            - A manual-capture payment is authorized for the total
            - Order is stored as NEW with payment PENDING

        Returns:
            OrderPlacement with order_id and the payment client_secret
        """
        lines = data.get("items") or []
        if not lines:
            raise BakehouseError("INVALID_QUANTITY", message="Order has no items")

        product_ids = [line["product_id"] for line in lines]
        products = Product.objects.filter(pk__in=product_ids, is_active=True).in_bulk()

        priced = []
        subtotal = Decimal("0.00")
        for line in lines:
            quantity = int(line["quantity"])
            if quantity < 1:
                raise BakehouseError(
                    "INVALID_QUANTITY",
                    message="Quantity must be at least 1",
                    product_id=line["product_id"],
                    quantity=quantity,
                )
            product = products.get(line["product_id"])
            if product is None:
                raise BakehouseError(
                    "PRODUCT_NOT_AVAILABLE",
                    message=f"Product {line['product_id']} not found or inactive",
                    product_id=line["product_id"],
                )
            line_total = product.price * quantity
            subtotal += line_total
            priced.append((product, quantity, line_total))

        total = subtotal

        intent = get_payment_backend().authorize(
            total,
            get_setting("CURRENCY"),
            metadata={
                "customer_name": data.get("customer_name", ""),
                "customer_email": data.get("customer_email", ""),
                "fulfillment_date": str(data.get("fulfillment_date", "")),
            },
        )

        location = data.get("location")
        if location is not None and not isinstance(location, Location):
            location = Location.objects.filter(pk=location).first()

        with transaction.atomic():
            order = Order.objects.create(
                **{name: data[name] for name in CUSTOMER_FIELDS if name in data},
                location=location,
                subtotal=subtotal,
                total=total,
                payment_intent_id=intent.intent_id,
                payment_status=PaymentStatus.PENDING,
                status=OrderStatus.NEW,
            )
            OrderItem.objects.bulk_create(
                [
                    OrderItem(
                        order=order,
                        product=product,
                        quantity=quantity,
                        unit_price=product.price,
                        total=line_total,
                    )
                    for product, quantity, line_total in priced
                ]
            )

        logger.info(
            f"Order {order.pk} placed: {len(priced)} lines, total {total}",
            extra={
                "order": order.pk,
                "total": float(total),
                "payment_intent": intent.intent_id,
            },
        )

        return OrderPlacement(
            order_id=str(order.uuid),
            client_secret=intent.client_secret,
            order=order,
        )

    @classmethod
    def set_order_status(cls, order: Order, status: str, actor: str = "") -> Order:
        """Delegates to Order.set_status()."""
        order.set_status(status, actor)
        order.refresh_from_db()
        return order

    @classmethod
    def update_order(cls, order: Order, **fields) -> Order:
        """Edit customer, delivery and notes fields."""
        order.update_details(**fields)
        return order

    @classmethod
    def handle_payment_event(cls, payload: bytes, signature: str) -> dict:
        """
        Process a payment provider webhook.

        Without a configured webhook secret the event is acknowledged and ignored.

        Returns:
            {"received": True, "processed": bool}
        """
        secret = get_setting("STRIPE_WEBHOOK_SECRET")
        if not secret:
            logger.warning("Webhook secret not configured, event ignored")
            return {"received": True, "processed": False}

        event = get_payment_backend().parse_event(payload, signature, secret)

        orders = Order.objects.filter(payment_intent_id=event.intent_id)
        if not event.intent_id or not orders.exists():
            logger.info(
                f"Webhook {event.type} for unknown intent {event.intent_id}",
                extra={"event": event.type, "payment_intent": event.intent_id},
            )
            return {"received": True, "processed": False}

        processed = True
        if event.type == "payment_intent.payment_failed":
            for order in orders:
                order.payment_status = PaymentStatus.FAILED
                order.save(update_fields=["payment_status", "updated_at"])
        elif event.type == "payment_intent.canceled":
            for order in orders.filter(status=OrderStatus.NEW):
                order.status = OrderStatus.CANCELLED
                order.payment_status = PaymentStatus.CANCELLED
                order.save(update_fields=["status", "payment_status", "updated_at"])
        elif event.type == "payment_intent.amount_capturable_updated":
            for order in orders.filter(payment_status=PaymentStatus.PENDING):
                order.payment_status = PaymentStatus.AUTHORIZED
                order.save(update_fields=["payment_status", "updated_at"])
        else:
            processed = False

        logger.info(
            f"Webhook {event.type} for {event.intent_id}",
            extra={
                "event": event.type,
                "payment_intent": event.intent_id,
                "processed": processed,
            },
        )
        return {"received": True, "processed": processed}
