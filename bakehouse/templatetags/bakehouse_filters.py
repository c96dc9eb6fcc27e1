from decimal import Decimal, InvalidOperation

from django import template

register = template.Library()


@register.filter
def quantity(value):
    """Format a pantry quantity with 2 decimal places and thousands separators."""
    if value is None:
        return "0.00"
    try:
        d = Decimal(str(value)).quantize(Decimal("0.01"))
    except InvalidOperation:
        return str(value)
    return f"{d:,}"
