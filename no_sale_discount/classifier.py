"""Sale-item classification."""

from .models import CartLine, ProductVariant


def is_sale_item(line: CartLine) -> bool:
    """Return True if the line is already discounted by the store.

    A line is on sale when its product carries one of the sale tags, or when
    its compare-at price is higher than its current price. Lines without a
    current price are never treated as on sale.
    """
    if line.unit_price is None:
        return False

    if isinstance(line.merchandise, ProductVariant) and line.merchandise.product_has_discount_tag:
        return True

    if line.compare_at_unit_price is not None and line.compare_at_unit_price > line.unit_price:
        return True

    return False
