"""Conversion of the host JSON request into typed models.

The host sends the GraphQL query result as plain JSON. Fields may be
missing or null; every lookup here tolerates that and produces the typed
default instead of raising.
"""

import math
from typing import Any, Mapping

import structlog

from .errors import InvalidInputError
from .models import (
    PRODUCT_VARIANT,
    BuyerIdentity,
    Cart,
    CartLine,
    Customer,
    CustomProduct,
    Merchandise,
    ProductVariant,
    RunInput,
)

REDEEMED_VALUE = "true"

logger = structlog.get_logger()


def _mapping(value: Any) -> Mapping[str, Any]:
    """Return value if it is a mapping, else an empty one."""
    return value if isinstance(value, Mapping) else {}


def _metafield_value(owner: Mapping[str, Any]) -> str | None:
    value = _mapping(owner.get("metafield")).get("value")
    return value if isinstance(value, str) else None


def parse_amount(money: Any) -> float | None:
    """Parse a MoneyV2 ``{"amount": "10.00"}`` object into a float."""
    amount = _mapping(money).get("amount")
    if amount is None or isinstance(amount, bool):
        return None
    if isinstance(amount, str) and not amount.strip():
        return None
    try:
        value = float(amount)
    except (TypeError, ValueError, OverflowError):
        return None
    return value if math.isfinite(value) else None


def parse_merchandise(raw: Any) -> Merchandise:
    """Map ``__typename`` onto the merchandise union."""
    merchandise = _mapping(raw)
    type_name = merchandise.get("__typename") or ""

    if type_name != PRODUCT_VARIANT:
        return CustomProduct(type_name=str(type_name))

    variant_id = merchandise.get("id")
    product = _mapping(merchandise.get("product"))
    return ProductVariant(
        id=variant_id if isinstance(variant_id, str) and variant_id else None,
        product_has_discount_tag=product.get("hasAnyTag") is True,
    )


def parse_quantity(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return max(0, int(value))


def parse_cart_line(raw: Any, log: structlog.BoundLogger | None = None) -> CartLine:
    log = log or logger
    line = _mapping(raw)
    cost = _mapping(line.get("cost"))
    line_id = line.get("id") if isinstance(line.get("id"), str) else ""

    subtotal = parse_amount(cost.get("subtotalAmount"))
    if subtotal is None:
        log.warning("missing_line_subtotal", line_id=line_id)
        subtotal = 0.0

    return CartLine(
        id=line_id,
        merchandise=parse_merchandise(line.get("merchandise")),
        quantity=parse_quantity(line.get("quantity")),
        unit_price=parse_amount(cost.get("amountPerQuantity")),
        compare_at_unit_price=parse_amount(cost.get("compareAtAmountPerQuantity")),
        line_subtotal=subtotal,
    )


def parse_customer(raw: Any) -> Customer | None:
    if not isinstance(raw, Mapping):
        return None
    customer_id = raw.get("id")
    return Customer(
        id=customer_id if isinstance(customer_id, str) else "",
        already_redeemed=_metafield_value(raw) == REDEEMED_VALUE,
    )


def parse_cart(raw: Any, log: structlog.BoundLogger | None = None) -> Cart | None:
    """Parse the cart; a missing or null cart yields None."""
    if not isinstance(raw, Mapping):
        return None

    lines = raw.get("lines")
    if not isinstance(lines, list):
        lines = []

    buyer_identity = None
    if isinstance(raw.get("buyerIdentity"), Mapping):
        buyer_identity = BuyerIdentity(
            customer=parse_customer(raw["buyerIdentity"].get("customer")),
        )

    return Cart(
        lines=tuple(parse_cart_line(line, log) for line in lines),
        buyer_identity=buyer_identity,
    )


def parse_run_input(raw: Any, log: structlog.BoundLogger | None = None) -> RunInput:
    """Build a RunInput from the decoded host request."""
    if not isinstance(raw, Mapping):
        raise InvalidInputError(f"expected a JSON object, got {type(raw).__name__}")

    return RunInput(
        configuration_value=_metafield_value(_mapping(raw.get("discountNode"))),
        cart=parse_cart(raw.get("cart"), log),
    )
