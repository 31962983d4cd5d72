"""Shared builders for cart requests and typed cart lines.

Request builders produce the host JSON shape; line builders produce typed
``CartLine`` values for tests that bypass parsing.
"""

import json

from no_sale_discount.models import CartLine, CustomProduct, ProductVariant

CURRENCY = "USD"


def money(amount: str | None) -> dict | None:
    if amount is None:
        return None
    return {"amount": amount, "currencyCode": CURRENCY}


def variant_line(
    n: int,
    *,
    quantity: int = 1,
    unit: str = "10.00",
    subtotal: str | None = None,
    compare_at: str | None = None,
    has_tag: bool = False,
) -> dict:
    """Build a cart line for ProductVariant number ``n``."""
    if subtotal is None:
        subtotal = f"{float(unit) * quantity:.2f}"
    return {
        "id": f"gid://shopify/CartLine/{n}",
        "quantity": quantity,
        "merchandise": {
            "__typename": "ProductVariant",
            "id": f"gid://shopify/ProductVariant/{n}",
            "product": {"id": f"gid://shopify/Product/{n}", "hasAnyTag": has_tag},
        },
        "cost": {
            "amountPerQuantity": money(unit),
            "compareAtAmountPerQuantity": money(compare_at),
            "subtotalAmount": money(subtotal),
        },
    }


def custom_line(n: int, *, quantity: int = 1, unit: str = "10.00", subtotal: str | None = None) -> dict:
    """Build a cart line whose merchandise is a custom product."""
    if subtotal is None:
        subtotal = f"{float(unit) * quantity:.2f}"
    return {
        "id": f"gid://shopify/CartLine/{n}",
        "quantity": quantity,
        "merchandise": {"__typename": "CustomProduct", "title": f"Custom {n}"},
        "cost": {
            "amountPerQuantity": money(unit),
            "compareAtAmountPerQuantity": None,
            "subtotalAmount": money(subtotal),
        },
    }


def request(
    lines: list | None = None,
    *,
    configuration: dict | str | None = None,
    customer_metafield: str | None = None,
    customer: bool = False,
    cart: bool = True,
) -> dict:
    """Build a full function request.

    A dict ``configuration`` is JSON-encoded into the metafield; a string is
    used verbatim. Passing ``customer_metafield`` implies an identified
    customer.
    """
    if isinstance(configuration, dict):
        configuration = json.dumps(configuration)
    metafield = {"value": configuration} if configuration is not None else None

    if not cart:
        return {"discountNode": {"metafield": metafield}, "cart": None}

    buyer_identity = None
    if customer or customer_metafield is not None:
        buyer_identity = {
            "customer": {
                "id": "gid://shopify/Customer/1",
                "metafield": {"value": customer_metafield} if customer_metafield is not None else None,
            }
        }

    return {
        "discountNode": {"metafield": metafield},
        "cart": {
            "buyerIdentity": buyer_identity,
            "lines": lines or [],
        },
    }


def typed_line(
    *,
    variant_id: str | None = "gid://shopify/ProductVariant/1",
    has_tag: bool = False,
    quantity: int = 1,
    unit_price: float | None = 10.0,
    compare_at: float | None = None,
    subtotal: float | None = None,
) -> CartLine:
    if subtotal is None:
        subtotal = (unit_price or 0.0) * quantity
    return CartLine(
        merchandise=ProductVariant(id=variant_id, product_has_discount_tag=has_tag),
        quantity=quantity,
        unit_price=unit_price,
        compare_at_unit_price=compare_at,
        line_subtotal=subtotal,
    )


def typed_custom_line(*, quantity: int = 1, unit_price: float | None = 10.0, subtotal: float | None = None) -> CartLine:
    if subtotal is None:
        subtotal = (unit_price or 0.0) * quantity
    return CartLine(
        merchandise=CustomProduct(type_name="CustomProduct"),
        quantity=quantity,
        unit_price=unit_price,
        line_subtotal=subtotal,
    )
