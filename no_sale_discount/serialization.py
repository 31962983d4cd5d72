"""Rendering of discount decisions into the host JSON shape."""

import math
from decimal import Decimal
from typing import Any

from .models import Discount, DiscountDecision, Target


def format_number(value: float) -> str:
    """Format a number as a decimal string for the function result.

    Integral values drop the fractional part (``25.0`` -> ``"25"``), other
    values use the shortest representation that round-trips. Exponent
    notation is only used below 1e-6 and from 1e21 up.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text

    mantissa, exponent = text.split("e")
    exponent = int(exponent)
    if -7 < exponent < 21:
        return format(Decimal(text), "f")
    sign = "+" if exponent > 0 else "-"
    return f"{mantissa}e{sign}{abs(exponent)}"


def target_to_dict(target: Target) -> dict[str, Any]:
    return {
        "productVariant": {
            "id": target.variant_id,
            "quantity": target.quantity,
        }
    }


def discount_to_dict(discount: Discount) -> dict[str, Any]:
    return {
        "targets": [target_to_dict(t) for t in discount.targets],
        "value": {
            "percentage": {
                "value": format_number(discount.percentage_value),
            }
        },
        "message": discount.message,
        "conditions": list(discount.conditions),
    }


def decision_to_dict(decision: DiscountDecision) -> dict[str, Any]:
    """Render a decision as the function result object."""
    return {
        "discountApplicationStrategy": decision.strategy,
        "discounts": [discount_to_dict(d) for d in decision.discounts],
    }
