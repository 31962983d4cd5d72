"""Discount calculation over non-sale cart lines.

Business Rules:
1. Lines classified as on sale are never discounted
2. Only product variants with a known id can be targeted, but every non-sale
   line counts towards the discount amount
3. The discount amount is capped at the configured maximum by lowering the
   applied percentage
"""

import math
from typing import Iterable, Sequence

import structlog

from .classifier import is_sale_item
from .configuration import Configuration
from .models import CartLine, Discount, Target
from .serialization import format_number

logger = structlog.get_logger()


def partition_lines(lines: Iterable[CartLine]) -> tuple[list[CartLine], list[CartLine]]:
    """Split lines into (sale, non_sale), preserving cart order."""
    sale: list[CartLine] = []
    non_sale: list[CartLine] = []
    for line in lines:
        if is_sale_item(line):
            sale.append(line)
        else:
            non_sale.append(line)
    return sale, non_sale


def build_targets(lines: Sequence[CartLine]) -> tuple[Target, ...]:
    """Return one target per line that resolves to a product variant."""
    return tuple(
        Target(variant_id=line.variant_id, quantity=line.quantity)
        for line in lines
        if line.variant_id is not None
    )


# Sums are accumulated left to right rather than with sum(), which
# compensates float rounding on recent interpreters.
def subtotal_of(lines: Sequence[CartLine]) -> float:
    total = 0.0
    for line in lines:
        total += line.line_subtotal
    return total


def potential_discount(lines: Sequence[CartLine], percentage: float) -> float:
    """Discount amount the configured percentage would grant on the lines."""
    amount = 0.0
    for line in lines:
        amount += line.line_subtotal * (percentage / 100)
    return amount


def uncapped_message(percentage: float) -> str:
    return f"{format_number(percentage)}% off non-sale items"


def capped_message(percentage: float, maximum: float) -> str:
    return f"{math.floor(percentage)}% off non-sale items (capped at {format_number(maximum)})"


def calculate_discount(
    lines: Sequence[CartLine],
    configuration: Configuration,
    log: structlog.BoundLogger | None = None,
) -> Discount | None:
    """Compute the discount for a cart, or None when nothing is eligible."""
    log = log or logger

    _, non_sale = partition_lines(lines)
    if not non_sale:
        log.info("no_eligible_lines", line_count=len(lines))
        return None

    targets = build_targets(non_sale)
    percentage = configuration.percentage_discount
    maximum = configuration.maximum_discount_amount

    effective_percentage = percentage
    message = uncapped_message(percentage)

    potential = potential_discount(non_sale, percentage)
    if potential > maximum:
        eligible_total = subtotal_of(non_sale)
        if eligible_total > 0:
            effective_percentage = (maximum / eligible_total) * 100
            message = capped_message(effective_percentage, maximum)
            log.info(
                "discount_capped",
                potential_discount=potential,
                maximum_discount_amount=maximum,
                effective_percentage=effective_percentage,
            )
        else:
            log.warning(
                "cap_skipped_for_non_positive_subtotal",
                eligible_total=eligible_total,
                maximum_discount_amount=maximum,
            )

    return Discount(
        targets=targets,
        percentage_value=effective_percentage,
        message=message,
        conditions=(),
    )
