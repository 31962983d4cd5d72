"""Discount evaluator: configuration and cart in, discount decision out."""

import structlog

from .calculator import calculate_discount
from .configuration import parse_configuration
from .models import DiscountDecision, RunInput
from .redemption import has_redeemed

logger = structlog.get_logger()


def empty_decision() -> DiscountDecision:
    """Return a new decision that applies no discount."""
    return DiscountDecision(discounts=())


def run(run_input: RunInput) -> DiscountDecision:
    """Evaluate the no-sale-item discount for one cart."""
    log = logger.bind(function="no_sale_item_discount")
    configuration = parse_configuration(run_input.configuration_value, log)

    cart = run_input.cart
    if cart is None:
        log.info("no_cart")
        return empty_decision()

    customer = cart.customer
    if customer is not None:
        log = log.bind(customer_id=customer.id)

    if has_redeemed(cart):
        log.info("customer_already_redeemed")
        return empty_decision()

    discount = calculate_discount(cart.lines, configuration, log)
    if discount is None:
        return empty_decision()

    log.info(
        "discount_applied",
        percentage=discount.percentage_value,
        target_count=len(discount.targets),
    )
    return DiscountDecision(discounts=(discount,))
