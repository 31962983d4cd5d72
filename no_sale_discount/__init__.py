"""Percentage discount on non-sale cart items, capped and single-use per customer."""

from .calculator import calculate_discount, partition_lines
from .classifier import is_sale_item
from .configuration import (
    DEFAULT_MAXIMUM_DISCOUNT_AMOUNT,
    DEFAULT_PERCENTAGE_DISCOUNT,
    Configuration,
    load_configuration,
    parse_configuration,
)
from .errors import DiscountError, InvalidConfigurationError, InvalidInputError
from .function import configure_logging, evaluate, handle
from .models import (
    STRATEGY_FIRST,
    BuyerIdentity,
    Cart,
    CartLine,
    Customer,
    CustomProduct,
    Discount,
    DiscountDecision,
    ProductVariant,
    RunInput,
    Target,
)
from .parsing import parse_run_input
from .redemption import has_redeemed
from .evaluator import empty_decision, run
from .serialization import decision_to_dict, format_number

__all__ = [
    "calculate_discount",
    "partition_lines",
    "is_sale_item",
    "DEFAULT_MAXIMUM_DISCOUNT_AMOUNT",
    "DEFAULT_PERCENTAGE_DISCOUNT",
    "Configuration",
    "load_configuration",
    "parse_configuration",
    "DiscountError",
    "InvalidConfigurationError",
    "InvalidInputError",
    "configure_logging",
    "evaluate",
    "handle",
    "STRATEGY_FIRST",
    "BuyerIdentity",
    "Cart",
    "CartLine",
    "Customer",
    "CustomProduct",
    "Discount",
    "DiscountDecision",
    "ProductVariant",
    "RunInput",
    "Target",
    "parse_run_input",
    "has_redeemed",
    "empty_decision",
    "run",
    "decision_to_dict",
    "format_number",
]
