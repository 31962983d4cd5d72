"""Discount configuration stored in the discount node metafield.

The metafield holds a JSON object such as::

    {"percentageDiscount": 25, "maximumDiscountAmount": 500}

Each option is merged with its default using a defined-value check, so an
explicit ``0`` is honoured while a missing or unusable value is not. Numeric
strings are read as numbers and percentages above 100 are clamped to 100.
"""

import json
import math
from dataclasses import dataclass
from typing import Any, Mapping

import structlog

from .errors import InvalidConfigurationError

DEFAULT_PERCENTAGE_DISCOUNT = 25.0
DEFAULT_MAXIMUM_DISCOUNT_AMOUNT = 500.0
MAX_PERCENTAGE = 100.0

PERCENTAGE_DISCOUNT_KEY = "percentageDiscount"
MAXIMUM_DISCOUNT_AMOUNT_KEY = "maximumDiscountAmount"

logger = structlog.get_logger()


@dataclass(frozen=True)
class Configuration:
    """Recognized options with their defaults."""
    percentage_discount: float = DEFAULT_PERCENTAGE_DISCOUNT
    maximum_discount_amount: float = DEFAULT_MAXIMUM_DISCOUNT_AMOUNT


def load_configuration(value: str | None) -> Configuration:
    """Parse the metafield value, raising on a malformed blob.

    ``None`` means the metafield is absent and yields the defaults. Options
    that are present but unusable fall back to their own default.
    """
    if value is None:
        return Configuration()

    try:
        raw = json.loads(value)
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationError("metafield is not valid JSON", e) from e

    if not isinstance(raw, Mapping):
        raise InvalidConfigurationError(
            f"expected a JSON object, got {type(raw).__name__}"
        )

    return Configuration(
        percentage_discount=_option(
            raw,
            PERCENTAGE_DISCOUNT_KEY,
            DEFAULT_PERCENTAGE_DISCOUNT,
            maximum=MAX_PERCENTAGE,
        ),
        maximum_discount_amount=_option(
            raw,
            MAXIMUM_DISCOUNT_AMOUNT_KEY,
            DEFAULT_MAXIMUM_DISCOUNT_AMOUNT,
        ),
    )


def parse_configuration(
    value: str | None,
    log: structlog.BoundLogger | None = None,
) -> Configuration:
    """Parse the metafield value, falling back to defaults when malformed."""
    log = log or logger
    try:
        return load_configuration(value)
    except InvalidConfigurationError as e:
        log.warning("invalid_configuration", error=str(e))
        return Configuration()


def _option(
    raw: Mapping[str, Any],
    key: str,
    default: float,
    maximum: float | None = None,
) -> float:
    value = raw.get(key)
    if value is None:
        return default

    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        logger.warning("ignoring_configuration_option", option=key, reason="not a number")
        return default

    try:
        value = float(value)
    except (ValueError, OverflowError):
        logger.warning("ignoring_configuration_option", option=key, reason="not a number")
        return default

    if not math.isfinite(value) or value < 0:
        logger.warning("ignoring_configuration_option", option=key, reason="out of range")
        return default
    if maximum is not None and value > maximum:
        logger.warning("clamping_configuration_option", option=key, value=value, maximum=maximum)
        return maximum

    return value
