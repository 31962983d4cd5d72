"""Data models for the discount function.

Inbound models are snapshots of the host request; outbound models describe
the discount decision. All of them are immutable.
"""

from dataclasses import dataclass, field

STRATEGY_FIRST = "FIRST"
PRODUCT_VARIANT = "ProductVariant"


@dataclass(frozen=True)
class ProductVariant:
    """Merchandise that is a variant of a catalog product."""
    id: str | None = None
    product_has_discount_tag: bool = False


@dataclass(frozen=True)
class CustomProduct:
    """Any merchandise that is not a product variant."""
    type_name: str = ""


Merchandise = ProductVariant | CustomProduct


@dataclass(frozen=True)
class CartLine:
    """A single merchandise entry in the cart."""
    merchandise: Merchandise
    quantity: int = 0
    unit_price: float | None = None
    compare_at_unit_price: float | None = None
    line_subtotal: float = 0.0
    id: str = ""

    @property
    def variant_id(self) -> str | None:
        """Return the variant id when the line can be targeted."""
        if isinstance(self.merchandise, ProductVariant) and self.merchandise.id:
            return self.merchandise.id
        return None


@dataclass(frozen=True)
class Customer:
    """Identified buyer."""
    id: str = ""
    already_redeemed: bool = False


@dataclass(frozen=True)
class BuyerIdentity:
    customer: Customer | None = None


@dataclass(frozen=True)
class Cart:
    lines: tuple[CartLine, ...] = ()
    buyer_identity: BuyerIdentity | None = None

    @property
    def customer(self) -> Customer | None:
        if self.buyer_identity is None:
            return None
        return self.buyer_identity.customer


@dataclass(frozen=True)
class RunInput:
    """Typed view of one function invocation."""
    configuration_value: str | None = None
    cart: Cart | None = None


@dataclass(frozen=True)
class Target:
    """A product variant (and quantity) the discount applies to."""
    variant_id: str
    quantity: int


@dataclass(frozen=True)
class Discount:
    targets: tuple[Target, ...]
    percentage_value: float
    message: str
    conditions: tuple = ()


@dataclass(frozen=True)
class DiscountDecision:
    """Result of an evaluation: at most one discount, first-match strategy."""
    discounts: tuple[Discount, ...] = field(default_factory=tuple)
    strategy: str = STRATEGY_FIRST

    def __post_init__(self):
        if len(self.discounts) > 1:
            raise ValueError("A decision carries at most one discount")

    @property
    def discount(self) -> Discount | None:
        return self.discounts[0] if self.discounts else None
