"""Redemption gate: one use of the discount per customer."""

from .models import Cart


def has_redeemed(cart: Cart) -> bool:
    """Return True if the identified customer already used the discount.

    Anonymous carts are always eligible.
    """
    customer = cart.customer
    return customer is not None and customer.already_redeemed
