from __future__ import annotations

from typing import Sequence

from ..recommendations.models import CheckoutResponse, LineItem

CONFIRMATION_MESSAGE = "Within 20 minutes your order will be ready"


class CheckoutError(ValueError):
    """The selection cannot be turned into an order."""


def place_order(items: Sequence[LineItem], selected: Sequence[int]) -> CheckoutResponse:
    """Build the order for the selected indices into the last search results."""
    if not items:
        raise CheckoutError("No search results to check out; search first")

    # Selection is a set of indices; order follows the results.
    indices = sorted(set(selected))
    out_of_range = [i for i in indices if i >= len(items)]
    if out_of_range:
        raise CheckoutError(
            f"Selected indices {out_of_range} are outside the {len(items)} results"
        )

    chosen = [items[i] for i in indices]
    return CheckoutResponse(
        status="paid",
        items=chosen,
        total=sum(item.price for item in chosen),
        message=CONFIRMATION_MESSAGE,
    )
