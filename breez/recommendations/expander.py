from __future__ import annotations

from typing import Sequence

from ..pricing.cache import PriceAssigner
from .models import CatalogRecord, LineItem


def expand(records: Sequence[CatalogRecord], prices: PriceAssigner) -> list[LineItem]:
    """Flatten ranked records into one priced line item per variant."""
    items: list[LineItem] = []
    for record in records:
        for variant in record.variants:
            items.append(LineItem(
                category=record.category,
                subcategory=variant,
                price=prices.price_for(record.category, variant),
                vendor=record.vendor,
                taste=record.taste,
                healthy=record.healthy,
                dietary_restriction=record.dietary_restriction,
                average_rating=record.average_rating,
            ))
    return items
