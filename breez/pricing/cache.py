"""
Session pricing cache.

Every line item gets a price drawn once per cache key and then reused for
the rest of the process, so a dish keeps its price across searches. Dishes
in a shared category (milkshakes) all use a single key.
"""
from __future__ import annotations

import logging
import random
import threading
from typing import Protocol, Sequence

from .config import DEFAULT_PRICING_CONFIG, PricingConfig

logger = logging.getLogger(__name__)


class PriceSource(Protocol):
    def choice(self, seq: Sequence[int]) -> int: ...


class PriceAssigner:
    def __init__(
        self,
        rng: PriceSource | None = None,
        config: PricingConfig = DEFAULT_PRICING_CONFIG,
    ) -> None:
        self._rng = rng or random.Random()
        self._config = config
        self._prices = config.prices
        self._cache: dict[str, int] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def make_key(self, category: str, subcategory: str) -> str:
        category_lower = category.lower()
        if category_lower in self._config.shared_categories:
            return category_lower
        return f"{category_lower}::{subcategory}"

    def price_for(self, category: str, subcategory: str) -> int:
        key = self.make_key(category, subcategory)
        with self._lock:
            cached = self._cache.get(key)
            if cached is not None:
                self._hits += 1
                return cached
            price = self._rng.choice(self._prices)
            self._cache[key] = price
            self._misses += 1
        logger.debug("Assigned price %d to %r", price, key)
        return price

    def snapshot(self) -> dict[str, int]:
        with self._lock:
            return dict(self._cache)

    def get_stats(self) -> dict:
        with self._lock:
            total = self._hits + self._misses
            return {
                "size": len(self._cache),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(self._hits / total * 100, 1) if total > 0 else 0.0,
            }


_default_assigner: PriceAssigner | None = None


def get_price_assigner() -> PriceAssigner:
    """Return the process-wide price cache, creating it on first call."""
    global _default_assigner
    if _default_assigner is None:
        _default_assigner = PriceAssigner()
    return _default_assigner
