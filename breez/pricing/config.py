from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PricingConfig:
    min_price: int = 75
    max_price: int = 150
    step: int = 5
    # Categories whose variants all share one price.
    shared_categories: tuple[str, ...] = ("milkshake",)

    @property
    def prices(self) -> list[int]:
        return list(range(self.min_price, self.max_price + 1, self.step))


DEFAULT_PRICING_CONFIG = PricingConfig()
