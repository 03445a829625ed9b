from __future__ import annotations

import random

from breez.pricing.cache import PriceAssigner
from breez.pricing.config import PricingConfig

ALLOWED_PRICES = set(range(75, 151, 5))


class FixedPrices:
    """Hands out prices from a fixed sequence."""

    def __init__(self, *prices: int) -> None:
        self._prices = iter(prices)
        self.calls = 0

    def choice(self, seq):
        self.calls += 1
        return next(self._prices)


def test_price_ladder():
    prices = PricingConfig().prices
    assert prices[0] == 75
    assert prices[-1] == 150
    assert len(prices) == 16


def test_same_key_same_price():
    assigner = PriceAssigner(random.Random(7))
    first = assigner.price_for("Pizza", "Garden Pizza")
    assert assigner.price_for("Pizza", "Garden Pizza") == first


def test_category_case_shares_key():
    assigner = PriceAssigner(FixedPrices(90, 125))
    assert assigner.price_for("Pizza", "Garden Pizza") == 90
    assert assigner.price_for("PIZZA", "Garden Pizza") == 90


def test_subcategory_case_is_kept_in_key():
    assigner = PriceAssigner(FixedPrices(90, 125))
    assigner.price_for("Pizza", "Garden Pizza")
    assigner.price_for("Pizza", "garden pizza")
    assert assigner.snapshot() == {
        "pizza::Garden Pizza": 90,
        "pizza::garden pizza": 125,
    }


def test_milkshake_variants_share_price():
    assigner = PriceAssigner(FixedPrices(110, 80))
    oreo = assigner.price_for("Milkshake", "Oreo Shake")
    vanilla = assigner.price_for("Milkshake", "Vanilla")
    assert oreo == vanilla == 110
    assert assigner.snapshot() == {"milkshake": 110}


def test_prices_stay_in_range():
    assigner = PriceAssigner(random.Random(0))
    for i in range(200):
        assert assigner.price_for("Chai", f"variant {i}") in ALLOWED_PRICES


def test_exact_cache_contents():
    source = FixedPrices(75, 150, 95)
    assigner = PriceAssigner(source)
    assigner.price_for("Chai", "Masala Chai")
    assigner.price_for("Juice", "Apple Juice")
    assigner.price_for("Chai", "Masala Chai")
    assigner.price_for("Thali", "")

    assert source.calls == 3
    assert assigner.snapshot() == {
        "chai::Masala Chai": 75,
        "juice::Apple Juice": 150,
        "thali::": 95,
    }


def test_independent_caches():
    a = PriceAssigner(FixedPrices(75))
    b = PriceAssigner(FixedPrices(150))
    assert a.price_for("Burger", "Veg Burger") == 75
    assert b.price_for("Burger", "Veg Burger") == 150


def test_stats_count_hits_and_misses():
    assigner = PriceAssigner(FixedPrices(80, 85))
    assigner.price_for("Lassi", "Mango")
    assigner.price_for("Lassi", "Mango")
    assigner.price_for("Lassi", "Strawberry")

    stats = assigner.get_stats()
    assert stats == {"size": 2, "hits": 1, "misses": 2, "hit_rate": 33.3}


def test_assigned_price_survives_later_draws():
    assigner = PriceAssigner(FixedPrices(80, 85, 90, 95))
    assigner.price_for("Lassi", "Mango")
    for variant in ("Strawberry", "Rose", "Sweet"):
        assigner.price_for("Lassi", variant)

    assert assigner.price_for("Lassi", "Mango") == 80
    assert assigner.snapshot()["lassi::Mango"] == 80
    assert not hasattr(assigner, "clear")
