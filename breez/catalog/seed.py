"""
Offline script to seed the dish catalog.

Usage:
    python -m breez.catalog.seed
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .store import JsonCatalogStore

DISHES: list[dict[str, Any]] = [
    {
        "category": "Chai",
        "subcategory": ["Arunachali Chai", "Elaichi Chai", "Ginger Chai", "Masala Chai"],
        "vendor": "Uncle Tony's",
        "taste": "Sweet",
        "size": ["Small", "Medium", "Large"],
        "healthy": "false",
        "price": "cheap",
        "dietary_restriction": "lactose intolerant",
        "average_rating": 4.2,
    },
    {
        "category": "Cold Coffee",
        "subcategory": ["Plain Coffee", "Coffee with Ice Cream", "Hazelnut", "Blueberry Cold Coffee"],
        "vendor": "Lounge1",
        "taste": "Sweet",
        "size": "",
        "healthy": "false",
        "price": "cheap",
        "dietary_restriction": "lactose intolerant",
        "average_rating": 3.8,
    },
    {
        "category": "Milkshake",
        "subcategory": ["Vanilla", "Butterscotch", "Banana", "Blueberry"],
        "vendor": "Uncle Tony's",
        "taste": "Sweet",
        "size": "",
        "healthy": "true",
        "price": "medium",
        "dietary_restriction": "lactose intolerant",
        "average_rating": 4.5,
    },
    {
        "category": "Burger",
        "subcategory": [
            "Veg Burger",
            "Cheese Burger",
            "Veg Cheese Burger",
            "Veg Paneer Burger",
            "Chicken Burger",
        ],
        "vendor": "Lounge1",
        "taste": "savory",
        "size": "",
        "healthy": "false",
        "price": "medium",
        "dietary_restriction": "",
        "average_rating": 3.7,
    },
    {
        "category": "Patty",
        "subcategory": ["Aloo", "Vegetable", "Cheese", "Corn", "Paneer"],
        "vendor": "Uncle Tony's",
        "taste": "Umami",
        "size": "",
        "healthy": "false",
        "price": "medium",
        "dietary_restriction": "",
        "average_rating": 4.0,
    },
    {
        "category": "Sandwiches",
        "subcategory": [
            "Cold",
            "Vegetable",
            "Tandoori",
            "Chicken Mayo",
            "Corn Mayo",
            "Cheese Corn",
            "Clubs",
        ],
        "vendor": "Lounge1",
        "taste": "Umami",
        "size": "",
        "healthy": "",
        "price": "medium",
        "dietary_restriction": "",
        "average_rating": 3.9,
    },
    {
        "category": "Hot Coffee",
        "subcategory": ["Normal", "Black", "Hazelnut", "Strong", "Choco"],
        "vendor": "Uncle Tony's",
        "taste": "",
        "size": ["Small", "Medium", "Large"],
        "healthy": "",
        "price": "cheap",
        "dietary_restriction": "",
        "average_rating": 3.6,
    },
    {
        "category": "Lassi",
        "subcategory": ["Mango", "Strawberry"],
        "vendor": "Lounge1",
        "taste": "Sweet",
        "size": "",
        "healthy": "",
        "price": "medium",
        "dietary_restriction": "lactose intolerant",
        "average_rating": 4.1,
    },
    {
        "category": "Pizza",
        "subcategory": ["Double Cheese Pizza", "Garden Pizza", "Veg Level Pizza", "Paneer Pizza"],
        "vendor": "Uncle Tony's",
        "taste": "Umami",
        "size": "",
        "healthy": "",
        "price": "medium",
        "dietary_restriction": "",
        "average_rating": 4.3,
    },
    {
        "category": "All-Day Dining",
        "subcategory": [
            "Aloo Paratha",
            "Onion Paratha",
            "Mixed Paratha",
            "Paneer Paratha",
            "Chole Bhature",
            "Bread Omelette",
            "Boiled Eggs",
            "Plain Paratha",
            "Roti",
        ],
        "vendor": "Lounge1",
        "taste": "Umami",
        "size": "",
        "healthy": "",
        "price": "medium",
        "dietary_restriction": "",
        "average_rating": 3.5,
    },
    {
        "category": "Thali",
        "subcategory": ["Veg Thali", "Non-Veg Thali"],
        "vendor": "Uncle Tony's",
        "taste": "",
        "size": "",
        "healthy": "",
        "price": "medium",
        "dietary_restriction": "",
        "average_rating": 4.0,
    },
    {
        "category": "Juice",
        "subcategory": ["Orange Juice", "Apple Juice", "Mixed Fruit Juice"],
        "vendor": "Lounge1",
        "taste": "Sweet",
        "size": "",
        "healthy": "true",
        "price": "cheap",
        "dietary_restriction": "",
        "average_rating": 4.4,
    },
    {
        "category": "Juice",
        "subcategory": ["Watermelon Juice"],
        "vendor": "Lounge1",
        "taste": "Sweet",
        "size": "",
        "healthy": "true",
        "price": "medium",
        "dietary_restriction": "",
        "average_rating": 3.8,
    },
    {
        "category": "Maggie",
        "subcategory": ["Masala Maggie", "Cheese Maggie", "Vegetable Maggie"],
        "vendor": "Lounge1",
        "taste": "real",
        "size": "solid",
        "healthy": "false",
        "price": "cheap",
        "dietary_restriction": "",
        "average_rating": 3.9,
    },
    {
        "category": "Milkshake",
        "subcategory": ["Oreo Shake"],
        "vendor": "Uncle Tony's",
        "taste": "Sweet",
        "size": ["Small", "Medium", "Large"],
        "healthy": "true",
        "price": "medium",
        "dietary_restriction": "lactose intolerant",
        "average_rating": 4.6,
    },
]


def document_id(index: int) -> str:
    """Deterministic id for the 1-based ``index``-th dish: ``dish_001`` ..."""
    return f"dish_{index:03d}"


def run_seed(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> Path:
    """Write the fixed dish catalog into the document store."""
    documents = {document_id(i): dish for i, dish in enumerate(DISHES, start=1)}
    return JsonCatalogStore(config).write_all(documents)


if __name__ == "__main__":
    path = run_seed()
    print(f"Seeded {len(DISHES)} dishes into: {path}")
