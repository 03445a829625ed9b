"""
Dish catalog package.

Responsibilities:
- Hold the catalog location configuration.
- Read the full set of dish records from the document store.
- Seed the store with the fixed dish catalog (offline).
"""
