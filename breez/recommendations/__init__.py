"""
Dish recommendation engine.

Responsibilities:
- Score every catalog dish against the structured query attributes.
- Drop dishes excluded by the user's dietary restriction.
- Fall back to the most popular dishes when nothing matches.
- Expand dishes into priced line items, one per variant.
"""
