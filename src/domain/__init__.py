"""Domain models and types for the cart.

This package contains in-memory (Pydantic) models describing prices, taxes and
line items, plus the registry that holds the calculated line items of one cart
computation. Tax computation and order persistence live elsewhere.
"""

__all__ = [
    "calculated_line_item",
    "line_item",
    "line_item_registry",
    "price",
    "tax",
]
