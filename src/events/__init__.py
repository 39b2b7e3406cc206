"""Typed, synchronous notifications raised before write operations."""

__all__ = [
    "field_extender",
    "product_media",
    "publisher",
]
