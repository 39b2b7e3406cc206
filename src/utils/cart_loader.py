from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ValidationError

from domain.calculated_line_item import CalculatedLineItem
from domain.line_item_registry import LineItemRegistry

logger = logging.getLogger(__name__)


class CartDocument(BaseModel):
    line_items: list[CalculatedLineItem]


def load_cart(path: Path) -> LineItemRegistry:
    """Load calculated line items from a JSON document.

    Expected shape: ``{"line_items": [{"kind": "product", "line_item": {...}, "price": {...}}, ...]}``.
    A missing file yields an empty registry. Repeated identifiers collapse to the last entry.
    """

    if not path.exists():
        return LineItemRegistry()
    if not path.is_file():
        raise ValueError(f"Cart path {path} is not a file")

    try:
        raw = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as err:
        raise ValueError(f"Cart file {path} is not valid UTF-8: {err}") from err

    try:
        document = CartDocument.model_validate_json(raw)
    except ValidationError as err:
        raise ValueError(f"Cart file {path} is not a valid cart document: {err}") from err

    registry = LineItemRegistry(document.line_items)
    logger.info("Loaded %d line items from %s", registry.count(), path)
    return registry
