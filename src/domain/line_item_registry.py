from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator

from .calculated_line_item import CalculatedLineItem, LineItemKind
from .price import PriceCollection

logger = logging.getLogger(__name__)


class LineItemRegistry:
    """Ordered, identifier-keyed container of calculated line items.

    Adding an item whose identifier is already present replaces the stored
    item and keeps its original position. Lookups and removals of unknown
    identifiers are not errors.
    """

    def __init__(self, items: Iterable[CalculatedLineItem] | None = None) -> None:
        self._items: dict[str, CalculatedLineItem] = {}
        if items is not None:
            self.fill(items)

    def add(self, item: CalculatedLineItem) -> None:
        if item.identifier in self._items:
            logger.debug("Overwriting line item %s", item.identifier)
        self._items[item.identifier] = item

    def fill(self, items: Iterable[CalculatedLineItem]) -> None:
        for item in items:
            self.add(item)

    def get(self, identifier: str) -> CalculatedLineItem | None:
        return self._items.get(identifier)

    def remove(self, identifier: str) -> None:
        self._items.pop(identifier, None)

    def clear(self) -> None:
        self._items.clear()

    def count(self) -> int:
        return len(self._items)

    def get_identifiers(self) -> list[str]:
        return list(self._items)

    def filter_instance(self, kind: LineItemKind) -> LineItemRegistry:
        return self._filter(lambda item: item.kind == kind)

    def filter_goods(self) -> LineItemRegistry:
        return self._filter(lambda item: item.is_goods)

    def get_prices(self) -> PriceCollection:
        return PriceCollection(item.price for item in self._items.values())

    def _filter(self, predicate: Callable[[CalculatedLineItem], bool]) -> LineItemRegistry:
        return LineItemRegistry(item for item in self._items.values() if predicate(item))

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[CalculatedLineItem]:
        return iter(list(self._items.values()))

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._items

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LineItemRegistry):
            return NotImplemented
        return list(self._items.items()) == list(other._items.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"LineItemRegistry({list(self._items.values())!r})"
