from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Iterator

from pydantic import BaseModel, ConfigDict

from .tax import CalculatedTax, TaxRule, merge_calculated_taxes, merge_tax_rules


class Price(BaseModel):
    model_config = ConfigDict(frozen=True)

    unit_price: Decimal
    total_price: Decimal
    calculated_taxes: tuple[CalculatedTax, ...] = ()
    tax_rules: tuple[TaxRule, ...] = ()


class PriceCollection:
    """Ordered list of prices.

    The aggregation helpers are for callers such as totals or tax summaries;
    building the collection never combines anything.
    """

    def __init__(self, prices: Iterable[Price] | None = None) -> None:
        self._prices: list[Price] = list(prices or [])

    def add(self, price: Price) -> None:
        self._prices.append(price)

    def total_price(self) -> Decimal:
        return sum((price.total_price for price in self._prices), start=Decimal(0))

    def calculated_taxes(self) -> tuple[CalculatedTax, ...]:
        return merge_calculated_taxes(tax for price in self._prices for tax in price.calculated_taxes)

    def tax_rules(self) -> tuple[TaxRule, ...]:
        return merge_tax_rules(rule for price in self._prices for rule in price.tax_rules)

    def sum(self) -> Price:
        return Price(
            unit_price=sum((price.unit_price for price in self._prices), start=Decimal(0)),
            total_price=self.total_price(),
            calculated_taxes=self.calculated_taxes(),
            tax_rules=self.tax_rules(),
        )

    def __iter__(self) -> Iterator[Price]:
        return iter(self._prices)

    def __len__(self) -> int:
        return len(self._prices)

    def __getitem__(self, index: int) -> Price:
        return self._prices[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PriceCollection):
            return NotImplemented
        return self._prices == other._prices

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PriceCollection({self._prices!r})"
