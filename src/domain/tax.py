from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from pydantic import BaseModel, ConfigDict, model_validator


class TaxRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    rate: Decimal

    @model_validator(mode="after")
    def _validate_rate(self) -> TaxRule:
        if self.rate < 0:
            raise ValueError("TaxRule.rate must be >= 0")
        return self


class CalculatedTax(BaseModel):
    """Tax amount already resolved for a price at a given rate."""

    model_config = ConfigDict(frozen=True)

    tax: Decimal
    tax_rate: Decimal
    price: Decimal


def merge_calculated_taxes(taxes: Iterable[CalculatedTax]) -> tuple[CalculatedTax, ...]:
    """Group taxes by rate, summing amounts. Rates keep first-seen order."""
    merged: dict[Decimal, CalculatedTax] = {}
    for tax in taxes:
        existing = merged.get(tax.tax_rate)
        if existing is None:
            merged[tax.tax_rate] = tax
            continue
        merged[tax.tax_rate] = CalculatedTax(
            tax=existing.tax + tax.tax,
            tax_rate=tax.tax_rate,
            price=existing.price + tax.price,
        )
    return tuple(merged.values())


def merge_tax_rules(rules: Iterable[TaxRule]) -> tuple[TaxRule, ...]:
    unique: dict[Decimal, TaxRule] = {}
    for rule in rules:
        unique.setdefault(rule.rate, rule)
    return tuple(unique.values())
