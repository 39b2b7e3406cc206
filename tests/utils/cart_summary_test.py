from __future__ import annotations

from decimal import Decimal

import pytest

from domain.calculated_line_item import CalculatedProduct
from domain.line_item import LineItem, LineItemType
from domain.line_item_registry import LineItemRegistry
from tests.helpers.line_items import calculated_product, calculated_voucher, configured_line_item, make_price
from utils.cart_summary import compute_cart_summary, render_cart_summary
from utils.formatting import format_currency, format_decimal


def test_compute_cart_summary_calculates_totals() -> None:
    registry = LineItemRegistry(
        [
            calculated_product("P1", 2, price=make_price("19.98")),
            calculated_voucher("V1", price=make_price("-5")),
            configured_line_item("S1", price=make_price("4.50")),
        ]
    )

    summary = compute_cart_summary(registry)

    assert [row.identifier for row in summary.rows] == ["P1", "V1", "S1"]
    assert [row.is_goods for row in summary.rows] == [True, False, False]
    assert summary.rows[0].quantity == 2
    assert summary.goods_total == Decimal("19.98")
    assert summary.total == Decimal("19.48")


def test_render_cart_summary_prints_rows(capsys: pytest.CaptureFixture[str]) -> None:
    registry = LineItemRegistry([calculated_product("P1", price=make_price("19.98"))])

    render_cart_summary(compute_cart_summary(registry), currency="EUR")

    output = capsys.readouterr().out
    assert "Total EUR" in output
    assert "P1" in output
    assert "product (goods)" in output
    assert "Cart total:  19.98 EUR" in output


def test_render_empty_summary(capsys: pytest.CaptureFixture[str]) -> None:
    render_cart_summary(compute_cart_summary(LineItemRegistry()), currency="EUR")

    assert "(empty)" in capsys.readouterr().out


def test_format_currency_rounds_half_up() -> None:
    assert format_currency(Decimal("1.005")) == "1.01"
    assert format_currency(Decimal("-2")) == "-2.00"
    assert format_currency(Decimal("3.14159"), places=3) == "3.142"


def test_summary_reports_product_weight(capsys: pytest.CaptureFixture[str]) -> None:
    product = CalculatedProduct(
        line_item=LineItem(identifier="P1", type=LineItemType.PRODUCT, quantity=3),
        price=make_price("30"),
        weight=Decimal("0.250"),
    )
    registry = LineItemRegistry([product, calculated_voucher("V1", price=make_price("-5"))])

    summary = compute_cart_summary(registry)

    assert summary.rows[0].weight == Decimal("0.750")
    assert summary.rows[1].weight is None
    assert summary.goods_weight == Decimal("0.75")

    render_cart_summary(summary, currency="EUR")
    output = capsys.readouterr().out
    assert "Weight" in output
    assert "0.75" in output
    assert "Goods weight: 0.75" in output


def test_format_decimal_drops_trailing_zeros() -> None:
    assert format_decimal(Decimal("2.500")) == "2.5"
    assert format_decimal(Decimal("3.000")) == "3"
    assert format_decimal(Decimal("1E+2")) == "100"
