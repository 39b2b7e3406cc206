from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from domain.calculated_line_item import CalculatedProduct
from domain.line_item_registry import LineItemRegistry

from .formatting import format_currency, format_decimal


@dataclass
class LineItemSummary:
    identifier: str
    kind: str
    quantity: int
    is_goods: bool
    total: Decimal
    weight: Decimal | None = None


@dataclass
class CartSummary:
    rows: list[LineItemSummary] = field(default_factory=list)
    goods_total: Decimal = Decimal(0)
    goods_weight: Decimal = Decimal(0)
    total: Decimal = Decimal(0)


def compute_cart_summary(registry: LineItemRegistry) -> CartSummary:
    rows: list[LineItemSummary] = []
    for item in registry:
        # Shipping weight of the whole row, unit weight times quantity.
        weight = item.weight * item.quantity if isinstance(item, CalculatedProduct) else None
        rows.append(
            LineItemSummary(
                identifier=item.identifier,
                kind=str(item.kind),
                quantity=item.quantity,
                is_goods=item.is_goods,
                total=item.price.total_price,
                weight=weight,
            )
        )

    return CartSummary(
        rows=rows,
        goods_total=registry.filter_goods().get_prices().total_price(),
        goods_weight=sum((row.weight for row in rows if row.weight is not None), start=Decimal(0)),
        total=registry.get_prices().total_price(),
    )


def render_cart_summary(summary: CartSummary, *, currency: str) -> None:
    print("Line items:")
    if not summary.rows:
        print("  (empty)")
        return

    total_label = f"Total {currency}"
    rows: list[tuple[str, str, str, str, str]] = [
        (
            row.identifier,
            row.kind + (" (goods)" if row.is_goods else ""),
            format_decimal(Decimal(row.quantity)),
            format_decimal(row.weight) if row.weight is not None else "-",
            format_currency(row.total),
        )
        for row in summary.rows
    ]

    id_width = max(len("Identifier"), max(len(r[0]) for r in rows))
    kind_width = max(len("Kind"), max(len(r[1]) for r in rows))
    qty_width = max(len("Qty"), max(len(r[2]) for r in rows))
    weight_width = max(len("Weight"), max(len(r[3]) for r in rows))
    total_width = max(len(total_label), max(len(r[4]) for r in rows))

    header = (
        f"{'Identifier':<{id_width}} {'Kind':<{kind_width}} {'Qty':>{qty_width}} "
        f"{'Weight':>{weight_width}} {total_label:>{total_width}}"
    )
    lines = [header, "-" * len(header)]
    for identifier, kind, qty, weight, total in rows:
        lines.append(
            f"{identifier:<{id_width}} {kind:<{kind_width}} {qty:>{qty_width}} "
            f"{weight:>{weight_width}} {total:>{total_width}}"
        )

    for line in lines:
        print(line)
    print(f"Goods weight: {format_decimal(summary.goods_weight)}")
    print(f"Goods total: {format_currency(summary.goods_total)} {currency}")
    print(f"Cart total:  {format_currency(summary.total)} {currency}")
