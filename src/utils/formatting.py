from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def format_decimal(value: Decimal) -> str:
    quantized = value.normalize()
    # Avoid scientific notation for integers.
    if quantized == quantized.to_integral():
        return f"{quantized:.0f}"
    return format(quantized, "f")


def format_currency(value: Decimal, *, places: int = 2) -> str:
    quantized = value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    return f"{quantized:.{places}f}"
