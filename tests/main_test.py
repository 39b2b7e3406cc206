from __future__ import annotations

import json
from pathlib import Path

import pytest

from config import config
from main import main


def test_main_prints_goods_only_summary(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("CART_CURRENCY", "PLN")
    cart_path = tmp_path / "cart.json"
    cart_path.write_text(
        json.dumps(
            {
                "line_items": [
                    {
                        "kind": "product",
                        "line_item": {"identifier": "SW-1", "type": "product", "quantity": 1},
                        "price": {"unit_price": "12.00", "total_price": "12.00"},
                    },
                    {
                        "kind": "voucher",
                        "line_item": {"identifier": "V-1", "type": "absolute-voucher", "quantity": 1},
                        "price": {"unit_price": "-2.00", "total_price": "-2.00"},
                    },
                ]
            }
        ),
        encoding="utf-8",
    )

    main(["--cart", str(cart_path), "--goods-only"])

    output = capsys.readouterr().out
    assert config().currency == "PLN"
    assert "Loaded 1 line items" in output
    assert "V-1" not in output
    assert "Cart total:  12.00 PLN" in output
