from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from config import config
from utils.cart_loader import load_cart
from utils.cart_summary import compute_cart_summary, render_cart_summary


def run(cart_path: Path, *, goods_only: bool, currency: str) -> None:
    registry = load_cart(cart_path)
    if goods_only:
        registry = registry.filter_goods()

    print(f"Loaded {registry.count()} line items from {cart_path}")
    render_cart_summary(compute_cart_summary(registry), currency=currency)


def main(argv: Sequence[str] | None = None) -> None:
    settings = config()
    parser = argparse.ArgumentParser(description="Load a calculated cart and print its line items.")
    parser.add_argument("--cart", type=Path, default=Path("data/cart.json"))
    parser.add_argument("--goods-only", action="store_true")
    parser.add_argument("--log-level", default=settings.log_level)
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s %(message)s")
    run(args.cart, goods_only=args.goods_only, currency=settings.currency)


if __name__ == "__main__":
    main()
