from __future__ import annotations

from decimal import Decimal
from enum import StrEnum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .line_item import LineItem
from .price import Price


class LineItemKind(StrEnum):
    """Values of the ``kind`` tag carried by each variant below."""

    PRODUCT = "product"
    CONFIGURED = "configured"
    VOUCHER = "voucher"


class BaseCalculatedLineItem(BaseModel):
    """A line item paired with its resolved price.

    Variants are told apart by ``kind``. Goods are physical, shippable entries;
    vouchers and services are not.
    """

    model_config = ConfigDict(frozen=True)

    kind: LineItemKind
    line_item: LineItem
    price: Price

    @property
    def identifier(self) -> str:
        return self.line_item.identifier

    @property
    def quantity(self) -> int:
        return self.line_item.quantity

    @property
    def is_goods(self) -> bool:
        return False


class CalculatedProduct(BaseCalculatedLineItem):
    kind: Literal["product"] = "product"  # type: ignore[assignment]
    weight: Decimal = Decimal(0)

    @model_validator(mode="after")
    def _validate_weight(self) -> CalculatedProduct:
        if self.weight < 0:
            raise ValueError("CalculatedProduct.weight must be >= 0")
        return self

    @property
    def is_goods(self) -> bool:
        return True


class ConfiguredLineItem(BaseCalculatedLineItem):
    kind: Literal["configured"] = "configured"  # type: ignore[assignment]
    goods: bool = False

    @property
    def is_goods(self) -> bool:
        return self.goods


class CalculatedVoucher(BaseCalculatedLineItem):
    kind: Literal["voucher"] = "voucher"  # type: ignore[assignment]


CalculatedLineItem = Annotated[
    Union[CalculatedProduct, ConfiguredLineItem, CalculatedVoucher],
    Field(discriminator="kind"),
]
