from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, model_validator


class LineItemType(StrEnum):
    PRODUCT = "product"
    PERCENTAGE_VOUCHER = "percentage-voucher"
    ABSOLUTE_VOUCHER = "absolute-voucher"


class LineItem(BaseModel):
    """Identity and quantity of a cart entry, before any price is attached."""

    model_config = ConfigDict(frozen=True)

    identifier: str
    type: LineItemType
    quantity: int = 1

    @model_validator(mode="after")
    def _validate_fields(self) -> LineItem:
        if not self.identifier:
            raise ValueError("LineItem.identifier must be non-empty")
        if self.quantity <= 0:
            raise ValueError("LineItem.quantity must be > 0")
        return self
