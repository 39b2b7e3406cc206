from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .field_extender import FieldExtenderCollection
from .publisher import EventPublisher


@dataclass
class ProductMediaWriteExtenderEvent:
    """Raised before product media is written so subscribers can register field extenders."""

    NAME: ClassVar[str] = "product_media.write.extender"

    extender_collection: FieldExtenderCollection


def collect_product_media_extenders(
    publisher: EventPublisher[ProductMediaWriteExtenderEvent],
) -> FieldExtenderCollection:
    extenders = FieldExtenderCollection()
    publisher.publish(ProductMediaWriteExtenderEvent(extender_collection=extenders))
    return extenders
