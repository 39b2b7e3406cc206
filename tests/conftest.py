from typing import Generator

import pytest

from config import config
from domain.line_item_registry import LineItemRegistry
from tests.helpers.line_items import configured_line_item


@pytest.fixture(autouse=True)
def _reset_config_cache() -> Generator[None, None, None]:
    config.cache_clear()
    yield
    config.cache_clear()


@pytest.fixture(scope="function")
def abcd_registry() -> LineItemRegistry:
    return LineItemRegistry(
        [
            configured_line_item("A", 3),
            configured_line_item("B", 3),
            configured_line_item("C", 3),
            configured_line_item("D", 3),
        ]
    )
