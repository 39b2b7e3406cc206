from __future__ import annotations

from functools import cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class CartSettings(BaseSettings):
    currency: str = "EUR"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="CART_", env_file=".env", env_file_encoding="utf-8", extra="ignore")


@cache
def config() -> CartSettings:
    return CartSettings()
