"""Runtime settings, read from ``ORDER_TAKING_*`` environment variables.

``catalog`` is a JSON object of product code -> unit price, e.g.::

    ORDER_TAKING_CATALOG='{"W1234": "12.50", "G123": "3.00"}'
"""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from order_taking.core.domain.model.simple_types import DEFAULT_CURRENCY


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ORDER_TAKING_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)
    verbose: bool = False
    log_json: bool = False
    currency: str = Field(default=DEFAULT_CURRENCY, min_length=3, max_length=3)
    catalog: dict[str, Decimal] = Field(
        default_factory=lambda: {"W1234": Decimal("12.50"), "G123": Decimal("3.00")}
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
