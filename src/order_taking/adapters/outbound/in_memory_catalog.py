from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Mapping

from returns.result import Failure, Result, Success

from order_taking.core.domain.model.errors import ProductLookupError, ProductNotFound
from order_taking.core.domain.model.simple_types import (
    DEFAULT_CURRENCY,
    Money,
    OrderQuantity,
    ProductCode,
)


@dataclass(frozen=True)
class InMemoryProductCatalog:
    """Read-only after construction, so safe to share across requests."""

    prices: Mapping[str, Decimal] = field(default_factory=dict)
    currency: str = DEFAULT_CURRENCY

    def check_product_exists(self, code: ProductCode) -> Result[None, ProductLookupError]:
        if code.value in self.prices:
            return Success(None)
        return Failure(
            ProductNotFound(message="not in catalog", product_code=code.value)
        )

    def get_line_price(self, code: ProductCode, quantity: OrderQuantity) -> Money:
        return Money.of(self.prices[code.value], self.currency) * quantity.value
