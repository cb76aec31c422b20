from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from order_taking.core.domain.model.simple_types import (
    EmailAddress,
    Money,
    OrderId,
    OrderLineId,
    OrderQuantity,
    ProductCode,
    String50,
    ZipCode,
)


@dataclass(frozen=True)
class CustomerInfo:
    first_name: String50
    last_name: String50
    email_address: EmailAddress


@dataclass(frozen=True)
class Address:
    address_line1: String50
    city: String50
    zip_code: ZipCode
    address_line2: String50 | None = None


@dataclass(frozen=True)
class ValidatedOrderLine:
    order_line_id: OrderLineId
    product_code: ProductCode
    quantity: OrderQuantity


@dataclass(frozen=True)
class ValidatedOrder:
    order_id: OrderId
    lines: Tuple[ValidatedOrderLine, ...]
    customer_info: CustomerInfo | None = None
    shipping_address: Address | None = None
    billing_address: Address | None = None

    def __post_init__(self) -> None:
        if not self.lines:
            raise ValueError("a validated order needs at least one line")


@dataclass(frozen=True)
class PricedOrderLine:
    line: ValidatedOrderLine
    line_price: Money


@dataclass(frozen=True)
class PricedOrder:
    order: ValidatedOrder
    lines: Tuple[PricedOrderLine, ...]
    amount_to_bill: Money
