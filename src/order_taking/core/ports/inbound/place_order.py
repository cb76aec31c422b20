from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Sequence

from returns.io import IOResult
from returns.result import Result

from order_taking.core.domain.model.errors import PlaceOrderError
from order_taking.core.ports.outbound.events import PlaceOrderEvent

# Wire shapes: exactly what a caller supplies, no invariants held.


@dataclass(frozen=True)
class UnvalidatedCustomerInfo:
    first_name: str
    last_name: str
    email_address: str


@dataclass(frozen=True)
class UnvalidatedAddress:
    address_line1: str
    city: str
    zip_code: str
    address_line2: str = ""


@dataclass(frozen=True)
class UnvalidatedOrderLine:
    order_line_id: str
    product_code: str
    quantity: int


@dataclass(frozen=True)
class UnvalidatedOrder:
    order_id: str
    lines: Sequence[UnvalidatedOrderLine] = field(default_factory=tuple)
    customer_info: UnvalidatedCustomerInfo | None = None
    shipping_address: UnvalidatedAddress | None = None
    billing_address: UnvalidatedAddress | None = None


# Dependencies already applied (see bootstrap).
PlaceOrder = Callable[[UnvalidatedOrder], Result[PlaceOrderEvent, PlaceOrderError]]
PlaceOrderWorkflow = Callable[
    [UnvalidatedOrder], IOResult[tuple[PlaceOrderEvent, ...], PlaceOrderError]
]
