from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union

from returns.io import IOResult

from order_taking.core.domain.model.errors import PlaceOrderError
from order_taking.core.domain.model.order import PricedOrder, ValidatedOrder
from order_taking.core.domain.model.simple_types import EmailAddress, Money, OrderId


@dataclass(frozen=True)
class OrderPlaced:
    """Sent to shipping."""

    priced_order: PricedOrder


@dataclass(frozen=True)
class BillableOrderPlaced:
    """Sent to billing."""

    priced_order: PricedOrder

    @property
    def order(self) -> ValidatedOrder:
        return self.priced_order.order

    @property
    def amount_to_bill(self) -> Money:
        return self.priced_order.amount_to_bill


@dataclass(frozen=True)
class OrderAcknowledgmentSent:
    order_id: OrderId
    email_address: EmailAddress


PlaceOrderEvent = Union[OrderPlaced, BillableOrderPlaced, OrderAcknowledgmentSent]

PublishEvent = Callable[[PlaceOrderEvent], IOResult[None, PlaceOrderError]]


def event_name(event: PlaceOrderEvent) -> str:
    if isinstance(event, OrderPlaced):
        return "order_placed"
    if isinstance(event, BillableOrderPlaced):
        return "billable_order_placed"
    if isinstance(event, OrderAcknowledgmentSent):
        return "order_acknowledgment_sent"
    raise TypeError(f"unknown event: {type(event).__name__}")
