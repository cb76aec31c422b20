"""Shared fixtures: an in-memory catalog and ready-made orders."""

from __future__ import annotations

from decimal import Decimal
from functools import partial

import pytest
from returns.io import IOResult, IOSuccess

from order_taking.adapters.outbound.in_memory_catalog import InMemoryProductCatalog
from order_taking.adapters.outbound.passthrough_addresses import check_address_passthrough
from order_taking.core.domain.model.errors import PlaceOrderError
from order_taking.core.ports.inbound.place_order import (
    UnvalidatedAddress,
    UnvalidatedCustomerInfo,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
)
from order_taking.core.ports.outbound.events import PlaceOrderEvent
from order_taking.core.usecase.place_order import place_order


@pytest.fixture
def catalog() -> InMemoryProductCatalog:
    return InMemoryProductCatalog(
        prices={"P1": Decimal("12.50"), "P2": Decimal("3.00")}, currency="JPY"
    )


@pytest.fixture
def place(catalog: InMemoryProductCatalog):
    return partial(
        place_order,
        check_product_exists=catalog.check_product_exists,
        check_address_exists=check_address_passthrough,
        get_line_price=catalog.get_line_price,
        currency="JPY",
    )


class EventRecorder:
    def __init__(self) -> None:
        self.events: list[PlaceOrderEvent] = []

    def __call__(self, event: PlaceOrderEvent) -> IOResult[None, PlaceOrderError]:
        self.events.append(event)
        return IOSuccess(None)


@pytest.fixture
def recorder() -> EventRecorder:
    return EventRecorder()


def make_order(
    order_id: str = "ORD-1",
    lines: tuple[UnvalidatedOrderLine, ...] | None = None,
    customer_info: UnvalidatedCustomerInfo | None = None,
    shipping_address: UnvalidatedAddress | None = None,
    billing_address: UnvalidatedAddress | None = None,
) -> UnvalidatedOrder:
    if lines is None:
        lines = (UnvalidatedOrderLine(order_line_id="L1", product_code="P1", quantity=5),)
    return UnvalidatedOrder(
        order_id=order_id,
        lines=lines,
        customer_info=customer_info,
        shipping_address=shipping_address,
        billing_address=billing_address,
    )


@pytest.fixture
def customer() -> UnvalidatedCustomerInfo:
    return UnvalidatedCustomerInfo(
        first_name="Jane", last_name="Doe", email_address="jane@example.com"
    )


@pytest.fixture
def address() -> UnvalidatedAddress:
    return UnvalidatedAddress(address_line1="1 Main St", city="Springfield", zip_code="12345")


@pytest.fixture
def order_factory():
    return make_order
