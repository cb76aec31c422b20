"""Wire DTOs shared by the HTTP and CLI adapters.

Fields are deliberately unconstrained: business rules live in the core's
constrained types, not here.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from order_taking.core.domain.model.errors import (
    ConstraintError,
    InvalidAddress,
    InvalidCustomerInfo,
    InvalidOrderId,
    InvalidOrderLine,
    PlaceOrderError,
    PortUnavailable,
    UnknownProduct,
)
from order_taking.core.ports.inbound.place_order import (
    UnvalidatedAddress,
    UnvalidatedCustomerInfo,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
)
from order_taking.core.ports.outbound.events import (
    BillableOrderPlaced,
    OrderAcknowledgmentSent,
    OrderPlaced,
    PlaceOrderEvent,
    event_name,
)

# ---- Requests --------------------------------------------------------------


class OrderLineIn(BaseModel):
    order_line_id: str = Field(examples=["L1"])
    product_code: str = Field(examples=["W1234"])
    quantity: int = Field(examples=[5])


class CustomerInfoIn(BaseModel):
    first_name: str
    last_name: str
    email_address: str = Field(examples=["jane@example.com"])


class AddressIn(BaseModel):
    address_line1: str
    address_line2: str = ""
    city: str
    zip_code: str = Field(examples=["12345"])


class PlaceOrderRequest(BaseModel):
    order_id: str = Field(examples=["ORD-1"])
    lines: list[OrderLineIn] = Field(default_factory=list)
    customer_info: CustomerInfoIn | None = None
    shipping_address: AddressIn | None = None
    billing_address: AddressIn | None = None


# ---- Responses -------------------------------------------------------------


class ErrorResponse(BaseModel):
    type: str
    message: str
    line_id: str | None = None
    field: str | None = None
    rule: str | None = None
    product_code: str | None = None
    port: str | None = None


class PlaceOrderResponse(BaseModel):
    events: list[dict[str, Any]]


# ---- Mapping helpers -------------------------------------------------------


def _to_address(a: AddressIn | None) -> UnvalidatedAddress | None:
    if a is None:
        return None
    return UnvalidatedAddress(
        address_line1=a.address_line1,
        address_line2=a.address_line2,
        city=a.city,
        zip_code=a.zip_code,
    )


def to_unvalidated_order(req: PlaceOrderRequest) -> UnvalidatedOrder:
    customer = req.customer_info
    return UnvalidatedOrder(
        order_id=req.order_id,
        lines=tuple(
            UnvalidatedOrderLine(
                order_line_id=ln.order_line_id,
                product_code=ln.product_code,
                quantity=ln.quantity,
            )
            for ln in req.lines
        ),
        customer_info=(
            UnvalidatedCustomerInfo(
                first_name=customer.first_name,
                last_name=customer.last_name,
                email_address=customer.email_address,
            )
            if customer is not None
            else None
        ),
        shipping_address=_to_address(req.shipping_address),
        billing_address=_to_address(req.billing_address),
    )


def event_to_dict(event: PlaceOrderEvent) -> dict[str, Any]:
    body: dict[str, Any] = {"type": event_name(event)}
    if isinstance(event, (OrderPlaced, BillableOrderPlaced)):
        priced = event.priced_order
        body.update(
            order_id=priced.order.order_id.value,
            amount_to_bill=str(priced.amount_to_bill.amount),
            currency=priced.amount_to_bill.currency,
            lines=[
                {
                    "order_line_id": ln.line.order_line_id.value,
                    "product_code": ln.line.product_code.value,
                    "quantity": ln.line.quantity.value,
                    "line_price": str(ln.line_price.amount),
                }
                for ln in priced.lines
            ],
        )
    elif isinstance(event, OrderAcknowledgmentSent):
        body.update(
            order_id=event.order_id.value,
            email_address=event.email_address.value,
        )
    return body


def error_to_response(err: PlaceOrderError) -> ErrorResponse:
    body = ErrorResponse(type=type(err).__name__, message=str(err))
    if isinstance(err, InvalidOrderLine):
        body.line_id = err.line_id
        body.field = err.reason.field
        body.rule = type(err.reason).__name__
    elif isinstance(err, (InvalidOrderId, InvalidCustomerInfo)):
        body.field = err.reason.field
        body.rule = type(err.reason).__name__
    elif isinstance(err, InvalidAddress):
        body.field = err.field
        if isinstance(err.reason, ConstraintError):
            body.field = f"{err.field}.{err.reason.field}"
        body.rule = type(err.reason).__name__
    elif isinstance(err, ConstraintError):
        body.field = err.field
        body.rule = type(err).__name__
    elif isinstance(err, UnknownProduct):
        body.product_code = err.product_code
    elif isinstance(err, PortUnavailable):
        body.port = err.port
    return body
