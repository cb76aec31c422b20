"""Unvalidated order -> validated order.

Fail-fast: the first violated rule aborts the whole order. Every failure
carries enough context (line id, field, rule) to locate the problem.
"""

from __future__ import annotations

from typing import List

from returns.result import Failure, Result, Success

from order_taking.core.domain.model.errors import (
    AddressNotFound,
    ConstraintError,
    EmptyOrder,
    InvalidAddress,
    InvalidCustomerInfo,
    InvalidOrderId,
    InvalidOrderLine,
    PlaceOrderError,
    PortUnavailable,
    ProductLookupError,
    ProductNotFound,
    UnknownProduct,
)
from order_taking.core.domain.model.order import (
    Address,
    CustomerInfo,
    ValidatedOrder,
    ValidatedOrderLine,
)
from order_taking.core.domain.model.simple_types import (
    EmailAddress,
    OrderId,
    OrderLineId,
    OrderQuantity,
    ProductCode,
    String50,
    ZipCode,
)
from order_taking.core.ports.inbound.place_order import (
    UnvalidatedAddress,
    UnvalidatedCustomerInfo,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
)
from order_taking.core.ports.outbound.addresses import CheckAddressExists
from order_taking.core.ports.outbound.products import CheckProductCodeExists


def to_order_id(raw: str) -> Result[OrderId, PlaceOrderError]:
    return OrderId.create(raw).alt(
        lambda e: InvalidOrderId(message="invalid order id", reason=e)
    )


def to_customer_info(
    raw: UnvalidatedCustomerInfo,
) -> Result[CustomerInfo, PlaceOrderError]:
    def invalid(reason: ConstraintError) -> PlaceOrderError:
        return InvalidCustomerInfo(message="invalid customer info", reason=reason)

    first_name = String50.create(raw.first_name, "first_name")
    if isinstance(first_name, Failure):
        return first_name.alt(invalid)
    last_name = String50.create(raw.last_name, "last_name")
    if isinstance(last_name, Failure):
        return last_name.alt(invalid)
    email_address = EmailAddress.create(raw.email_address)
    if isinstance(email_address, Failure):
        return email_address.alt(invalid)

    return Success(
        CustomerInfo(
            first_name=first_name.unwrap(),
            last_name=last_name.unwrap(),
            email_address=email_address.unwrap(),
        )
    )


def check_product(
    check_product_exists: CheckProductCodeExists, product_code: ProductCode
) -> Result[None, PlaceOrderError]:
    """Ask the port; "not found" and "could not answer" stay distinct."""
    try:
        result = check_product_exists(product_code)
    except Exception as exc:  # noqa: BLE001
        return Failure(
            PortUnavailable(
                message=str(exc) or type(exc).__name__, port="check_product_exists"
            )
        )

    def to_order_error(err: ProductLookupError) -> PlaceOrderError:
        if isinstance(err, ProductNotFound):
            return UnknownProduct(
                message="product code not found", product_code=product_code.value
            )
        return PortUnavailable(message=err.message, port="check_product_exists")

    return result.alt(to_order_error)


def to_validated_order_line(
    check_product_exists: CheckProductCodeExists,
    raw: UnvalidatedOrderLine,
) -> Result[ValidatedOrderLine, PlaceOrderError]:
    def invalid(reason: ConstraintError) -> PlaceOrderError:
        return InvalidOrderLine(
            message="invalid order line", line_id=raw.order_line_id, reason=reason
        )

    product_code = ProductCode.create(raw.product_code)
    if isinstance(product_code, Failure):
        return product_code.alt(invalid)
    exists = check_product(check_product_exists, product_code.unwrap())
    if isinstance(exists, Failure):
        return exists

    order_line_id = OrderLineId.create(raw.order_line_id)
    if isinstance(order_line_id, Failure):
        return order_line_id.alt(invalid)
    quantity = OrderQuantity.create(raw.quantity)
    if isinstance(quantity, Failure):
        return quantity.alt(invalid)

    return Success(
        ValidatedOrderLine(
            order_line_id=order_line_id.unwrap(),
            product_code=product_code.unwrap(),
            quantity=quantity.unwrap(),
        )
    )


def _address_from_checked(raw: UnvalidatedAddress) -> Result[Address, ConstraintError]:
    address_line1 = String50.create(raw.address_line1, "address_line1")
    if isinstance(address_line1, Failure):
        return address_line1
    address_line2 = String50.create_optional(raw.address_line2, "address_line2")
    if isinstance(address_line2, Failure):
        return address_line2
    city = String50.create(raw.city, "city")
    if isinstance(city, Failure):
        return city
    zip_code = ZipCode.create(raw.zip_code)
    if isinstance(zip_code, Failure):
        return zip_code

    return Success(
        Address(
            address_line1=address_line1.unwrap(),
            address_line2=address_line2.unwrap(),
            city=city.unwrap(),
            zip_code=zip_code.unwrap(),
        )
    )


def to_address(
    check_address_exists: CheckAddressExists | None,
    raw: UnvalidatedAddress,
    field: str,
) -> Result[Address, PlaceOrderError]:
    if check_address_exists is None:
        return Failure(
            PortUnavailable(
                message="no address verification configured",
                port="check_address_exists",
            )
        )
    try:
        checked = check_address_exists(raw)
    except Exception as exc:  # noqa: BLE001
        return Failure(
            PortUnavailable(
                message=str(exc) or type(exc).__name__, port="check_address_exists"
            )
        )

    if isinstance(checked, Failure):
        err = checked.failure()
        if isinstance(err, AddressNotFound):
            return Failure(
                InvalidAddress(message="address not found", field=field, reason=err)
            )
        return Failure(PortUnavailable(message=err.message, port="check_address_exists"))

    return _address_from_checked(checked.unwrap().address).alt(
        lambda e: InvalidAddress(message="invalid address", field=field, reason=e)
    )


def validate_order(
    unvalidated_order: UnvalidatedOrder,
    check_product_exists: CheckProductCodeExists,
    check_address_exists: CheckAddressExists | None = None,
) -> Result[ValidatedOrder, PlaceOrderError]:
    order_id = to_order_id(unvalidated_order.order_id)
    if isinstance(order_id, Failure):
        return order_id

    customer_info: CustomerInfo | None = None
    if unvalidated_order.customer_info is not None:
        info = to_customer_info(unvalidated_order.customer_info)
        if isinstance(info, Failure):
            return info
        customer_info = info.unwrap()

    lines: List[ValidatedOrderLine] = []
    for raw_line in unvalidated_order.lines:
        line = to_validated_order_line(check_product_exists, raw_line)
        if isinstance(line, Failure):
            return line
        lines.append(line.unwrap())
    if not lines:
        return Failure(EmptyOrder(message="at least one order line is required"))

    addresses: dict[str, Address | None] = {}
    for field, raw_address in (
        ("shipping_address", unvalidated_order.shipping_address),
        ("billing_address", unvalidated_order.billing_address),
    ):
        if raw_address is None:
            addresses[field] = None
            continue
        address = to_address(check_address_exists, raw_address, field)
        if isinstance(address, Failure):
            return address
        addresses[field] = address.unwrap()

    return Success(
        ValidatedOrder(
            order_id=order_id.unwrap(),
            lines=tuple(lines),
            customer_info=customer_info,
            shipping_address=addresses["shipping_address"],
            billing_address=addresses["billing_address"],
        )
    )
