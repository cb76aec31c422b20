"""Tests for the validation pipeline (unvalidated -> validated order)."""

from __future__ import annotations

import pytest
from returns.result import Failure, Success

from order_taking.core.domain.model.errors import (
    AddressLookupError,
    AddressNotFound,
    EmptyOrder,
    FieldEmpty,
    FieldTooLong,
    InvalidAddress,
    InvalidCustomerInfo,
    InvalidEmailFormat,
    InvalidOrderId,
    InvalidOrderLine,
    InvalidZipCode,
    NonPositiveQuantity,
    PortUnavailable,
    ProductLookupError,
    ProductNotFound,
    UnknownProduct,
)
from order_taking.core.domain.model.order import ValidatedOrder
from order_taking.core.domain.model.simple_types import (
    OrderId,
    OrderLineId,
    OrderQuantity,
    ProductCode,
)
from order_taking.core.domain.service.validation import (
    to_customer_info,
    validate_order,
)
from order_taking.core.ports.inbound.place_order import (
    UnvalidatedAddress,
    UnvalidatedCustomerInfo,
    UnvalidatedOrderLine,
)
from order_taking.core.ports.outbound.addresses import CheckedAddress


def known(*codes: str):
    def check(code: ProductCode):
        if code.value in codes:
            return Success(None)
        return Failure(ProductNotFound(message="absent", product_code=code.value))

    return check


def line(line_id: str = "L1", code: str = "P1", quantity: int = 5) -> UnvalidatedOrderLine:
    return UnvalidatedOrderLine(order_line_id=line_id, product_code=code, quantity=quantity)


class TestScenarios:
    def test_valid_order_with_known_product(self, order_factory) -> None:
        result = validate_order(order_factory(), known("P1"))
        assert isinstance(result, Success)
        order = result.unwrap()
        assert order.order_id == OrderId("ORD-1")
        assert len(order.lines) == 1
        assert order.lines[0].order_line_id == OrderLineId("L1")
        assert order.lines[0].product_code == ProductCode("P1")
        assert order.lines[0].quantity == OrderQuantity(5)
        assert order.customer_info is None
        assert order.shipping_address is None

    def test_unknown_product(self, order_factory) -> None:
        result = validate_order(order_factory(), known())
        assert isinstance(result, Failure)
        err = result.failure()
        assert isinstance(err, UnknownProduct)
        assert err.product_code == "P1"

    def test_zero_lines_is_an_empty_order(self, order_factory) -> None:
        result = validate_order(order_factory(lines=()), known("P1"))
        assert isinstance(result.failure(), EmptyOrder)

    def test_zero_quantity_is_attributed_to_its_line(self, order_factory) -> None:
        order = order_factory(lines=(line("L1", "P1", 5), line("L2", "P1", 0)))
        err = validate_order(order, known("P1")).failure()
        assert isinstance(err, InvalidOrderLine)
        assert err.line_id == "L2"
        assert isinstance(err.reason, NonPositiveQuantity)
        assert err.reason.field == "quantity"

    def test_customer_email_without_at(self) -> None:
        raw = UnvalidatedCustomerInfo(
            first_name="Jane", last_name="Doe", email_address="no-at-symbol"
        )
        err = to_customer_info(raw).failure()
        assert isinstance(err, InvalidCustomerInfo)
        assert isinstance(err.reason, InvalidEmailFormat)


class TestOrderId:
    def test_empty_order_id(self, order_factory) -> None:
        err = validate_order(order_factory(order_id=""), known("P1")).failure()
        assert isinstance(err, InvalidOrderId)
        assert isinstance(err.reason, FieldEmpty)

    def test_order_id_checked_before_lines(self, order_factory) -> None:
        err = validate_order(order_factory(order_id="", lines=()), known()).failure()
        assert isinstance(err, InvalidOrderId)

    def test_long_ids_pass_validation(self, order_factory) -> None:
        order = order_factory(order_id="X" * 51, lines=(line(line_id="L" * 51),))
        validated = validate_order(order, known("P1")).unwrap()
        assert validated.order_id.value == "X" * 51
        assert validated.lines[0].order_line_id.value == "L" * 51


class TestLines:
    def test_lines_keep_input_order(self, order_factory) -> None:
        order = order_factory(lines=(line("L2", "P2", 1), line("L1", "P1", 3)))
        validated = validate_order(order, known("P1", "P2")).unwrap()
        assert [ln.order_line_id.value for ln in validated.lines] == ["L2", "L1"]

    def test_first_failing_line_wins(self, order_factory) -> None:
        order = order_factory(lines=(line("L1", "NOPE", 1), line("L2", "P1", 0)))
        err = validate_order(order, known("P1")).failure()
        assert isinstance(err, UnknownProduct)
        assert err.product_code == "NOPE"

    def test_existence_checked_before_quantity(self, order_factory) -> None:
        order = order_factory(lines=(line("L1", "NOPE", 0),))
        assert isinstance(validate_order(order, known()).failure(), UnknownProduct)

    def test_blank_product_code_never_reaches_the_port(self, order_factory) -> None:
        calls: list[ProductCode] = []

        def check(code: ProductCode):
            calls.append(code)
            return Success(None)

        err = validate_order(order_factory(lines=(line(code=""),)), check).failure()
        assert isinstance(err, InvalidOrderLine)
        assert isinstance(err.reason, FieldEmpty)
        assert err.reason.field == "product_code"
        assert calls == []

    def test_empty_line_id(self, order_factory) -> None:
        err = validate_order(order_factory(lines=(line(line_id=""),)), known("P1")).failure()
        assert isinstance(err, InvalidOrderLine)
        assert err.line_id == ""
        assert err.reason.field == "order_line_id"

    def test_port_called_once_per_line(self, order_factory) -> None:
        calls: list[str] = []

        def check(code: ProductCode):
            calls.append(code.value)
            return Success(None)

        order = order_factory(lines=(line("L1", "P1"), line("L2", "P2"), line("L3", "P1")))
        validate_order(order, check)
        assert calls == ["P1", "P2", "P1"]


class TestPortFailures:
    def test_lookup_error_is_not_unknown_product(self, order_factory) -> None:
        def check(code: ProductCode):
            return Failure(ProductLookupError(message="timeout"))

        err = validate_order(order_factory(), check).failure()
        assert isinstance(err, PortUnavailable)
        assert err.port == "check_product_exists"
        assert err.message == "timeout"

    def test_raising_port_is_unavailable(self, order_factory) -> None:
        def check(code: ProductCode):
            raise ConnectionError("db down")

        err = validate_order(order_factory(), check).failure()
        assert isinstance(err, PortUnavailable)
        assert err.message == "db down"


class TestCustomerInfo:
    def test_valid(self, order_factory, customer) -> None:
        order = validate_order(order_factory(customer_info=customer), known("P1")).unwrap()
        assert order.customer_info is not None
        assert order.customer_info.email_address.value == "jane@example.com"

    def test_long_last_name(self) -> None:
        raw = UnvalidatedCustomerInfo(
            first_name="Jane", last_name="x" * 51, email_address="jane@example.com"
        )
        err = to_customer_info(raw).failure()
        assert isinstance(err.reason, FieldTooLong)
        assert err.reason.field == "last_name"


def passthrough(address: UnvalidatedAddress):
    return Success(CheckedAddress(address))


class TestAddresses:
    def test_both_addresses_verified(self, order_factory, address) -> None:
        order = order_factory(shipping_address=address, billing_address=address)
        validated = validate_order(order, known("P1"), passthrough).unwrap()
        assert validated.shipping_address is not None
        assert validated.shipping_address.zip_code.value == "12345"
        assert validated.shipping_address.address_line2 is None
        assert validated.billing_address == validated.shipping_address

    def test_unknown_address(self, order_factory, address) -> None:
        def check(raw: UnvalidatedAddress):
            return Failure(AddressNotFound(message="no such street"))

        err = validate_order(
            order_factory(billing_address=address), known("P1"), check
        ).failure()
        assert isinstance(err, InvalidAddress)
        assert err.field == "billing_address"
        assert isinstance(err.reason, AddressNotFound)

    def test_bad_zip_after_verification(self, order_factory) -> None:
        bad = UnvalidatedAddress(address_line1="1 Main St", city="X", zip_code="ABC")
        err = validate_order(
            order_factory(shipping_address=bad), known("P1"), passthrough
        ).failure()
        assert isinstance(err, InvalidAddress)
        assert isinstance(err.reason, InvalidZipCode)

    def test_verification_service_down(self, order_factory, address) -> None:
        def check(raw: UnvalidatedAddress):
            return Failure(AddressLookupError(message="503"))

        err = validate_order(
            order_factory(shipping_address=address), known("P1"), check
        ).failure()
        assert isinstance(err, PortUnavailable)
        assert err.port == "check_address_exists"

    def test_address_without_checker(self, order_factory, address) -> None:
        err = validate_order(order_factory(shipping_address=address), known("P1")).failure()
        assert isinstance(err, PortUnavailable)


class TestPurity:
    def test_same_input_same_outcome(self, order_factory) -> None:
        order = order_factory(lines=(line("L1", "P1", 2), line("L2", "P2", 0)))
        check = known("P1", "P2")
        assert validate_order(order, check) == validate_order(order, check)

    def test_success_is_repeatable(self, order_factory) -> None:
        check = known("P1")
        assert validate_order(order_factory(), check) == validate_order(order_factory(), check)


class TestValidatedOrder:
    def test_cannot_be_built_without_lines(self) -> None:
        with pytest.raises(ValueError):
            ValidatedOrder(order_id=OrderId("ORD-1"), lines=())
