from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PlaceOrderError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ValidationError(PlaceOrderError):
    pass


# ---- Constraint violations (one constrained value) -------------------------


@dataclass(frozen=True)
class ConstraintError(ValidationError):
    field: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


@dataclass(frozen=True)
class FieldTooLong(ConstraintError):
    max_length: int


@dataclass(frozen=True)
class FieldEmpty(ConstraintError):
    pass


@dataclass(frozen=True)
class InvalidEmailFormat(ConstraintError):
    pass


@dataclass(frozen=True)
class InvalidZipCode(ConstraintError):
    pass


@dataclass(frozen=True)
class NonPositiveQuantity(ConstraintError):
    value: int


# ---- Order-level validation failures ---------------------------------------


@dataclass(frozen=True)
class InvalidOrderId(ValidationError):
    reason: ConstraintError

    def __str__(self) -> str:
        return f"invalid_order_id: {self.reason}"


@dataclass(frozen=True)
class InvalidCustomerInfo(ValidationError):
    reason: ConstraintError

    def __str__(self) -> str:
        return f"invalid_customer_info: {self.reason}"


@dataclass(frozen=True)
class InvalidOrderLine(ValidationError):
    line_id: str
    reason: ConstraintError

    def __str__(self) -> str:
        return f"invalid_order_line: line_id={self.line_id!r} {self.reason}"


@dataclass(frozen=True)
class UnknownProduct(ValidationError):
    product_code: str

    def __str__(self) -> str:
        return f"unknown_product: {self.product_code} ({self.message})"


@dataclass(frozen=True)
class EmptyOrder(ValidationError):
    pass


@dataclass(frozen=True)
class InvalidAddress(ValidationError):
    field: str
    reason: PlaceOrderError

    def __str__(self) -> str:
        return f"invalid_address: {self.field} {self.reason}"


# ---- Collaborator failures -------------------------------------------------


@dataclass(frozen=True)
class PortUnavailable(PlaceOrderError):
    port: str

    def __str__(self) -> str:
        return f"port_unavailable: {self.port} ({self.message})"


@dataclass(frozen=True)
class PricingError(PlaceOrderError):
    pass


@dataclass(frozen=True)
class PublishError(PlaceOrderError):
    pass


# ---- Errors reported by outbound ports -------------------------------------


@dataclass(frozen=True)
class ProductLookupError(PlaceOrderError):
    pass


@dataclass(frozen=True)
class ProductNotFound(ProductLookupError):
    product_code: str


@dataclass(frozen=True)
class AddressLookupError(PlaceOrderError):
    pass


@dataclass(frozen=True)
class AddressNotFound(AddressLookupError):
    pass
