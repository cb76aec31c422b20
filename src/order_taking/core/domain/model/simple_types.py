"""Constrained value types.

Each type checks its invariant in ``__post_init__``, so a value that exists
is valid for its whole lifetime. ``create`` is the checked factory used at
the boundary: it returns ``Failure(ConstraintError)`` instead of raising.
"""

from __future__ import annotations

import abc
import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, ClassVar, Iterable, TypeVar

from returns.result import Failure, Result, Success

from order_taking.core.domain.model.errors import (
    ConstraintError,
    FieldEmpty,
    FieldTooLong,
    InvalidEmailFormat,
    InvalidZipCode,
    NonPositiveQuantity,
)

EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+")
ZIP_CODE_PATTERN = re.compile(r"[0-9]{5}")

DEFAULT_CURRENCY = "JPY"

_T = TypeVar("_T", bound="_Constrained")


class _Constrained(abc.ABC):
    field_name: ClassVar[str]
    value: Any

    @classmethod
    @abc.abstractmethod
    def violation(cls, raw: Any, field: str) -> ConstraintError | None:
        """Return the broken rule for ``raw``, or None when it holds."""

    @classmethod
    def create(
        cls: type[_T], raw: Any, field: str | None = None
    ) -> Result[_T, ConstraintError]:
        error = cls.violation(raw, field or cls.field_name)
        if error is not None:
            return Failure(error)
        return Success(cls(raw))  # type: ignore[call-arg]

    def __post_init__(self) -> None:
        error = self.violation(self.value, self.field_name)
        if error is not None:
            raise error

    def __str__(self) -> str:
        return str(self.value)


def _blank(raw: str, field: str) -> ConstraintError | None:
    if not raw.strip():
        return FieldEmpty(message="must not be empty", field=field)
    return None


def _too_long(raw: str, field: str, max_length: int) -> ConstraintError | None:
    if len(raw) > max_length:
        return FieldTooLong(
            message=f"must be at most {max_length} characters",
            field=field,
            max_length=max_length,
        )
    return None


@dataclass(frozen=True)
class String50(_Constrained):
    value: str

    field_name: ClassVar[str] = "string50"
    max_length: ClassVar[int] = 50

    @classmethod
    def violation(cls, raw: str, field: str) -> ConstraintError | None:
        return _too_long(raw, field, cls.max_length)

    @classmethod
    def create_optional(
        cls, raw: str | None, field: str | None = None
    ) -> Result[String50 | None, ConstraintError]:
        if not raw:
            return Success(None)
        return cls.create(raw, field)


@dataclass(frozen=True)
class EmailAddress(_Constrained):
    value: str

    field_name: ClassVar[str] = "email_address"

    @classmethod
    def violation(cls, raw: str, field: str) -> ConstraintError | None:
        if EMAIL_PATTERN.fullmatch(raw) is None:
            return InvalidEmailFormat(message="must have a single @ separator", field=field)
        return None


@dataclass(frozen=True)
class ZipCode(_Constrained):
    value: str

    field_name: ClassVar[str] = "zip_code"

    @classmethod
    def violation(cls, raw: str, field: str) -> ConstraintError | None:
        if ZIP_CODE_PATTERN.fullmatch(raw) is None:
            return InvalidZipCode(message="must be 5 digits", field=field)
        return None


@dataclass(frozen=True)
class OrderId(_Constrained):
    value: str

    field_name: ClassVar[str] = "order_id"

    @classmethod
    def violation(cls, raw: str, field: str) -> ConstraintError | None:
        return _blank(raw, field)


@dataclass(frozen=True)
class OrderLineId(_Constrained):
    value: str

    field_name: ClassVar[str] = "order_line_id"

    @classmethod
    def violation(cls, raw: str, field: str) -> ConstraintError | None:
        return _blank(raw, field)


@dataclass(frozen=True)
class ProductCode(_Constrained):
    """Existence in the catalog is a runtime fact, checked through a port."""

    value: str

    field_name: ClassVar[str] = "product_code"

    @classmethod
    def violation(cls, raw: str, field: str) -> ConstraintError | None:
        return _blank(raw, field)


@dataclass(frozen=True)
class OrderQuantity(_Constrained):
    value: int

    field_name: ClassVar[str] = "quantity"

    @classmethod
    def violation(cls, raw: int, field: str) -> ConstraintError | None:
        if raw <= 0:
            return NonPositiveQuantity(message="must be > 0", field=field, value=raw)
        return None


@dataclass(frozen=True)
class Money:
    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError(f"negative_amount: {self.amount}")

    @staticmethod
    def of(amount: Decimal | int | str, currency: str = DEFAULT_CURRENCY) -> Money:
        dec = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        return Money(dec, currency)

    @staticmethod
    def zero(currency: str = DEFAULT_CURRENCY) -> Money:
        return Money.of(0, currency)

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, n: int) -> Money:
        return Money(
            (self.amount * Decimal(n)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP),
            self.currency,
        )

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValueError(f"currency_mismatch: {self.currency} vs {other.currency}")


def sum_money(values: Iterable[Money], currency: str = DEFAULT_CURRENCY) -> Money:
    total = Money.zero(currency)
    for v in values:
        total = total + v
    return total
