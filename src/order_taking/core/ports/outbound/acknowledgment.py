from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from returns.io import IOResult

from order_taking.core.domain.model.errors import PlaceOrderError
from order_taking.core.domain.model.order import PricedOrder
from order_taking.core.domain.model.simple_types import EmailAddress


@dataclass(frozen=True)
class HtmlString:
    value: str


@dataclass(frozen=True)
class OrderAcknowledgment:
    email_address: EmailAddress
    letter: HtmlString


CreateAcknowledgmentLetter = Callable[[PricedOrder], HtmlString]
SendAcknowledgment = Callable[[OrderAcknowledgment], IOResult[None, PlaceOrderError]]
