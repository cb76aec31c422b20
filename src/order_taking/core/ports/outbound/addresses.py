from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from returns.result import Result

from order_taking.core.domain.model.errors import AddressLookupError
from order_taking.core.ports.inbound.place_order import UnvalidatedAddress


@dataclass(frozen=True)
class CheckedAddress:
    """An address the verification service has confirmed exists."""

    address: UnvalidatedAddress


CheckAddressExists = Callable[[UnvalidatedAddress], Result[CheckedAddress, AddressLookupError]]
