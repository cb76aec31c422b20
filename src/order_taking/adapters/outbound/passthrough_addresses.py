from __future__ import annotations

from returns.result import Result, Success

from order_taking.core.domain.model.errors import AddressLookupError
from order_taking.core.ports.inbound.place_order import UnvalidatedAddress
from order_taking.core.ports.outbound.addresses import CheckedAddress


def check_address_passthrough(
    address: UnvalidatedAddress,
) -> Result[CheckedAddress, AddressLookupError]:
    # Local/dev stand-in for the address verification service.
    return Success(CheckedAddress(address))
