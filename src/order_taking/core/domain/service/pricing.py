from __future__ import annotations

from typing import List

from returns.result import Failure, Result, Success

from order_taking.core.domain.model.errors import (
    PlaceOrderError,
    PortUnavailable,
    PricingError,
)
from order_taking.core.domain.model.order import PricedOrder, PricedOrderLine, ValidatedOrder
from order_taking.core.domain.model.simple_types import DEFAULT_CURRENCY, Money, sum_money
from order_taking.core.ports.outbound.products import GetLinePrice


def price_order(
    order: ValidatedOrder,
    get_line_price: GetLinePrice | None = None,
    currency: str = DEFAULT_CURRENCY,
) -> Result[PricedOrder, PlaceOrderError]:
    """Price every line; without a pricing collaborator each line is free."""
    priced: List[PricedOrderLine] = []
    for line in order.lines:
        if get_line_price is None:
            price = Money.zero(currency)
        else:
            try:
                price = get_line_price(line.product_code, line.quantity)
            except Exception as exc:  # noqa: BLE001
                return Failure(
                    PortUnavailable(
                        message=str(exc) or type(exc).__name__, port="get_line_price"
                    )
                )
        priced.append(PricedOrderLine(line=line, line_price=price))

    try:
        amount_to_bill = sum_money(
            (p.line_price for p in priced), currency=priced[0].line_price.currency
        )
    except ValueError as exc:
        return Failure(PricingError(message=str(exc)))

    return Success(PricedOrder(order=order, lines=tuple(priced), amount_to_bill=amount_to_bill))
