from __future__ import annotations

import structlog
from returns.io import IOResult, IOSuccess

from order_taking.core.domain.model.errors import PlaceOrderError
from order_taking.core.ports.outbound.events import (
    BillableOrderPlaced,
    OrderAcknowledgmentSent,
    OrderPlaced,
    PlaceOrderEvent,
    event_name,
)

logger = structlog.get_logger(__name__)


def log_publish_event(event: PlaceOrderEvent) -> IOResult[None, PlaceOrderError]:
    if isinstance(event, (OrderPlaced, BillableOrderPlaced)):
        order = event.priced_order.order
        logger.info(
            event_name(event),
            order_id=order.order_id.value,
            lines=len(order.lines),
            amount_to_bill=str(event.priced_order.amount_to_bill.amount),
        )
    elif isinstance(event, OrderAcknowledgmentSent):
        logger.info(
            event_name(event),
            order_id=event.order_id.value,
            email_address=event.email_address.value,
        )
    return IOSuccess(None)
