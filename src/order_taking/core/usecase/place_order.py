from __future__ import annotations

from typing import List

import structlog
from returns.io import IOResult, IOSuccess
from returns.result import Failure, Result

from order_taking.core.domain.model.errors import PlaceOrderError
from order_taking.core.domain.model.order import PricedOrder
from order_taking.core.domain.model.simple_types import DEFAULT_CURRENCY
from order_taking.core.domain.service.pricing import price_order
from order_taking.core.domain.service.validation import validate_order
from order_taking.core.ports.inbound.place_order import PlaceOrder, UnvalidatedOrder
from order_taking.core.ports.outbound.acknowledgment import (
    CreateAcknowledgmentLetter,
    OrderAcknowledgment,
    SendAcknowledgment,
)
from order_taking.core.ports.outbound.addresses import CheckAddressExists
from order_taking.core.ports.outbound.events import (
    BillableOrderPlaced,
    OrderAcknowledgmentSent,
    OrderPlaced,
    PlaceOrderEvent,
    PublishEvent,
    event_name,
)
from order_taking.core.ports.outbound.products import CheckProductCodeExists, GetLinePrice

logger = structlog.get_logger(__name__)


def place_order(
    unvalidated_order: UnvalidatedOrder,
    *,
    check_product_exists: CheckProductCodeExists,
    check_address_exists: CheckAddressExists | None = None,
    get_line_price: GetLinePrice | None = None,
    currency: str = DEFAULT_CURRENCY,
) -> Result[PlaceOrderEvent, PlaceOrderError]:
    """Pure: unvalidated order -> BillableOrderPlaced (no logging, no retries)."""
    return (
        validate_order(unvalidated_order, check_product_exists, check_address_exists)
        .bind(lambda order: price_order(order, get_line_price, currency))
        .map(BillableOrderPlaced)
    )


def _acknowledge(
    priced_order: PricedOrder,
    create_acknowledgment_letter: CreateAcknowledgmentLetter | None,
    send_acknowledgment: SendAcknowledgment | None,
) -> OrderAcknowledgmentSent | None:
    customer_info = priced_order.order.customer_info
    if customer_info is None:
        return None
    if create_acknowledgment_letter is None or send_acknowledgment is None:
        return None

    order_id = priced_order.order.order_id
    try:
        letter = create_acknowledgment_letter(priced_order)
        sent = send_acknowledgment(
            OrderAcknowledgment(email_address=customer_info.email_address, letter=letter)
        )
    except Exception as exc:  # noqa: BLE001
        logger.warning(
            "acknowledgment_not_sent",
            order_id=order_id.value,
            error=str(exc) or type(exc).__name__,
        )
        return None
    if not isinstance(sent, IOSuccess):
        # The order stands even if the customer was not told about it.
        logger.warning(
            "acknowledgment_not_sent",
            order_id=order_id.value,
            error=str(sent._inner_value.failure()),
        )
        return None
    return OrderAcknowledgmentSent(
        order_id=order_id,
        email_address=customer_info.email_address,
    )


def place_order_workflow(
    unvalidated_order: UnvalidatedOrder,
    *,
    place: PlaceOrder,
    publish_event: PublishEvent,
    create_acknowledgment_letter: CreateAcknowledgmentLetter | None = None,
    send_acknowledgment: SendAcknowledgment | None = None,
) -> IOResult[tuple[PlaceOrderEvent, ...], PlaceOrderError]:
    # 1. Validation + pricing (pure Result)
    placed = place(unvalidated_order)

    # 2. Lift into IOResult and chain the side effects
    def acknowledge_and_publish(
        billable: PlaceOrderEvent,
    ) -> IOResult[tuple[PlaceOrderEvent, ...], PlaceOrderError]:
        events: List[PlaceOrderEvent] = [billable]
        if isinstance(billable, BillableOrderPlaced):
            priced_order = billable.priced_order
            events.insert(0, OrderPlaced(priced_order))
            acknowledged = _acknowledge(
                priced_order, create_acknowledgment_letter, send_acknowledgment
            )
            if acknowledged is not None:
                events.append(acknowledged)
        return _publish_all(tuple(events), publish_event)

    if isinstance(placed, Failure):
        logger.info(
            "order_rejected",
            order_id=unvalidated_order.order_id,
            error_type=type(placed.failure()).__name__,
            error=str(placed.failure()),
        )
    return IOResult.from_result(placed).bind(acknowledge_and_publish)


def _publish_all(
    events: tuple[PlaceOrderEvent, ...], publish_event: PublishEvent
) -> IOResult[tuple[PlaceOrderEvent, ...], PlaceOrderError]:
    for event in events:
        published = publish_event(event)
        if not isinstance(published, IOSuccess):
            return published
        logger.debug("event_published", event_type=event_name(event))
    return IOSuccess(events)
