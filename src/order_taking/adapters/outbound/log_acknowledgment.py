from __future__ import annotations

from dataclasses import dataclass
from html import escape

import structlog
from returns.io import IOFailure, IOResult, IOSuccess

from order_taking.core.domain.model.errors import PlaceOrderError, PublishError
from order_taking.core.domain.model.order import PricedOrder
from order_taking.core.ports.outbound.acknowledgment import HtmlString, OrderAcknowledgment

logger = structlog.get_logger(__name__)


def render_acknowledgment_letter(priced_order: PricedOrder) -> HtmlString:
    order = priced_order.order
    rows = "".join(
        f"<tr><td>{escape(ln.line.product_code.value)}</td>"
        f"<td>{ln.line.quantity.value}</td>"
        f"<td>{ln.line_price.amount} {escape(ln.line_price.currency)}</td></tr>"
        for ln in priced_order.lines
    )
    total = priced_order.amount_to_bill
    return HtmlString(
        f"<p>Thank you for order {escape(order.order_id.value)}.</p>"
        f"<table>{rows}</table>"
        f"<p>Total: {total.amount} {escape(total.currency)}</p>"
    )


@dataclass
class LogAcknowledgmentSender:
    fail: bool = False

    def send(self, acknowledgment: OrderAcknowledgment) -> IOResult[None, PlaceOrderError]:
        if self.fail:
            return IOFailure(PublishError(message="mail relay is down"))
        logger.info(
            "acknowledgment_sent",
            email_address=acknowledgment.email_address.value,
            letter_length=len(acknowledgment.letter.value),
        )
        return IOSuccess(None)
