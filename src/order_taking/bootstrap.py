from __future__ import annotations

from functools import partial

from fastapi import FastAPI

from order_taking.adapters.inbound.web import create_fastapi_app
from order_taking.adapters.outbound.in_memory_catalog import InMemoryProductCatalog
from order_taking.adapters.outbound.log_acknowledgment import (
    LogAcknowledgmentSender,
    render_acknowledgment_letter,
)
from order_taking.adapters.outbound.log_events import log_publish_event
from order_taking.adapters.outbound.passthrough_addresses import check_address_passthrough
from order_taking.config.logging import configure_logging
from order_taking.config.settings import Settings, get_settings
from order_taking.core.ports.inbound.place_order import PlaceOrderWorkflow
from order_taking.core.usecase.place_order import place_order, place_order_workflow


def build_place_order_workflow(settings: Settings | None = None) -> PlaceOrderWorkflow:
    settings = settings or get_settings()
    catalog = InMemoryProductCatalog(prices=settings.catalog, currency=settings.currency)

    # Dependencies are injected by partial application (functions, not classes)
    place = partial(
        place_order,
        check_product_exists=catalog.check_product_exists,
        check_address_exists=check_address_passthrough,
        get_line_price=catalog.get_line_price,
        currency=settings.currency,
    )
    return partial(
        place_order_workflow,
        place=place,
        publish_event=log_publish_event,
        create_acknowledgment_letter=render_acknowledgment_letter,
        send_acknowledgment=LogAcknowledgmentSender().send,
    )


def build_app(settings: Settings | None = None) -> FastAPI:
    return create_fastapi_app(build_place_order_workflow(settings))


def create_asgi_app() -> FastAPI:
    settings = get_settings()
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
    return build_app(settings)
