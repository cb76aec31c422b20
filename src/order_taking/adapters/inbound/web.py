from __future__ import annotations

from typing import Any

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from returns.io import IOSuccess

from order_taking.adapters.inbound.dto import (
    ErrorResponse,
    PlaceOrderRequest,
    PlaceOrderResponse,
    error_to_response,
    event_to_dict,
    to_unvalidated_order,
)
from order_taking.core.domain.model.errors import (
    PlaceOrderError,
    PortUnavailable,
    PublishError,
    ValidationError,
)
from order_taking.core.ports.inbound.place_order import PlaceOrderWorkflow
from order_taking.core.ports.outbound.events import PlaceOrderEvent

logger = structlog.get_logger(__name__)


def _to_http_error(err: PlaceOrderError) -> tuple[int, dict]:
    if isinstance(err, ValidationError):
        status = 400
    elif isinstance(err, (PortUnavailable, PublishError)):
        status = 503
    else:
        status = 500
    return status, error_to_response(err).model_dump(exclude_none=True)


def create_fastapi_app(handle_place_order: PlaceOrderWorkflow) -> FastAPI:
    app = FastAPI(title="order_taking")

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _: Request, exc: RequestValidationError
    ) -> JSONResponse:
        body = ErrorResponse(type="RequestValidationError", message="invalid request")
        return JSONResponse(status_code=400, content=body.model_dump(exclude_none=True))

    @app.exception_handler(Exception)
    async def handle_unexpected(_: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled_error")
        body = ErrorResponse(type=type(exc).__name__, message="internal server error")
        return JSONResponse(status_code=500, content=body.model_dump(exclude_none=True))

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/orders", status_code=201)
    def place_order_endpoint(req: PlaceOrderRequest) -> Any:
        io_result = handle_place_order(to_unvalidated_order(req))
        if isinstance(io_result, IOSuccess):
            events: tuple[PlaceOrderEvent, ...] = io_result._inner_value.unwrap()
            return PlaceOrderResponse(events=[event_to_dict(e) for e in events]).model_dump()
        err: PlaceOrderError = io_result._inner_value.failure()
        status, body = _to_http_error(err)
        return JSONResponse(status_code=status, content=body)

    return app
