from __future__ import annotations

import json

from pydantic import ValidationError as RequestValidationError
from returns.io import IOSuccess

from order_taking.adapters.inbound.dto import (
    PlaceOrderRequest,
    error_to_response,
    event_to_dict,
    to_unvalidated_order,
)
from order_taking.core.ports.inbound.place_order import PlaceOrderWorkflow


def run_cli(handle_place_order: PlaceOrderWorkflow, raw: str) -> int:
    """
    raw: JSON string.
    Example:
      {"order_id":"ORD-1",
       "lines":[{"order_line_id":"L1","product_code":"W1234","quantity":5}]}
    """
    try:
        req = PlaceOrderRequest.model_validate_json(raw)
    except RequestValidationError as e:
        print(f"invalid_input: {e.error_count()} error(s)")
        return 2

    io_result = handle_place_order(to_unvalidated_order(req))

    if isinstance(io_result, IOSuccess):
        events = io_result._inner_value.unwrap()
        print("[ok]", json.dumps([event_to_dict(e) for e in events]))
        return 0

    err = io_result._inner_value.failure()
    print("[ng]", json.dumps(error_to_response(err).model_dump(exclude_none=True)))
    return 1
