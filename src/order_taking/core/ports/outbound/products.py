from __future__ import annotations

from typing import Callable

from returns.result import Result

from order_taking.core.domain.model.errors import ProductLookupError
from order_taking.core.domain.model.simple_types import Money, OrderQuantity, ProductCode

# Success(None) when the code exists, Failure(ProductNotFound) when it does not.
# Any other ProductLookupError means the lookup itself could not answer.
CheckProductCodeExists = Callable[[ProductCode], Result[None, ProductLookupError]]

GetLinePrice = Callable[[ProductCode, OrderQuantity], Money]
