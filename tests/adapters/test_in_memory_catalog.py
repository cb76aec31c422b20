from __future__ import annotations

from decimal import Decimal

from returns.result import Success

from order_taking.adapters.outbound.in_memory_catalog import InMemoryProductCatalog
from order_taking.core.domain.model.errors import ProductNotFound
from order_taking.core.domain.model.simple_types import Money, OrderQuantity, ProductCode


class TestInMemoryProductCatalog:
    def test_known_code(self, catalog: InMemoryProductCatalog) -> None:
        assert catalog.check_product_exists(ProductCode("P1")) == Success(None)

    def test_unknown_code(self, catalog: InMemoryProductCatalog) -> None:
        err = catalog.check_product_exists(ProductCode("P9")).failure()
        assert isinstance(err, ProductNotFound)
        assert err.product_code == "P9"

    def test_line_price(self) -> None:
        catalog = InMemoryProductCatalog(prices={"G1": Decimal("0.99")}, currency="USD")
        price = catalog.get_line_price(ProductCode("G1"), OrderQuantity(3))
        assert price == Money.of("2.97", "USD")
