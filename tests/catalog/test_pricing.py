"""Tests for variant price resolution."""

from decimal import Decimal

import pytest

from app.catalog.pricing import resolve_variant_price, to_wire_price
from app.domain.value_objects import Price


class TestResolveVariantPrice:
    """Tests for resolve_variant_price."""

    def test_own_price_wins(self) -> None:
        """A priced variant keeps its own price."""
        resolved = resolve_variant_price(Price(Decimal("11.99")), Price(Decimal("10.99")))
        assert resolved == Price(Decimal("11.99"))

    def test_zero_inherits_product_price(self) -> None:
        """An unpriced variant inherits the product price."""
        resolved = resolve_variant_price(Price.unset(), Price(Decimal("10.99")))
        assert resolved == Price(Decimal("10.99"))

    def test_cheaper_variant_still_wins(self) -> None:
        """No comparison between prices: set means set."""
        resolved = resolve_variant_price(Price(Decimal("1.00")), Price(Decimal("99.99")))
        assert resolved.amount == Decimal("1.00")

    @pytest.mark.parametrize("product_price", ["0", "0.01", "10.99", "12345.67"])
    def test_unset_variant_returns_product_price_for_any_price(
        self, product_price: str
    ) -> None:
        """Fallback is exactly the product price."""
        resolved = resolve_variant_price(Decimal("0.00"), Decimal(product_price))
        assert resolved.amount == Decimal(product_price)

    def test_accepts_raw_decimals(self) -> None:
        """Stored Decimal columns can be passed directly."""
        resolved = resolve_variant_price(Decimal("5.25"), Decimal("8.00"))
        assert resolved == Price(Decimal("5.25"))


class TestToWirePrice:
    """Tests for to_wire_price."""

    def test_set_price_becomes_float(self) -> None:
        """Set prices render as their nearest float."""
        assert to_wire_price(Price(Decimal("10.99"))) == 10.99

    def test_unset_price_is_omitted(self) -> None:
        """Unset prices render as None (dropped from the wire)."""
        assert to_wire_price(Price.unset()) is None

    def test_both_unset_resolves_to_nothing(self) -> None:
        """Unpriced variant of an unpriced product has no price."""
        assert to_wire_price(resolve_variant_price(Price.unset(), Price.unset())) is None
