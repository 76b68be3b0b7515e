"""Unit tests for Product DTOs.

Covers:
- CreateProductDTO: coercion of raw JSON values, validation, immutability.
- UpdateProductDTO: required availability and its boolean spellings.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.products.dtos import CreateProductDTO, UpdateProductDTO

pytestmark = pytest.mark.unit


# ===========================================================================
# CreateProductDTO
# ===========================================================================


class TestCreateProductDTO:
    def test_create_with_valid_data(self):
        dto = CreateProductDTO(name="Widget", price=Decimal("19.99"))
        assert dto.name == "Widget"
        assert dto.price == Decimal("19.99")

    @pytest.mark.parametrize(
        "raw, expected",
        [(50, Decimal("50")), ("19.99", Decimal("19.99")), ("7", Decimal("7"))],
    )
    def test_price_is_coerced_to_decimal(self, raw, expected):
        dto = CreateProductDTO(name="Widget", price=raw)
        assert dto.price == expected

    def test_numeric_name_is_coerced_to_text(self):
        dto = CreateProductDTO(name=123, price=1)
        assert dto.name == "123"

    def test_boolean_name_is_coerced_to_text(self):
        dto = CreateProductDTO(name=True, price=1)
        assert dto.name == "true"

    @pytest.mark.parametrize("price", [0, -1, "-0.01"])
    def test_non_positive_price_raises(self, price):
        with pytest.raises(ValidationError, match="greater than zero"):
            CreateProductDTO(name="Widget", price=price)

    def test_empty_name_raises(self):
        with pytest.raises(ValidationError, match="Name must not be empty"):
            CreateProductDTO(name="", price=1)

    def test_has_no_availability_field(self):
        assert "availability" not in CreateProductDTO.model_fields

    def test_is_frozen(self):
        dto = CreateProductDTO(name="Widget", price=1)
        with pytest.raises(ValidationError):
            dto.name = "Other"


# ===========================================================================
# UpdateProductDTO
# ===========================================================================


class TestUpdateProductDTO:
    def test_update_with_valid_data(self):
        dto = UpdateProductDTO(name="Widget", price=10, availability=False)
        assert dto.availability is False
        assert dto.price == Decimal("10")

    @pytest.mark.parametrize(
        "raw, expected",
        [(True, True), ("false", False), ("1", True), (0, False)],
    )
    def test_availability_spellings(self, raw, expected):
        dto = UpdateProductDTO(name="Widget", price=10, availability=raw)
        assert dto.availability is expected

    def test_availability_is_required(self):
        with pytest.raises(ValidationError):
            UpdateProductDTO(name="Widget", price=10)

    def test_inherits_price_rule(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            UpdateProductDTO(name="Widget", price=-3, availability=True)


class TestPriceRounding:
    @pytest.mark.parametrize(
        "raw, expected",
        [("0.005", Decimal("0.01")), ("19.994", Decimal("19.99")), (2, Decimal("2.00"))],
    )
    def test_price_is_rounded_to_cents(self, raw, expected):
        assert CreateProductDTO(name="Widget", price=raw).price == expected

    def test_price_rounding_to_zero_raises(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            CreateProductDTO(name="Widget", price="0.004")
