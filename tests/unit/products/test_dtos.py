"""Unit tests for Product DTOs.

Covers:
- CreateProductDTO / ReplaceProductDTO: coercion, price normalisation,
  frozen immutability.
- dto_errors: translation into ``{field, message}`` items.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.products.dtos import CreateProductDTO, ReplaceProductDTO, dto_errors

pytestmark = pytest.mark.unit


class TestCreateProductDTO:
    def test_create_with_valid_data(self):
        dto = CreateProductDTO(name="Widget", price=Decimal("19.99"))
        assert dto.name == "Widget"
        assert dto.price == Decimal("19.99")

    def test_name_is_stripped(self):
        dto = CreateProductDTO(name="  Widget  ", price=1)
        assert dto.name == "Widget"

    def test_numeric_name_is_coerced_to_string(self):
        dto = CreateProductDTO(name=123, price=5)
        assert dto.name == "123"

    def test_price_string_is_coerced(self):
        dto = CreateProductDTO(name="Widget", price="12.5")
        assert dto.price == Decimal("12.50")

    def test_price_rounded_to_cents(self):
        dto = CreateProductDTO(name="Widget", price=Decimal("19.995"))
        assert dto.price == Decimal("20.00")

    def test_zero_price_raises(self):
        with pytest.raises(ValidationError, match="Price Not Valid"):
            CreateProductDTO(name="Widget", price=Decimal("0"))

    def test_price_that_rounds_to_zero_raises(self):
        with pytest.raises(ValidationError, match="Price Not Valid"):
            CreateProductDTO(name="Widget", price=Decimal("0.004"))

    def test_price_too_large_raises(self):
        with pytest.raises(ValidationError, match="Price Not Valid"):
            CreateProductDTO(name="Widget", price=Decimal("100000000"))

    def test_name_too_long_raises(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(name="x" * 256, price=1)

    def test_frozen(self):
        dto = CreateProductDTO(name="Widget", price=1)
        with pytest.raises(ValidationError):
            dto.name = "Other"


class TestReplaceProductDTO:
    @pytest.mark.parametrize(
        "raw, expected",
        [(True, True), (False, False), ("true", True), ("0", False), (1, True)],
    )
    def test_availability_coercion(self, raw, expected):
        dto = ReplaceProductDTO(name="Widget", price=1, availability=raw)
        assert dto.availability is expected

    def test_availability_required(self):
        with pytest.raises(ValidationError):
            ReplaceProductDTO(name="Widget", price=1)


class TestDtoErrors:
    def test_value_error_message_is_unwrapped(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateProductDTO(name="Widget", price=Decimal("-1"))
        assert dto_errors(exc_info.value) == [
            {"field": "price", "message": "Price Not Valid"}
        ]

    def test_type_errors_keep_pydantic_message(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateProductDTO(name=["Widget"], price=1)
        errors = dto_errors(exc_info.value)
        assert len(errors) == 1
        assert errors[0]["field"] == "name"
        assert errors[0]["message"]
