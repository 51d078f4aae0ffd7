"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (views, after the
request rules in ``validators.py`` have passed) and the Service layer.
DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``ReplaceProductDTO``: input for a full product replacement.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from modules.products.models import (
    NAME_MAX_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
)

_PRICE_QUANTUM = Decimal(1).scaleb(-PRICE_DECIMAL_PLACES)
_PRICE_LIMIT = Decimal(10) ** (PRICE_MAX_DIGITS - PRICE_DECIMAL_PLACES)


def _normalise_price(v: Decimal) -> Decimal:
    """Round to the stored precision and keep the result storable and positive."""
    v = v.quantize(_PRICE_QUANTUM, rounding=ROUND_HALF_UP)
    if v <= 0 or v >= _PRICE_LIMIT:
        raise ValueError("Price Not Valid")
    return v


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    ``availability`` is not accepted here: new products are always
    available.
    """

    model_config = ConfigDict(
        frozen=True, str_strip_whitespace=True, coerce_numbers_to_str=True
    )

    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    price: Decimal = Field(allow_inf_nan=False)

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Decimal) -> Decimal:
        return _normalise_price(v)


class ReplaceProductDTO(BaseModel):
    """Immutable DTO for full product replacement (PUT)."""

    model_config = ConfigDict(
        frozen=True, str_strip_whitespace=True, coerce_numbers_to_str=True
    )

    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    price: Decimal = Field(allow_inf_nan=False)
    availability: bool

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Decimal) -> Decimal:
        return _normalise_price(v)


# ---------------------------------------------------------------------------
# Error translation
# ---------------------------------------------------------------------------


def dto_errors(exc: ValidationError) -> List[Dict[str, str]]:
    """Translate a pydantic ``ValidationError`` into ``{field, message}`` items."""
    errors = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"])
        if error["type"] == "value_error":
            message = str(error["ctx"]["error"])
        else:
            message = error["msg"]
        errors.append({"field": field, "message": message})
    return errors
