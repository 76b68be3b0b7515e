"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the
Service layer.  Request rules have already rejected malformed input by
the time a DTO is built; the DTOs coerce the raw JSON values into
domain types.  DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for full product updates.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

CENT = Decimal("0.01")


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    ``availability`` is not accepted: new products are always available.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal

    @field_validator("name", mode="before")
    @classmethod
    def scalar_name_to_text(cls, v: Any) -> Any:
        # JSON scalars other than strings are stored as their text form.
        if isinstance(v, bool):
            return str(v).lower()
        if isinstance(v, (int, float, Decimal)):
            return str(v)
        return v

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Decimal) -> Decimal:
        v = v.quantize(CENT, ROUND_HALF_UP)
        if v <= 0:
            raise ValueError("Price must be greater than zero.")
        return v

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Name must not be empty.")
        return v


class UpdateProductDTO(CreateProductDTO):
    """Immutable DTO for full product updates (PUT).

    Every field is required; ``availability`` accepts the usual JSON and
    string spellings of a boolean (``true``, ``"false"``, ``1``, ``"0"``).
    """

    availability: bool
