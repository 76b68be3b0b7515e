"""Request rules for the Product routes.

Rule order is significant: it is the order in which violations are
reported back to the client.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from modules.core.validation import (
    BODY,
    PARAMS,
    Rule,
    is_boolean,
    is_int,
    is_numeric,
    is_positive,
    not_empty,
)
from modules.products.models import NAME_MAX_LENGTH

INVALID_ID = "Invalid id"
EMPTY_NAME = "Product name cannot be empty"
LONG_NAME = f"Product name cannot exceed {NAME_MAX_LENGTH} characters"
INVALID_VALUE = "Invalid value"
EMPTY_PRICE = "Product price cannot be empty"
INVALID_PRICE = "Invalid price"
INVALID_AVAILABILITY = "Invalid availability value"

CENT = Decimal("0.01")
MAX_PRICE = Decimal("99999999.99")


def is_positive_price(value: Any) -> bool:
    """Greater than zero and storable as ``DECIMAL(10, 2)``."""
    if not is_positive(value):
        return False
    number = Decimal(str(value).strip())
    if number > MAX_PRICE:
        return False
    return number.quantize(CENT, ROUND_HALF_UP) > 0


def fits_name_column(value: Any) -> bool:
    """Absent names pass; the emptiness rule reports those."""
    if value is None:
        return True
    if isinstance(value, bool):
        value = str(value).lower()
    return len(str(value)) <= NAME_MAX_LENGTH


ID_RULES = [
    Rule(PARAMS, "id", is_int, INVALID_ID),
]

NAME_RULES = [
    Rule(BODY, "name", not_empty, EMPTY_NAME),
    Rule(BODY, "name", fits_name_column, LONG_NAME),
]

PRICE_RULES = [
    Rule(BODY, "price", is_numeric, INVALID_VALUE),
    Rule(BODY, "price", not_empty, EMPTY_PRICE),
    Rule(BODY, "price", is_positive_price, INVALID_PRICE),
]

AVAILABILITY_RULES = [
    Rule(BODY, "availability", is_boolean, INVALID_AVAILABILITY),
]

CREATE_RULES = NAME_RULES + PRICE_RULES
UPDATE_RULES = NAME_RULES + PRICE_RULES + ID_RULES + AVAILABILITY_RULES
