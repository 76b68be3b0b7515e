"""Product model.

Rules implemented at the storage level:
- ``price`` must be greater than zero (check constraint ``products_price_positive``).
- ``availability`` defaults to ``True`` on creation.

Request input is checked before it reaches the model (see
``modules.products.rules``); the constraint is the last line for rows
written outside the API.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel

NAME_MAX_LENGTH = 255


class Product(BaseModel):
    """A product offered in the catalogue.

    ``availability`` is only ever flipped by ``toggle_availability`` on the
    API side; full updates write it explicitly.
    """

    name = models.CharField(max_length=NAME_MAX_LENGTH)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    availability = models.BooleanField(default=True)

    class Meta:
        db_table = "products"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="products_price_positive",
            ),
        ]

    def toggle_availability(self) -> bool:
        """Flip ``availability`` in memory and return the new value."""
        self.availability = not self.availability
        return self.availability

    def __str__(self) -> str:
        return f"{self.id} - {self.name}"
