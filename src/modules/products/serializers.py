"""Product DRF serializers.

``ProductSerializer`` renders the Product resource.  The write
serializers are not used to validate input (the request rules do
that); they describe the request bodies in the OpenAPI schema.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema_serializer
from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "price",
            "availability",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ProductCreateSerializer(serializers.Serializer):
    name = serializers.CharField(help_text="Product name.")
    price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        help_text="Product price, greater than zero.",
    )


class ProductUpdateSerializer(ProductCreateSerializer):
    availability = serializers.BooleanField(help_text="Whether the product is available.")


class ProductEnvelopeSerializer(serializers.Serializer):
    data = ProductSerializer()


@extend_schema_serializer(many=False)
class ProductListEnvelopeSerializer(serializers.Serializer):
    data = ProductSerializer(many=True)


class MessageEnvelopeSerializer(serializers.Serializer):
    data = serializers.CharField()


class NotFoundSerializer(serializers.Serializer):
    error = serializers.CharField()


class ValidationErrorItemSerializer(serializers.Serializer):
    type = serializers.CharField()
    value = serializers.JSONField(required=False)
    msg = serializers.CharField()
    path = serializers.CharField()
    location = serializers.CharField()


class ValidationErrorsSerializer(serializers.Serializer):
    errors = ValidationErrorItemSerializer(many=True)
