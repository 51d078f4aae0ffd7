"""Product DRF serializers.

``ProductSerializer`` renders responses.  Request bodies are checked by
``validators.py`` and converted by the Pydantic DTOs in ``dtos.py``; the
input serializers below only describe those bodies in the OpenAPI schema.
"""

from __future__ import annotations

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
    name = serializers.CharField(max_length=255)
    price = serializers.DecimalField(max_digits=10, decimal_places=2)


class ProductReplaceSerializer(ProductCreateSerializer):
    availability = serializers.BooleanField()


# ---------------------------------------------------------------------------
# Response envelopes (schema only)
# ---------------------------------------------------------------------------


class ProductEnvelopeSerializer(serializers.Serializer):
    data = ProductSerializer()


class ProductListEnvelopeSerializer(serializers.Serializer):
    data = ProductSerializer(many=True)


class FieldErrorSerializer(serializers.Serializer):
    field = serializers.CharField()
    message = serializers.CharField()


class ValidationErrorsSerializer(serializers.Serializer):
    errors = FieldErrorSerializer(many=True)


class NotFoundSerializer(serializers.Serializer):
    error = serializers.CharField()


class MessageSerializer(serializers.Serializer):
    message = serializers.CharField()
