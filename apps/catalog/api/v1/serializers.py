"""
Serializers for the catalog bounded context.
Handles validation and transformation between API and domain layers.
"""

from decimal import Decimal

from rest_framework import serializers

from apps.catalog.application.dto import CreateProductDTO
from apps.catalog.infrastructure.persistence.models import Product


class ProductSerializer(serializers.ModelSerializer):
    class Meta:
        model = Product
        fields = [
            "id",
            "code",
            "name",
            "price_source",
            "price_target",
            "is_available",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ProductCreateSerializer(serializers.Serializer):
    code = serializers.CharField(
        min_length=10,
        max_length=10,
        help_text="Unique 10 character code of the product, e.g. ABC1234567",
        error_messages={
            "min_length": "Product code must be exact 10 characters long",
            "max_length": "Product code must be exact 10 characters long",
        },
    )
    name = serializers.CharField(max_length=255, help_text="Name of the product, e.g. Laptop")
    price_source = serializers.DecimalField(
        max_digits=19,
        decimal_places=2,
        min_value=Decimal("0"),
        help_text="Price in the source currency with up to 2 decimal places, e.g. 9.99",
    )
    is_available = serializers.BooleanField(help_text="Availability status of the product")

    def to_dto(self) -> CreateProductDTO:
        return CreateProductDTO(**self.validated_data)


class PageQuerySerializer(serializers.Serializer):
    page = serializers.IntegerField(min_value=0, default=0)
    size = serializers.IntegerField(min_value=1, max_value=100, default=25)


class ProductPageSerializer(serializers.Serializer):
    content = ProductSerializer(many=True)
    page = serializers.IntegerField()
    size = serializers.IntegerField()
    total_elements = serializers.IntegerField()
    total_pages = serializers.IntegerField()
