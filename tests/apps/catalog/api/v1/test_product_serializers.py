from decimal import Decimal

from apps.catalog.api.v1.serializers import PageQuerySerializer, ProductCreateSerializer
from apps.catalog.application.dto import CreateProductDTO


class TestProductCreateSerializer:

    def test_to_dto(self):
        serializer = ProductCreateSerializer(data={
            "code": "ABC1234567",
            "name": "Laptop",
            "price_source": "9.99",
            "is_available": False,
        })

        assert serializer.is_valid(), serializer.errors
        assert serializer.to_dto() == CreateProductDTO(
            code="ABC1234567",
            name="Laptop",
            price_source=Decimal("9.99"),
            is_available=False,
        )

    def test_zero_price_is_valid(self):
        serializer = ProductCreateSerializer(data={
            "code": "ABC1234567",
            "name": "Freebie",
            "price_source": "0",
            "is_available": True,
        })

        assert serializer.is_valid(), serializer.errors

    def test_unknown_fields_are_ignored(self):
        serializer = ProductCreateSerializer(data={
            "code": "ABC1234567",
            "name": "Laptop",
            "price_source": "9.99",
            "price_target": "100.00",
            "is_available": True,
        })

        assert serializer.is_valid(), serializer.errors
        assert "price_target" not in serializer.validated_data


class TestPageQuerySerializer:

    def test_defaults(self):
        serializer = PageQuerySerializer(data={})

        assert serializer.is_valid()
        assert serializer.validated_data == {"page": 0, "size": 25}

    def test_size_upper_bound(self):
        assert PageQuerySerializer(data={"size": 100}).is_valid()
        assert not PageQuerySerializer(data={"size": 101}).is_valid()
