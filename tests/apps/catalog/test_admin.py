import pytest
from decimal import Decimal
from unittest.mock import Mock

from django.contrib.admin.sites import site

from apps.catalog.infrastructure.persistence.models import Product


@pytest.fixture
def product_admin():
    return site._registry[Product]


def test_products_cannot_be_added_from_admin(product_admin):
    assert product_admin.has_add_permission(Mock()) is False


def test_price_target_is_read_only(product_admin):
    assert "price_target" in product_admin.readonly_fields


@pytest.mark.django_db
def test_mark_unavailable(product_admin, mocker):
    mocker.patch.object(product_admin, "message_user")
    Product.objects.create(
        code="ABC1234567", name="Laptop", price_source=Decimal("10.00"),
        price_target=Decimal("11.70"), is_available=True,
    )

    product_admin.mark_unavailable(Mock(), Product.objects.all())

    assert Product.objects.get(code="ABC1234567").is_available is False
    product_admin.message_user.assert_called_once()
