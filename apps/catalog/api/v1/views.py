"""
ViewSets for the catalog API v1.
Views only translate HTTP to CatalogService calls; errors are rendered by
core.exceptions.problem_details_handler.
"""

from rest_framework import viewsets, status
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from drf_spectacular.types import OpenApiTypes

from apps.catalog.api.v1.serializers import (
    PageQuerySerializer,
    ProductCreateSerializer,
    ProductPageSerializer,
    ProductSerializer,
)
from apps.catalog.domain.services import CatalogService
from apps.exchange.apps import get_rate_cache


def get_catalog_service() -> CatalogService:
    return CatalogService(rate_cache=get_rate_cache())


@extend_schema(tags=['Products'])
class ProductViewSet(viewsets.ViewSet):

    lookup_value_regex = r"\d+"

    @extend_schema(
        request=ProductCreateSerializer,
        responses={
            201: ProductSerializer,
            400: OpenApiResponse(description="Validation failed"),
            409: OpenApiResponse(description="Product code already exists"),
            503: OpenApiResponse(description="Exchange rate unavailable"),
        },
        description="Create a product. The converted price is calculated from today's middle rate."
    )
    def create(self, request):
        serializer = ProductCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product = get_catalog_service().create_item(serializer.to_dto())

        return Response(
            ProductSerializer(product).data,
            status=status.HTTP_201_CREATED,
            headers={"Location": request.build_absolute_uri(f"{product.id}/")},
        )

    @extend_schema(
        responses={200: ProductSerializer, 404: OpenApiResponse(description="Product not found")},
        description="Get a product by its ID"
    )
    def retrieve(self, request, pk: str = None):
        product = get_catalog_service().get_item(int(pk))
        return Response(ProductSerializer(product).data)

    @extend_schema(
        parameters=[
            OpenApiParameter("page", OpenApiTypes.INT, description="Page number starting from 0 (default 0)"),
            OpenApiParameter("size", OpenApiTypes.INT, description="Number of items per page (default 25)"),
        ],
        responses={200: ProductPageSerializer},
        description="Get all products, paginated"
    )
    def list(self, request):
        query = PageQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        page = get_catalog_service().list_items(**query.validated_data)
        return Response(ProductPageSerializer(page).data)
