"""
ViewSets for the exchange API v1.
Read-only view into the rate pipeline for operators.
"""

from django.conf import settings
from rest_framework import viewsets, serializers
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from drf_spectacular.types import OpenApiTypes

from apps.exchange.apps import get_rate_cache
from apps.exchange.domain.exceptions import MalformedRateRecord


class CurrentRateQuerySerializer(serializers.Serializer):
    currency = serializers.RegexField(r"^[A-Za-z]{3}$", max_length=3, required=False)


class CurrentRateSerializer(serializers.Serializer):
    base_currency = serializers.CharField()
    currency = serializers.CharField()
    middle_rate = serializers.DecimalField(max_digits=19, decimal_places=6)
    application_date = serializers.DateField(allow_null=True)
    state = serializers.CharField()


@extend_schema(tags=['Rates'])
class ExchangeRateViewSet(viewsets.ViewSet):

    @extend_schema(
        parameters=[
            OpenApiParameter("currency", OpenApiTypes.STR, description="Currency code (defaults to the catalog target currency)"),
        ],
        responses={200: CurrentRateSerializer, 503: OpenApiResponse(description="Exchange rate unavailable")},
        description="Get today's middle rate, refreshing it from the provider when stale."
    )
    @action(detail=False, methods=['get'], url_path='current')
    def current(self, request):
        query = CurrentRateQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        currency = query.validated_data.get("currency", settings.CATALOG_TARGET_CURRENCY).upper()

        snapshot = get_rate_cache().get_rate_snapshot(currency)
        try:
            application_date = snapshot.record.application_date_value
        except MalformedRateRecord:
            application_date = None

        return Response(CurrentRateSerializer({
            "base_currency": settings.CATALOG_SOURCE_CURRENCY,
            "currency": snapshot.currency_code,
            "middle_rate": snapshot.middle_rate,
            "application_date": application_date,
            "state": snapshot.state.value,
        }).data)
