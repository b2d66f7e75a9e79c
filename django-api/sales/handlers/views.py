"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from sales.domain import GeneratedSale, PlatformId, SaleType
from sales.domain.errors import DomainError, ErrorCode
from sales.handlers.serializers import (
    CalendarApplyRequestSerializer,
    CalendarPreviewRequestSerializer,
    CalendarVariationSerializer,
    PlatformSerializer,
    SaleSerializer,
    SaleValidationRequestSerializer,
    ValidationResultSerializer,
)
from sales.services.calendar_service import CalendarService
from sales.services.sale_service import SaleService
from sales.stores.django_store import DjangoPlatformStore, DjangoSaleStore

_NOT_FOUND_CODES = {ErrorCode.PLATFORM_NOT_FOUND}


def _error_response(error: DomainError) -> Response:
    code = (
        status.HTTP_404_NOT_FOUND
        if error.code in _NOT_FOUND_CODES
        else status.HTTP_400_BAD_REQUEST
    )
    return Response({"code": error.code.value, "message": error.message}, status=code)


def calendar_service() -> CalendarService:
    return CalendarService(DjangoPlatformStore(), DjangoSaleStore())


def sale_service() -> SaleService:
    return SaleService(DjangoPlatformStore(), DjangoSaleStore())


class PlatformListView(APIView):
    """Handler for GET /api/platforms"""

    def get(self, request: Request) -> Response:
        platforms = DjangoPlatformStore().list_platforms()
        return Response(PlatformSerializer(platforms, many=True).data)


class CalendarPreviewView(APIView):
    """Handler for POST /api/products/{product_id}/calendar/preview"""

    def post(self, request: Request, product_id: str) -> Response:
        serializer = CalendarPreviewRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            variations = calendar_service().preview(product_id, **serializer.validated_data)
        except DomainError as error:
            return _error_response(error)

        return Response(
            {"variations": CalendarVariationSerializer(variations, many=True).data}
        )


class CalendarApplyView(APIView):
    """Handler for POST /api/products/{product_id}/calendar/apply"""

    def post(self, request: Request, product_id: str) -> Response:
        serializer = CalendarApplyRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        sales = [
            GeneratedSale(
                id=item["id"],
                product_id=product_id,
                platform_id=PlatformId(item["platform_id"]),
                platform_name=item["platform_name"],
                platform_color=item["platform_color"],
                start_date=item["start_date"],
                end_date=item["end_date"],
                discount_percentage=item["discount_percentage"],
                sale_name=item["sale_name"],
                sale_type=SaleType(item["sale_type"]),
                is_event=item["is_event"],
                event_name=item["event_name"],
            )
            for item in serializer.validated_data["sales"]
        ]

        try:
            created = calendar_service().apply(sales)
        except DomainError as error:
            return _error_response(error)

        return Response(SaleSerializer(created, many=True).data, status=status.HTTP_201_CREATED)


class SaleValidationView(APIView):
    """Handler for POST /api/sales/validate"""

    def post(self, request: Request) -> Response:
        serializer = SaleValidationRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            result = sale_service().validate_sale(**serializer.validated_data)
        except DomainError as error:
            return _error_response(error)

        return Response(ValidationResultSerializer(result).data)
