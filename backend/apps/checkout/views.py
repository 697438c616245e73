from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.schemas import ErrorResponseSerializer
from apps.common import get_logger
from apps.gateway.permissions import IsShopper

from .commands import CheckoutDetailsCommand, PaymentVerificationCommand
from .container import build_checkout_service
from .serializers import (
    CheckoutDetailsSerializer,
    CheckoutSummarySerializer,
    OrderPlacedSerializer,
    PaymentOrderSerializer,
    PaymentVerificationSerializer,
)

logger = get_logger(__name__).bind(component="checkout", layer="view")

ERROR_RESPONSES = {
    400: OpenApiResponse(response=ErrorResponseSerializer),
    401: OpenApiResponse(response=ErrorResponseSerializer),
    502: OpenApiResponse(response=ErrorResponseSerializer),
}


class CheckoutServiceMixin:
    permission_classes = [IsShopper]
    service_factory = staticmethod(build_checkout_service)

    def get_service(self, request):
        return self.service_factory(request)


@extend_schema(tags=["Checkout"])
class CheckoutSummaryView(CheckoutServiceMixin, APIView):
    @extend_schema(
        summary="Checkout summary",
        description="Cart lines and total with the shopper's saved contact details for prefill.",
        responses={200: CheckoutSummarySerializer, 401: ERROR_RESPONSES[401]},
    )
    def get(self, request):
        summary = self.get_service(request).summary()
        return Response(CheckoutSummarySerializer(summary).data)


@extend_schema(tags=["Checkout"])
class CashOnDeliveryView(CheckoutServiceMixin, APIView):
    log = logger.bind(view="CashOnDeliveryView")

    @extend_schema(
        summary="Place cash on delivery order",
        request=CheckoutDetailsSerializer,
        responses={201: OrderPlacedSerializer, **ERROR_RESPONSES},
    )
    def post(self, request):
        serializer = CheckoutDetailsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        details = CheckoutDetailsCommand.from_raw(serializer.validated_data)
        result = self.get_service(request).place_cod_order(details)
        self.log.bind_request(request).info("COD order placed", booking_id=result["bookingId"])
        return Response(OrderPlacedSerializer(result).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=["Checkout"])
class PaymentOrderView(CheckoutServiceMixin, APIView):
    log = logger.bind(view="PaymentOrderView")

    @extend_schema(
        summary="Create payment gateway order",
        description="Returns the gateway order id and public key used to open the hosted payment widget.",
        request=CheckoutDetailsSerializer,
        responses={201: PaymentOrderSerializer, **ERROR_RESPONSES},
    )
    def post(self, request):
        serializer = CheckoutDetailsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        details = CheckoutDetailsCommand.from_raw(serializer.validated_data)
        result = self.get_service(request).create_payment_order(details)
        self.log.bind_request(request).info("Payment order created", order_id=result["orderId"])
        return Response(PaymentOrderSerializer(result).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=["Checkout"])
class PaymentVerificationView(CheckoutServiceMixin, APIView):
    log = logger.bind(view="PaymentVerificationView")

    @extend_schema(
        summary="Verify gateway payment",
        request=PaymentVerificationSerializer,
        responses={200: OrderPlacedSerializer, **ERROR_RESPONSES},
    )
    def post(self, request):
        serializer = PaymentVerificationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        command = PaymentVerificationCommand(
            order_id=data["razorpay_order_id"],
            payment_id=data["razorpay_payment_id"],
            signature=data["razorpay_signature"],
        )
        result = self.get_service(request).verify_payment(command)
        self.log.bind_request(request).info("Payment verified", booking_id=result["bookingId"])
        return Response(OrderPlacedSerializer(result).data)
