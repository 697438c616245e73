from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.schemas import ErrorResponseSerializer
from apps.common import get_logger
from apps.gateway.permissions import IsDeliveryAgent

from .container import (
    build_delivery_auth_service,
    build_delivery_wizard_service,
    build_order_tracking_service,
)
from .serializers import (
    DeliveryAgentSerializer,
    DeliveryConfirmedSerializer,
    DetailResponseSerializer,
    OtpLoginSerializer,
    OtpRequestSerializer,
    WizardConfirmSerializer,
    WizardSearchSerializer,
    WizardStateSerializer,
)

logger = get_logger(__name__).bind(component="delivery", layer="view")

ERROR_RESPONSES = {
    400: OpenApiResponse(response=ErrorResponseSerializer),
    401: OpenApiResponse(response=ErrorResponseSerializer),
    404: OpenApiResponse(response=ErrorResponseSerializer),
    409: OpenApiResponse(response=ErrorResponseSerializer),
}


class DeliveryAuthMixin:
    permission_classes = [AllowAny]
    service_factory = staticmethod(build_delivery_auth_service)

    def get_service(self, request):
        return self.service_factory(request)


class DeliveryWizardMixin:
    permission_classes = [IsDeliveryAgent]
    service_factory = staticmethod(build_delivery_wizard_service)

    def get_service(self, request):
        return self.service_factory(request)


@extend_schema(tags=["Delivery"])
class DeliveryOtpRequestView(DeliveryAuthMixin, APIView):
    @extend_schema(
        summary="Request delivery login OTP",
        request=OtpRequestSerializer,
        responses={200: DetailResponseSerializer, 400: ERROR_RESPONSES[400]},
    )
    def post(self, request):
        serializer = OtpRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.get_service(request).request_otp(serializer.validated_data["email"])
        return Response(DetailResponseSerializer(result).data)


@extend_schema(tags=["Delivery"])
class DeliveryOtpLoginView(DeliveryAuthMixin, APIView):
    log = logger.bind(view="DeliveryOtpLoginView")

    @extend_schema(
        summary="Login with delivery OTP",
        request=OtpLoginSerializer,
        responses={200: DeliveryAgentSerializer, 400: ERROR_RESPONSES[400], 401: ERROR_RESPONSES[401]},
    )
    def post(self, request):
        serializer = OtpLoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        agent = self.get_service(request).verify_otp(data["email"], data["otp"])
        self.log.bind_request(request).info("Delivery agent logged in", email=data["email"])
        return Response(DeliveryAgentSerializer(agent).data)


@extend_schema(tags=["Delivery"])
class DeliveryEmailVerifyView(DeliveryAuthMixin, APIView):
    @extend_schema(
        summary="Verify delivery agent email",
        description="First login of a newly registered agent; confirms the email and signs the agent in.",
        request=OtpLoginSerializer,
        responses={200: DeliveryAgentSerializer, 400: ERROR_RESPONSES[400], 401: ERROR_RESPONSES[401]},
    )
    def post(self, request):
        serializer = OtpLoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        agent = self.get_service(request).verify_email(data["email"], data["otp"])
        return Response(DeliveryAgentSerializer(agent).data)


@extend_schema(tags=["Delivery"])
class DeliveryLogoutView(DeliveryAuthMixin, APIView):
    @extend_schema(summary="Delivery agent logout", request=None, responses={200: DetailResponseSerializer})
    def post(self, request):
        self.get_service(request).logout()
        return Response({"detail": "Logged out"})


@extend_schema(tags=["Delivery"])
class DeliveryAgentView(DeliveryAuthMixin, APIView):
    permission_classes = [IsDeliveryAgent]

    @extend_schema(summary="Current delivery agent", responses={200: DeliveryAgentSerializer})
    def get(self, request):
        return Response(DeliveryAgentSerializer(self.get_service(request).profile()).data)


@extend_schema(tags=["Delivery"])
class DeliveryWizardView(DeliveryWizardMixin, APIView):
    @extend_schema(summary="Delivery wizard state", responses={200: WizardStateSerializer})
    def get(self, request):
        return Response(WizardStateSerializer(self.get_service(request).current()).data)


@extend_schema(tags=["Delivery"])
class WizardSearchView(DeliveryWizardMixin, APIView):
    log = logger.bind(view="WizardSearchView")

    @extend_schema(
        summary="Find booking to deliver",
        request=WizardSearchSerializer,
        responses={200: WizardStateSerializer, **ERROR_RESPONSES},
    )
    def post(self, request):
        serializer = WizardSearchSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        term = serializer.validated_data["searchTerm"]
        self.log.bind_request(request).debug("Searching booking", search_term=term)
        state = self.get_service(request).search(term)
        return Response(WizardStateSerializer(state).data)


@extend_schema(tags=["Delivery"])
class WizardSendOtpView(DeliveryWizardMixin, APIView):
    @extend_schema(
        summary="Send delivery OTP to customer",
        request=None,
        responses={200: WizardStateSerializer, 409: ERROR_RESPONSES[409]},
    )
    def post(self, request):
        state = self.get_service(request).send_customer_otp()
        return Response(WizardStateSerializer(state).data)


@extend_schema(tags=["Delivery"])
class WizardConfirmView(DeliveryWizardMixin, APIView):
    log = logger.bind(view="WizardConfirmView")

    @extend_schema(
        summary="Confirm delivery",
        request=WizardConfirmSerializer,
        responses={200: DeliveryConfirmedSerializer, **ERROR_RESPONSES},
    )
    def post(self, request):
        serializer = WizardConfirmSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        service = self.get_service(request)
        result = service.confirm(data["otp"], data["deliveryBoyName"], data["deliveryBoyPhone"])
        self.log.bind_request(request).info("Delivery confirmed", agent=data["deliveryBoyName"])
        return Response(DeliveryConfirmedSerializer({**result, "wizard": service.current()}).data)


@extend_schema(tags=["Delivery"])
class WizardBackView(DeliveryWizardMixin, APIView):
    @extend_schema(summary="Previous wizard step", request=None, responses={200: WizardStateSerializer})
    def post(self, request):
        return Response(WizardStateSerializer(self.get_service(request).back()).data)


@extend_schema(tags=["Delivery"])
class WizardResetView(DeliveryWizardMixin, APIView):
    @extend_schema(summary="Reset delivery wizard", request=None, responses={200: WizardStateSerializer})
    def post(self, request):
        return Response(WizardStateSerializer(self.get_service(request).reset()).data)


@extend_schema(tags=["Delivery"])
class OrderTrackingView(APIView):
    permission_classes = [AllowAny]
    service_factory = staticmethod(build_order_tracking_service)

    @extend_schema(
        summary="Track an order",
        parameters=[OpenApiParameter("searchTerm", str, required=True, description="Booking id")],
        responses={200: OpenApiResponse(description="Booking"), 400: ERROR_RESPONSES[400], 404: ERROR_RESPONSES[404]},
    )
    def get(self, request):
        booking = self.service_factory().track(request.query_params.get("searchTerm", ""))
        return Response({"booking": booking})
