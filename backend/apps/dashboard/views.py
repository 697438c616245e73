from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.schemas import ErrorResponseSerializer
from apps.common import get_logger
from apps.gateway.permissions import IsAdmin

from .commands import ProductFormCommand
from .container import (
    build_admin_auth_service,
    build_booking_admin_service,
    build_product_admin_service,
    build_staff_admin_service,
)
from .serializers import (
    AdminOtpLoginSerializer,
    AdminOtpRequestSerializer,
    AdminProfileSerializer,
    BookingStatusSerializer,
    DashboardSummarySerializer,
    DeliveryStaffRegisterSerializer,
    DetailResponseSerializer,
    ProductFormSerializer,
    VisibilitySerializer,
)

logger = get_logger(__name__).bind(component="dashboard", layer="view")

ERROR_RESPONSES = {
    400: OpenApiResponse(response=ErrorResponseSerializer),
    401: OpenApiResponse(response=ErrorResponseSerializer),
    404: OpenApiResponse(response=ErrorResponseSerializer),
    502: OpenApiResponse(response=ErrorResponseSerializer),
}
LIST_RESPONSE = OpenApiResponse(description="Envelope with `count` and `data`")
BACKEND_RESPONSE = OpenApiResponse(description="Backend envelope")


def _listing(rows):
    return Response({"count": len(rows), "data": rows})


class ServiceFactoryMixin:
    permission_classes = [IsAdmin]

    def get_service(self, request):
        return self.service_factory(request)


class AdminAuthMixin(ServiceFactoryMixin):
    permission_classes = [AllowAny]
    service_factory = staticmethod(build_admin_auth_service)


class ProductAdminMixin(ServiceFactoryMixin):
    service_factory = staticmethod(build_product_admin_service)


class BookingAdminMixin(ServiceFactoryMixin):
    service_factory = staticmethod(build_booking_admin_service)


class StaffAdminMixin(ServiceFactoryMixin):
    service_factory = staticmethod(build_staff_admin_service)


@extend_schema(tags=["Admin"])
class AdminOtpRequestView(AdminAuthMixin, APIView):
    @extend_schema(
        summary="Request admin login OTP",
        request=AdminOtpRequestSerializer,
        responses={200: DetailResponseSerializer, 400: ERROR_RESPONSES[400]},
    )
    def post(self, request):
        serializer = AdminOtpRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.get_service(request).request_otp(serializer.validated_data["email"])
        return Response(DetailResponseSerializer(result).data)


@extend_schema(tags=["Admin"])
class AdminOtpLoginView(AdminAuthMixin, APIView):
    log = logger.bind(view="AdminOtpLoginView")

    @extend_schema(
        summary="Login with admin OTP",
        request=AdminOtpLoginSerializer,
        responses={200: AdminProfileSerializer, 400: ERROR_RESPONSES[400], 401: ERROR_RESPONSES[401]},
    )
    def post(self, request):
        serializer = AdminOtpLoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        profile = self.get_service(request).verify_otp(data["email"], data["otp"])
        self.log.bind_request(request).info("Admin logged in", email=data["email"])
        return Response(AdminProfileSerializer(profile).data)


@extend_schema(tags=["Admin"])
class AdminLogoutView(AdminAuthMixin, APIView):
    @extend_schema(summary="Admin logout", request=None, responses={200: DetailResponseSerializer})
    def post(self, request):
        self.get_service(request).logout()
        return Response({"detail": "Logged out"})


@extend_schema(tags=["Admin"])
class AdminProfileView(AdminAuthMixin, APIView):
    permission_classes = [IsAdmin]

    @extend_schema(summary="Current admin", responses={200: AdminProfileSerializer})
    def get(self, request):
        return Response(AdminProfileSerializer(self.get_service(request).profile()).data)


@extend_schema(tags=["Admin"])
class DashboardSummaryView(BookingAdminMixin, APIView):
    @extend_schema(
        summary="Dashboard summary",
        description="Booking totals and revenue computed from the full booking list.",
        responses={200: DashboardSummarySerializer, 401: ERROR_RESPONSES[401]},
    )
    def get(self, request):
        return Response(DashboardSummarySerializer(self.get_service(request).summary()).data)


@extend_schema(tags=["Admin"])
class AdminProductListView(ProductAdminMixin, APIView):
    log = logger.bind(view="AdminProductListView")

    @extend_schema(summary="All products including hidden", responses={200: LIST_RESPONSE})
    def get(self, request):
        return _listing(self.get_service(request).list_products())

    @extend_schema(
        summary="Create product",
        request=ProductFormSerializer,
        responses={201: BACKEND_RESPONSE, **ERROR_RESPONSES},
    )
    def post(self, request):
        serializer = ProductFormSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        command = ProductFormCommand.from_validated(serializer.validated_data)
        result = self.get_service(request).create_product(command)
        self.log.bind_request(request).info("Product create forwarded", sku=command.sku)
        return Response(result, status=status.HTTP_201_CREATED)


@extend_schema(tags=["Admin"])
class AdminProductDetailView(ProductAdminMixin, APIView):
    @extend_schema(summary="Get product", responses={200: BACKEND_RESPONSE, 404: ERROR_RESPONSES[404]})
    def get(self, request, product_id):
        return Response({"data": self.get_service(request).get_product(product_id)})

    @extend_schema(
        summary="Update product",
        request=ProductFormSerializer,
        responses={200: BACKEND_RESPONSE, **ERROR_RESPONSES},
    )
    def put(self, request, product_id):
        serializer = ProductFormSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        command = ProductFormCommand.from_validated(serializer.validated_data)
        return Response(self.get_service(request).update_product(product_id, command))

    @extend_schema(summary="Delete product", responses={204: None, **ERROR_RESPONSES})
    def delete(self, request, product_id):
        self.get_service(request).delete_product(product_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=["Admin"])
class AdminProductVisibilityView(ProductAdminMixin, APIView):
    @extend_schema(
        summary="Show or hide product",
        request=VisibilitySerializer,
        responses={200: BACKEND_RESPONSE, **ERROR_RESPONSES},
    )
    def patch(self, request, product_id):
        serializer = VisibilitySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.get_service(request).set_visibility(
            product_id, serializer.validated_data["isVisible"]
        )
        return Response(result)


@extend_schema(tags=["Admin"])
class AdminBookingListView(BookingAdminMixin, APIView):
    @extend_schema(summary="All bookings", responses={200: LIST_RESPONSE})
    def get(self, request):
        return _listing(self.get_service(request).list_bookings())


@extend_schema(tags=["Admin"])
class AdminBookingStatusView(BookingAdminMixin, APIView):
    @extend_schema(
        summary="Update booking status",
        request=BookingStatusSerializer,
        responses={200: BACKEND_RESPONSE, **ERROR_RESPONSES},
    )
    def patch(self, request, booking_id):
        serializer = BookingStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.get_service(request).update_status(
            booking_id, serializer.validated_data["status"]
        )
        return Response(result)


@extend_schema(tags=["Admin"])
class AdminBookingCancelView(BookingAdminMixin, APIView):
    @extend_schema(
        summary="Cancel booking", request=None, responses={200: BACKEND_RESPONSE, **ERROR_RESPONSES}
    )
    def patch(self, request, booking_id):
        return Response(self.get_service(request).cancel(booking_id))


@extend_schema(tags=["Admin"])
class AdminCustomerListView(StaffAdminMixin, APIView):
    @extend_schema(summary="Customers", responses={200: LIST_RESPONSE})
    def get(self, request):
        return _listing(self.get_service(request).list_customers())


@extend_schema(tags=["Admin"])
class DeliveryStaffListView(StaffAdminMixin, APIView):
    log = logger.bind(view="DeliveryStaffListView")

    @extend_schema(summary="Delivery staff", responses={200: LIST_RESPONSE})
    def get(self, request):
        return _listing(self.get_service(request).list_delivery_staff())

    @extend_schema(
        summary="Register delivery staff",
        request=DeliveryStaffRegisterSerializer,
        responses={201: DetailResponseSerializer, **ERROR_RESPONSES},
    )
    def post(self, request):
        serializer = DeliveryStaffRegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        result = self.get_service(request).register_delivery_staff(
            data["name"], data["email"], data["phone"]
        )
        self.log.bind_request(request).info("Delivery staff registration forwarded", email=data["email"])
        return Response(DetailResponseSerializer(result).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=["Admin"])
class DeliveryStaffStatusView(StaffAdminMixin, APIView):
    active = True

    @extend_schema(
        summary="Activate or suspend delivery staff",
        request=None,
        responses={200: DetailResponseSerializer, **ERROR_RESPONSES},
    )
    def patch(self, request, staff_id):
        result = self.get_service(request).set_delivery_staff_active(staff_id, self.active)
        return Response(DetailResponseSerializer(result).data)
