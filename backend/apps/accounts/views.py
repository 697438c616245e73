from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.schemas import ErrorResponseSerializer
from apps.common import get_logger
from apps.gateway.permissions import IsShopper

from .container import build_account_service
from .serializers import (
    AuthResponseSerializer,
    DetailResponseSerializer,
    GoogleLoginRequestSerializer,
    LoginRequestSerializer,
    OrdersResponseSerializer,
    ProfileUpdateSerializer,
    RegisterRequestSerializer,
    UserProfileSerializer,
    VerifyEmailRequestSerializer,
)

logger = get_logger(__name__).bind(component="accounts", layer="view")


class AccountServiceMixin:
    service_factory = staticmethod(build_account_service)

    def get_service(self, request):
        return self.service_factory(request)


@extend_schema(tags=["Auth"])
class RegisterView(AccountServiceMixin, APIView):
    permission_classes = [AllowAny]
    log = logger.bind(view="RegisterView")

    @extend_schema(
        summary="Register shopper",
        request=RegisterRequestSerializer,
        responses={
            201: AuthResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = RegisterRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.log.bind_request(request).info(
            "Processing registration request", email=serializer.validated_data["email"]
        )
        result = self.get_service(request).register(serializer.validated_data)
        return Response(AuthResponseSerializer(result).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=["Auth"])
class LoginView(AccountServiceMixin, APIView):
    permission_classes = [AllowAny]
    log = logger.bind(view="LoginView")

    @extend_schema(
        summary="Login with email and password",
        request=LoginRequestSerializer,
        responses={
            200: AuthResponseSerializer,
            401: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = LoginRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        result = self.get_service(request).login(data["email"], data["password"])
        self.log.bind_request(request).info("Shopper logged in", email=data["email"])
        return Response(AuthResponseSerializer(result).data)


@extend_schema(tags=["Auth"])
class GoogleLoginView(AccountServiceMixin, APIView):
    permission_classes = [AllowAny]

    @extend_schema(
        summary="Login with a Google credential",
        request=GoogleLoginRequestSerializer,
        responses={
            200: AuthResponseSerializer,
            401: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = GoogleLoginRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.get_service(request).google_login(serializer.validated_data["credential"])
        return Response(AuthResponseSerializer(result).data)


@extend_schema(tags=["Auth"])
class LogoutView(AccountServiceMixin, APIView):
    permission_classes = [AllowAny]

    @extend_schema(summary="Logout", request=None, responses={200: DetailResponseSerializer})
    def post(self, request):
        self.get_service(request).logout()
        return Response({"detail": "Logged out"})


@extend_schema(tags=["Auth"])
class VerifyEmailView(AccountServiceMixin, APIView):
    permission_classes = [AllowAny]

    @extend_schema(
        summary="Verify shopper email",
        request=VerifyEmailRequestSerializer,
        responses={
            200: DetailResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = VerifyEmailRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.get_service(request).verify_email(serializer.validated_data["token"])
        return Response(DetailResponseSerializer(result).data)


@extend_schema(tags=["Auth"])
class ProfileView(AccountServiceMixin, APIView):
    permission_classes = [IsShopper]
    log = logger.bind(view="ProfileView")

    @extend_schema(summary="Get profile", responses={200: UserProfileSerializer})
    def get(self, request):
        profile = self.get_service(request).get_profile()
        return Response(UserProfileSerializer(profile).data)

    @extend_schema(
        summary="Update profile",
        request=ProfileUpdateSerializer,
        responses={
            200: UserProfileSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def patch(self, request):
        serializer = ProfileUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        profile = self.get_service(request).update_profile(serializer.validated_data)
        self.log.bind_request(request).debug(
            "Profile fields changed", fields=sorted(serializer.validated_data)
        )
        return Response(UserProfileSerializer(profile).data)


@extend_schema(tags=["Auth"])
class MyOrdersView(AccountServiceMixin, APIView):
    permission_classes = [IsShopper]

    @extend_schema(
        summary="My orders",
        parameters=[
            OpenApiParameter(
                "status", str, required=False, description="Booking status filter; 'all' disables it"
            )
        ],
        responses={
            200: OrdersResponseSerializer,
            401: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request):
        bookings = self.get_service(request).list_orders(request.query_params.get("status"))
        return Response({"count": len(bookings), "bookings": bookings})
