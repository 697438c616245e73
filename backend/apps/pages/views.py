from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.exceptions import ApplicationError
from apps.api.schemas import ErrorResponseSerializer
from apps.common import get_logger

from .content import PAGES, get_page
from .serializers import (
    ContactRequestSerializer,
    DetailResponseSerializer,
    PolicyPageSerializer,
    PolicyPageSummarySerializer,
)

logger = get_logger(__name__).bind(component="pages", layer="view")

CONTACT_ACK = "Thank you! We will get back to you soon."


@extend_schema(tags=["Pages"])
class PageListView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(summary="List content pages", responses={200: PolicyPageSummarySerializer(many=True)})
    def get(self, request):
        return Response(PolicyPageSummarySerializer(PAGES, many=True).data)


@extend_schema(tags=["Pages"])
class PageDetailView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(
        summary="Get content page",
        responses={200: PolicyPageSerializer, 404: OpenApiResponse(response=ErrorResponseSerializer)},
    )
    def get(self, request, slug):
        page = get_page(slug)
        if page is None:
            raise ApplicationError("NOT_FOUND", "Page not found", details={"slug": slug})
        return Response(PolicyPageSerializer(page).data)


@extend_schema(tags=["Pages"])
class ContactView(APIView):
    permission_classes = [AllowAny]
    log = logger.bind(view="ContactView")

    @extend_schema(
        summary="Send contact message",
        request=ContactRequestSerializer,
        responses={200: DetailResponseSerializer, 400: OpenApiResponse(response=ErrorResponseSerializer)},
    )
    def post(self, request):
        serializer = ContactRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        self.log.bind_request(request).info(
            "Contact message received", email=data["email"], subject=data.get("subject") or ""
        )
        return Response({"detail": CONTACT_ACK})
