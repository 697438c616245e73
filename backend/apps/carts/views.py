from typing import Optional

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.schemas import ErrorResponseSerializer
from apps.api.utils import result_error_response, storage_warning
from apps.common import get_logger
from apps.common.result import Err

from .container import build_cart_service_for_request
from .serializers import (
    CartAddSerializer,
    CartCountSerializer,
    CartQuantitySerializer,
    CartSummarySerializer,
)
from .services import cart_count, cart_total

logger = get_logger(__name__).bind(component="carts", layer="view")


def cart_summary_payload(items, error: Optional[Err] = None):
    payload = {
        "items": items,
        "count": cart_count(items),
        "total": f"{cart_total(items):.2f}",
    }
    warning = storage_warning(error)
    if warning:
        payload["warning"] = warning
    return CartSummarySerializer(payload).data


class CartServiceMixin:
    permission_classes = [AllowAny]
    service_factory = staticmethod(build_cart_service_for_request)

    def get_service(self, request):
        return self.service_factory(request)

    def respond(self, result, success_status=status.HTTP_200_OK):
        if result.ok:
            return Response(cart_summary_payload(result.value), status=success_status)
        if result.kind.is_degraded_storage:
            return Response(
                cart_summary_payload(result.fallback or [], result),
                status=success_status,
            )
        return result_error_response(result)


@extend_schema(tags=["Cart"])
class CartView(CartServiceMixin, APIView):
    log = logger.bind(view="CartView")

    @extend_schema(summary="Get cart", responses={200: CartSummarySerializer})
    def get(self, request):
        result = self.get_service(request).get_cart()
        return self.respond(result)

    @extend_schema(summary="Clear cart", responses={200: CartSummarySerializer})
    def delete(self, request):
        self.log.bind_request(request).info("Clearing cart via API")
        result = self.get_service(request).clear_cart()
        return self.respond(result)


@extend_schema(tags=["Cart"])
class CartItemListView(CartServiceMixin, APIView):
    log = logger.bind(view="CartItemListView")

    @extend_schema(
        summary="Add product to cart",
        description=(
            "Adds one unit of the product. A product already in the cart has its quantity "
            "incremented instead of creating a second line."
        ),
        request=CartAddSerializer,
        responses={
            200: CartSummarySerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = CartAddSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product = serializer.validated_data
        result = self.get_service(request).add_item(product)
        self.log.bind_request(request).info(
            "Cart add processed",
            product_id=product.get("id") or product.get("_id"),
            ok=result.ok,
        )
        return self.respond(result)


@extend_schema(tags=["Cart"])
class CartItemDetailView(CartServiceMixin, APIView):
    log = logger.bind(view="CartItemDetailView")

    @extend_schema(
        summary="Set cart line quantity",
        request=CartQuantitySerializer,
        responses={
            200: CartSummarySerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def patch(self, request, item_id: str):
        serializer = CartQuantitySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        quantity = serializer.validated_data["quantity"]
        result = self.get_service(request).update_quantity(item_id, quantity)
        if not result.ok and not result.kind.is_degraded_storage:
            self.log.bind_request(request).warning(
                "Cart quantity update rejected", item_id=item_id, quantity=quantity
            )
        return self.respond(result)

    @extend_schema(summary="Remove cart line", responses={200: CartSummarySerializer})
    def delete(self, request, item_id: str):
        result = self.get_service(request).remove_item(item_id)
        return self.respond(result)


@extend_schema(tags=["Cart"])
class CartCountView(CartServiceMixin, APIView):
    @extend_schema(summary="Cart badge count", responses={200: CartCountSerializer})
    def get(self, request):
        result = self.get_service(request).get_count()
        return Response(CartCountSerializer({"count": result.unwrap_or_fallback() or 0}).data)
