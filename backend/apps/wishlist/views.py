from typing import Optional

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.schemas import ErrorResponseSerializer
from apps.api.utils import error_response, result_error_response, storage_warning
from apps.carts.container import build_cart_service_for_request
from apps.carts.serializers import CartSummarySerializer
from apps.carts.views import cart_summary_payload
from apps.common import get_logger
from apps.common.result import Err

from .container import build_wishlist_service_for_request
from .mappers import WishlistItemMapper
from .serializers import (
    WishlistMembershipSerializer,
    WishlistProductSerializer,
    WishlistSummarySerializer,
    WishlistToggleResponseSerializer,
)

logger = get_logger(__name__).bind(component="wishlist", layer="view")


def wishlist_summary_payload(items, error: Optional[Err] = None):
    payload = {"items": items, "count": len({i.product_slug for i in items})}
    warning = storage_warning(error)
    if warning:
        payload["warning"] = warning
    return payload


class WishlistServiceMixin:
    permission_classes = [AllowAny]
    service_factory = staticmethod(build_wishlist_service_for_request)

    def get_service(self, request):
        return self.service_factory(request)

    def respond(self, result):
        if result.ok:
            return Response(WishlistSummarySerializer(wishlist_summary_payload(result.value)).data)
        if result.kind.is_degraded_storage:
            payload = wishlist_summary_payload(result.fallback or [], result)
            return Response(WishlistSummarySerializer(payload).data)
        return result_error_response(result)


@extend_schema(tags=["Wishlist"])
class WishlistView(WishlistServiceMixin, APIView):
    @extend_schema(summary="Get wishlist", responses={200: WishlistSummarySerializer})
    def get(self, request):
        return self.respond(self.get_service(request).get_wishlist())

    @extend_schema(summary="Clear wishlist", responses={200: WishlistSummarySerializer})
    def delete(self, request):
        return self.respond(self.get_service(request).clear_wishlist())


@extend_schema(tags=["Wishlist"])
class WishlistItemListView(WishlistServiceMixin, APIView):
    log = logger.bind(view="WishlistItemListView")

    @extend_schema(
        summary="Add product to wishlist",
        request=WishlistProductSerializer,
        responses={
            200: WishlistSummarySerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = WishlistProductSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.get_service(request).add_item(serializer.validated_data)
        self.log.bind_request(request).debug("Wishlist add processed", ok=result.ok)
        return self.respond(result)


@extend_schema(tags=["Wishlist"])
class WishlistItemDetailView(WishlistServiceMixin, APIView):
    @extend_schema(summary="Check wishlist membership", responses={200: WishlistMembershipSerializer})
    def get(self, request, product_slug: str):
        in_wishlist = self.get_service(request).is_in_wishlist(product_slug)
        return Response(
            WishlistMembershipSerializer(
                {"productSlug": product_slug, "inWishlist": in_wishlist}
            ).data
        )

    @extend_schema(summary="Remove product from wishlist", responses={200: WishlistSummarySerializer})
    def delete(self, request, product_slug: str):
        return self.respond(self.get_service(request).remove_item(product_slug))


@extend_schema(tags=["Wishlist"])
class WishlistToggleView(WishlistServiceMixin, APIView):
    log = logger.bind(view="WishlistToggleView")

    @extend_schema(
        summary="Toggle wishlist membership",
        request=WishlistProductSerializer,
        responses={
            200: WishlistToggleResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = WishlistProductSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product = serializer.validated_data
        slug = product.get("productSlug") or product.get("slug")
        result = self.get_service(request).toggle_wishlist(product)
        if not result.ok and not result.kind.is_degraded_storage:
            return result_error_response(result)
        items = result.value if result.ok else (result.fallback or [])
        payload = wishlist_summary_payload(items, None if result.ok else result)
        payload["productSlug"] = slug
        payload["inWishlist"] = any(i.product_slug == slug for i in items)
        self.log.bind_request(request).info(
            "Wishlist toggled", slug=slug, in_wishlist=payload["inWishlist"]
        )
        return Response(WishlistToggleResponseSerializer(payload).data)


@extend_schema(tags=["Wishlist"])
class WishlistAddToCartView(WishlistServiceMixin, APIView):
    """Copies a saved product into the cart; the wishlist entry is kept."""

    cart_service_factory = staticmethod(build_cart_service_for_request)
    log = logger.bind(view="WishlistAddToCartView")

    @extend_schema(
        summary="Add wishlist product to cart",
        request=None,
        responses={
            200: CartSummarySerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request, product_slug: str):
        loaded = self.get_service(request).get_wishlist()
        items = loaded.unwrap_or_fallback() or []
        item = next((i for i in items if i.product_slug == product_slug), None)
        if item is None:
            return error_response(
                "NOT_FOUND", "Product is not in the wishlist", {"productSlug": product_slug}
            )
        result = self.cart_service_factory(request).add_item(WishlistItemMapper.to_dict(item))
        self.log.bind_request(request).info(
            "Wishlist product added to cart", slug=product_slug, ok=result.ok
        )
        if result.ok:
            return Response(cart_summary_payload(result.value))
        if result.kind.is_degraded_storage:
            return Response(cart_summary_payload(result.fallback or [], result))
        return result_error_response(result)
