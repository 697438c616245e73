from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.schemas import ErrorResponseSerializer, paginated_response
from apps.api.utils import error_response
from apps.common import get_logger

from .commands import CategoryFilterCommand
from .container import build_catalog_service
from .pagination import ProductListPagination
from .serializers import (
    CategoryPageSerializer,
    ProductReadSerializer,
    ProductSearchSerializer,
)

logger = get_logger(__name__).bind(component="catalog", layer="view")


@extend_schema(tags=["Catalog"])
class ProductListView(APIView):
    permission_classes = [AllowAny]
    service = build_catalog_service()
    pagination_class = ProductListPagination
    log = logger.bind(view="ProductListView")

    @extend_schema(
        operation_id="products_list",
        summary="List products",
        description="Supports pagination via ?page and ?limit. Cached results may be served.",
        responses={200: paginated_response(ProductReadSerializer)},
    )
    def get(self, request):
        products = self.service.list_products()
        self.log.debug("Handling product list request", count=len(products))
        paginator = self.pagination_class()
        page = paginator.paginate_queryset(products, request, view=self)
        data = ProductReadSerializer(page if page is not None else products, many=True).data
        if page is None:
            return Response(data)
        return paginator.get_paginated_response(data)


@extend_schema(tags=["Catalog"])
class ProductDetailView(APIView):
    permission_classes = [AllowAny]
    service = build_catalog_service()
    log = logger.bind(view="ProductDetailView")

    @extend_schema(
        operation_id="products_retrieve",
        summary="Get product by slug",
        parameters=[OpenApiParameter("slug", str, OpenApiParameter.PATH)],
        responses={
            200: ProductReadSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, slug: str):
        dto = self.service.get_product_by_slug(slug)
        if not dto:
            self.log.info("Product not found", slug=slug)
            return error_response("NOT_FOUND", "Product not found", {"slug": slug})
        return Response(ProductReadSerializer(dto).data)


@extend_schema(tags=["Catalog"])
class ProductSearchView(APIView):
    permission_classes = [AllowAny]
    service = build_catalog_service()

    @extend_schema(
        summary="Search products",
        description="Case-insensitive match on name, description and category. An empty query returns everything.",
        parameters=[OpenApiParameter("q", str, required=False)],
        responses={200: ProductSearchSerializer},
    )
    def get(self, request):
        query = request.query_params.get("q", "")
        results = self.service.search(query)
        return Response(
            ProductSearchSerializer(
                {"query": query, "count": len(results), "results": results}
            ).data
        )


@extend_schema(tags=["Catalog"])
class CategoryProductsView(APIView):
    permission_classes = [AllowAny]
    service = build_catalog_service()
    log = logger.bind(view="CategoryProductsView")

    @extend_schema(
        summary="Category listing",
        description=(
            "Products whose category equals the slug. Filters: max_price (default 100000), "
            "materials (matched against the product name) and availability "
            "(instock by default; send an empty value to disable)."
        ),
        parameters=[
            OpenApiParameter("slug", str, OpenApiParameter.PATH),
            OpenApiParameter("max_price", float, required=False),
            OpenApiParameter("materials", str, required=False, many=True),
            OpenApiParameter("availability", str, required=False, many=True),
        ],
        responses={200: CategoryPageSerializer},
    )
    def get(self, request, slug: str):
        filters = CategoryFilterCommand.from_query(request.query_params)
        self.log.debug(
            "Handling category request",
            category=slug,
            max_price=filters.max_price,
            materials=filters.materials,
            availability=filters.availability,
        )
        page = self.service.list_category(slug, filters)
        return Response(CategoryPageSerializer(page).data)
