from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.permissions import AllowAny
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.api.schemas import ErrorResponseSerializer
from apps.common import get_logger
from .commands import MAX_LIMIT, MIN_LIMIT, ProductListQuery
from .container import build_product_service, build_category_service
from .serializers import (
    CategoryListSerializer,
    CategorySerializer,
    ProductDetailSerializer,
    ProductListSerializer,
)

logger = get_logger(__name__).bind(component="catalog", layer="view")

ERROR_400 = OpenApiResponse(response=ErrorResponseSerializer, description="Validation failed")
ERROR_404 = OpenApiResponse(response=ErrorResponseSerializer, description="Not found")
ERROR_500 = OpenApiResponse(response=ErrorResponseSerializer, description="Storage failure")


@extend_schema(tags=["Catalog"])
class ProductListView(APIView):
    permission_classes = [AllowAny]
    service = build_product_service()
    log = logger.bind(view="ProductListView")

    @extend_schema(
        operation_id="catalog_list",
        summary="List products",
        description=(
            "Offset/limit paginated product listing, optionally filtered by "
            "category code and an exclusive upper price bound."
        ),
        parameters=[
            OpenApiParameter("offset", int, description="Items to skip (>= 0, default 0)"),
            OpenApiParameter(
                "limit",
                int,
                description=f"Page size ({MIN_LIMIT}-{MAX_LIMIT}, default 10)",
            ),
            OpenApiParameter(
                "category",
                str,
                description="Category code, case-insensitive (CLOTHING, SHOES, ACCESSORIES)",
            ),
            OpenApiParameter(
                "price_less_than",
                str,
                description="Only products strictly cheaper than this decimal amount",
            ),
        ],
        responses={200: ProductListSerializer, 400: ERROR_400, 500: ERROR_500},
    )
    def get(self, request):
        query = ProductListQuery.from_raw(request.query_params)
        self.log.debug(
            "Handling product list request",
            offset=query.offset,
            limit=query.limit,
            category=query.category,
        )
        page = self.service.list_products(query)
        return Response(ProductListSerializer(page).data)


@extend_schema(tags=["Catalog"])
class ProductDetailView(APIView):
    permission_classes = [AllowAny]
    service = build_product_service()
    log = logger.bind(view="ProductDetailView")

    @extend_schema(
        operation_id="catalog_retrieve",
        summary="Get product with variants",
        description="Variants without their own price report the product price.",
        parameters=[OpenApiParameter("code", str, OpenApiParameter.PATH)],
        responses={
            200: ProductDetailSerializer,
            400: ERROR_400,
            404: ERROR_404,
            500: ERROR_500,
        },
    )
    def get(self, request, code: str = ""):
        self.log.debug("Fetching product detail", code=code)
        dto = self.service.get_product(code)
        return Response(ProductDetailSerializer(dto).data)


@extend_schema(tags=["Categories"])
class CategoryListView(APIView):
    permission_classes = [AllowAny]
    service = build_category_service()
    log = logger.bind(view="CategoryListView")

    @extend_schema(
        operation_id="categories_list",
        summary="List categories",
        responses={200: CategoryListSerializer, 500: ERROR_500},
    )
    def get(self, request):
        self.log.debug("Listing categories")
        categories = self.service.list_categories()
        return Response(CategoryListSerializer({"categories": categories}).data)

    @extend_schema(
        operation_id="categories_create",
        summary="Create category",
        request=CategorySerializer,
        responses={200: CategorySerializer, 400: ERROR_400, 500: ERROR_500},
    )
    def post(self, request):
        dto = self.service.create_category(request.data)
        self.log.info("Category created via API", code=dto.code)
        return Response(CategorySerializer(dto).data, status=status.HTTP_200_OK)
