from __future__ import annotations

from typing import Any, Callable, List, TypeVar, Union

from apps.api.exceptions import ApplicationError
from apps.common import get_logger
from .commands import CategoryCreateCommand, ProductListQuery
from .dtos import CategoryDTO, ProductDetailDTO, ProductPageDTO
from .mappers import CategoryMapper, ProductMapper
from .protocols import CategoryRepositoryProtocol, ProductRepositoryProtocol

logger = get_logger(__name__).bind(component="catalog", layer="service")

T = TypeVar("T")


def _storage_call(log, operation: str, call: Callable[[], T], **context: Any) -> T:
    """Run a repository call; failures become SERVER_ERROR carrying the storage message."""
    try:
        return call()
    except ApplicationError:
        raise
    except Exception as exc:
        log.exception("Storage call failed", operation=operation, **context)
        message = str(exc) or exc.__class__.__name__
        raise ApplicationError(
            "SERVER_ERROR",
            message,
            details={"operation": operation, "exception": exc.__class__.__name__},
        ) from exc


class ProductService:
    def __init__(self, products: ProductRepositoryProtocol):
        self.products = products
        self.logger = logger.bind(service="ProductService")

    def list_products(self, query: ProductListQuery) -> ProductPageDTO:
        self.logger.debug(
            "Listing products",
            offset=query.offset,
            limit=query.limit,
            category=query.category,
            price_less_than=query.price_less_than,
        )
        records, total = _storage_call(
            self.logger, "get_products", lambda: self.products.get_products(query)
        )
        return ProductPageDTO(
            products=ProductMapper.many_to_dto(records),
            total=int(total),
            offset=query.offset,
            limit=query.limit,
        )

    def get_product(self, code: str) -> ProductDetailDTO:
        if not code:
            raise ApplicationError("VALIDATION_ERROR", "product code is required")
        self.logger.debug("Fetching product", code=code)
        product = _storage_call(
            self.logger,
            "get_product_by_code",
            lambda: self.products.get_product_by_code(code),
            code=code,
        )
        if product is None:
            self.logger.info("Product not found", code=code)
            raise ApplicationError(
                "NOT_FOUND", "product not found", details={"code": code}
            )
        return ProductMapper.to_detail_dto(product)

    def list_all_products(self) -> List[ProductDetailDTO]:
        self.logger.debug("Listing all products")
        records = _storage_call(
            self.logger, "get_all_products", self.products.get_all_products
        )
        return ProductMapper.many_to_detail_dto(records)


class CategoryService:
    def __init__(self, categories: CategoryRepositoryProtocol):
        self.categories = categories
        self.logger = logger.bind(service="CategoryService")

    def list_categories(self) -> List[CategoryDTO]:
        self.logger.debug("Listing categories")
        records = _storage_call(
            self.logger, "get_all_categories", self.categories.get_all_categories
        )
        return CategoryMapper.many_to_dto(records)

    def create_category(
        self, data: Union[CategoryCreateCommand, Any]
    ) -> CategoryDTO:
        cmd = (
            data
            if isinstance(data, CategoryCreateCommand)
            else CategoryCreateCommand.from_raw(data)
        )
        self.logger.info("Creating category", code=cmd.code)
        category = _storage_call(
            self.logger,
            "create_category",
            lambda: self.categories.create_category(code=cmd.code, name=cmd.name),
            code=cmd.code,
        )
        self.logger.info("Category created", code=category.code)
        return CategoryMapper.to_dto(category)
