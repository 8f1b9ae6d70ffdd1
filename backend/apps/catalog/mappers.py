from decimal import Decimal
from typing import Iterable, List, Optional

from .dtos import (
    CategoryDTO,
    ProductDetailDTO,
    ProductDTO,
    VariantDTO,
)
from .models import Category, Product, Variant


def effective_variant_price(variant_price: Optional[Decimal], product_price: Decimal) -> Decimal:
    """A missing or zero variant price falls back to the parent product's price."""
    if variant_price is None or variant_price == 0:
        return product_price
    return variant_price


class CategoryMapper:
    @staticmethod
    def to_dto(cat: Category) -> CategoryDTO:
        return CategoryDTO(code=cat.code, name=cat.name)

    @staticmethod
    def optional_to_dto(cat: Optional[Category]) -> Optional[CategoryDTO]:
        return CategoryMapper.to_dto(cat) if cat is not None else None

    @staticmethod
    def many_to_dto(categories: Iterable[Category]) -> List[CategoryDTO]:
        return [CategoryMapper.to_dto(c) for c in categories]


class VariantMapper:
    @staticmethod
    def to_dto(variant: Variant, *, product_price: Decimal) -> VariantDTO:
        return VariantDTO(
            name=variant.name,
            sku=variant.sku,
            price=effective_variant_price(variant.price, product_price),
        )


class ProductMapper:
    @staticmethod
    def to_dto(product: Product) -> ProductDTO:
        return ProductDTO(
            code=product.code,
            price=product.price,
            category=CategoryMapper.optional_to_dto(getattr(product, "category", None)),
        )

    @staticmethod
    def many_to_dto(products: Iterable[Product]) -> List[ProductDTO]:
        return [ProductMapper.to_dto(p) for p in products]

    @staticmethod
    def to_detail_dto(product: Product) -> ProductDetailDTO:
        return ProductDetailDTO(
            code=product.code,
            price=product.price,
            category=CategoryMapper.optional_to_dto(getattr(product, "category", None)),
            variants=[
                VariantMapper.to_dto(v, product_price=product.price)
                for v in product.variants.all()
            ],
        )

    @staticmethod
    def many_to_detail_dto(products: Iterable[Product]) -> List[ProductDetailDTO]:
        return [ProductMapper.to_detail_dto(p) for p in products]
