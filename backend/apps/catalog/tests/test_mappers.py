import unittest
from decimal import Decimal
from apps.catalog.mappers import (
    CategoryMapper,
    ProductMapper,
    effective_variant_price,
)


class StubCategory:
    def __init__(self, code: str, name: str):
        self.code = code
        self.name = name


class StubVariant:
    def __init__(self, name: str, sku: str, price=None):
        self.name = name
        self.sku = sku
        self.price = price


class StubVariantManager:
    def __init__(self, variants=None):
        self._variants = list(variants or [])

    def all(self):
        return list(self._variants)


class StubProduct:
    def __init__(self, code: str, price, category=None, variants=None):
        self.code = code
        self.price = price
        self.category = category
        self.variants = StubVariantManager(variants)


class CategoryMapperTests(unittest.TestCase):
    def test_category_mapper_basic(self):
        dto = CategoryMapper.to_dto(StubCategory("CLOTHING", "Clothing"))
        self.assertEqual(dto.code, "CLOTHING")
        self.assertEqual(dto.name, "Clothing")

    def test_category_many(self):
        dtos = CategoryMapper.many_to_dto(
            [StubCategory("SHOES", "Shoes"), StubCategory("ACCESSORIES", "Accessories")]
        )
        self.assertEqual([d.code for d in dtos], ["SHOES", "ACCESSORIES"])

    def test_category_many_empty(self):
        self.assertEqual(CategoryMapper.many_to_dto([]), [])


class EffectivePriceTests(unittest.TestCase):
    def test_zero_inherits_parent_price(self):
        self.assertEqual(
            effective_variant_price(Decimal("0"), Decimal("100.00")), Decimal("100.00")
        )
        self.assertEqual(
            effective_variant_price(Decimal("0.00"), Decimal("100.00")), Decimal("100.00")
        )

    def test_missing_inherits_parent_price(self):
        self.assertEqual(effective_variant_price(None, Decimal("42.50")), Decimal("42.50"))

    def test_own_price_wins(self):
        self.assertEqual(
            effective_variant_price(Decimal("95.00"), Decimal("100.00")), Decimal("95.00")
        )

    def test_zero_only_when_parent_is_zero(self):
        self.assertEqual(effective_variant_price(Decimal("0"), Decimal("0.00")), Decimal("0.00"))


class ProductMapperTests(unittest.TestCase):
    def test_product_mapper_with_category(self):
        product = StubProduct(
            "PROD001", Decimal("99.99"), category=StubCategory("CLOTHING", "Clothing")
        )
        dto = ProductMapper.to_dto(product)
        self.assertEqual(dto.code, "PROD001")
        self.assertEqual(dto.price, Decimal("99.99"))
        self.assertEqual(dto.category.code, "CLOTHING")
        self.assertEqual(dto.category.name, "Clothing")

    def test_product_mapper_without_category(self):
        dto = ProductMapper.to_dto(StubProduct("PROD009", Decimal("49.99")))
        self.assertIsNone(dto.category)

    def test_detail_applies_price_inheritance(self):
        product = StubProduct(
            "PROD001",
            Decimal("100.00"),
            variants=[
                StubVariant("Small", "PROD001-S", Decimal("95.00")),
                StubVariant("Default", "PROD001-DEF", Decimal("0")),
                StubVariant("Large", "PROD001-L", None),
            ],
        )
        dto = ProductMapper.to_detail_dto(product)
        self.assertEqual(
            [(v.sku, v.price) for v in dto.variants],
            [
                ("PROD001-S", Decimal("95.00")),
                ("PROD001-DEF", Decimal("100.00")),
                ("PROD001-L", Decimal("100.00")),
            ],
        )

    def test_detail_single_variant_without_price(self):
        product = StubProduct(
            "PROD002", Decimal("12.49"), variants=[StubVariant("Size 40", "PROD002-40")]
        )
        dto = ProductMapper.to_detail_dto(product)
        self.assertEqual(dto.variants[0].price, Decimal("12.49"))

    def test_detail_without_variants(self):
        dto = ProductMapper.to_detail_dto(StubProduct("PROD005", Decimal("7.25")))
        self.assertEqual(dto.variants, [])
