from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional


@dataclass
class CategoryDTO:
    code: str
    name: str


@dataclass
class VariantDTO:
    name: str
    sku: str
    price: Decimal


@dataclass
class ProductDTO:
    code: str
    price: Decimal
    category: Optional[CategoryDTO] = None


@dataclass
class ProductDetailDTO:
    code: str
    price: Decimal
    category: Optional[CategoryDTO] = None
    variants: List[VariantDTO] = field(default_factory=list)


@dataclass
class ProductPageDTO:
    products: List[ProductDTO]
    total: int
    offset: int
    limit: int


"""DTO dataclasses only. Mapping logic lives in mappers.py."""
