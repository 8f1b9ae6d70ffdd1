from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .commands import ProductListQuery
    from .models import Category, Product


class ProductRepositoryProtocol(Protocol):
    def get_all_products(self) -> Iterable["Product"]:
        ...

    def get_products(self, query: "ProductListQuery") -> Tuple[Sequence["Product"], int]:
        ...

    def get_product_by_code(self, code: str) -> Optional["Product"]:
        """Return ``None`` when no product has ``code``; raise on any other failure."""
        ...


class CategoryRepositoryProtocol(Protocol):
    def get_all_categories(self) -> Iterable["Category"]:
        ...

    def create_category(self, *, code: str, name: str) -> "Category":
        ...
