from typing import List, Optional, Tuple

from django.db import transaction
from django.db.models import Prefetch, QuerySet

from apps.common.repository import GenericRepository
from .commands import ProductListQuery
from .models import Category, Product, Variant


class CategoryRepository(GenericRepository[Category]):
    def __init__(self):
        super().__init__(Category)

    def get_all_categories(self) -> List[Category]:
        return list(self.queryset().order_by("id"))

    def create_category(self, *, code: str, name: str) -> Category:
        # savepoint so a duplicate code does not poison an enclosing transaction
        with transaction.atomic():
            return self.create(code=code, name=name)


class ProductRepository(GenericRepository[Product]):
    def __init__(self):
        super().__init__(Product)

    def queryset(self) -> QuerySet:
        """Products with category joined, ordered by insertion for stable paging."""
        return self.model.objects.select_related("category").order_by("id")

    def with_variants(self, qs: QuerySet) -> QuerySet:
        return qs.prefetch_related(
            Prefetch("variants", queryset=Variant.objects.order_by("id"))
        )

    def get_all_products(self) -> List[Product]:
        return list(self.with_variants(self.queryset()))

    def get_products(self, query: ProductListQuery) -> Tuple[List[Product], int]:
        qs = self.queryset()
        if query.category:
            qs = qs.filter(category__code=query.category)
        if query.price_less_than is not None:
            qs = qs.filter(price__lt=query.price_less_than)
        total = qs.count()
        page = list(qs[query.offset : query.offset + query.limit])
        return page, total

    def get_product_by_code(self, code: str) -> Optional[Product]:
        return self.with_variants(self.queryset()).filter(code=code).first()
