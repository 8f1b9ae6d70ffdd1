from django.urls import path
from apps.catalog.views import (
    ProductListView,
    ProductDetailView,
    CategoryListView,
)

urlpatterns = [
    path("catalog", ProductListView.as_view(), name="catalog-list"),
    # Empty code reaches the view so it can answer 400 instead of a bare 404
    path(
        "catalog/",
        ProductDetailView.as_view(),
        {"code": ""},
        name="catalog-detail-missing-code",
    ),
    path("catalog/<str:code>", ProductDetailView.as_view(), name="catalog-detail"),
    path("categories", CategoryListView.as_view(), name="categories-list"),
]
