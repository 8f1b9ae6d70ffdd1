from django.contrib import admin

from .models import Category, Product, Variant


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("code", "name", "created_at")
    search_fields = ("code", "name")


class VariantInline(admin.TabularInline):
    model = Variant
    extra = 0


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("code", "price", "category")
    list_filter = ("category",)
    search_fields = ("code",)
    list_select_related = ("category",)
    inlines = [VariantInline]
