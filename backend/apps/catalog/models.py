from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models


class Category(models.Model):
    code = models.CharField(max_length=32, unique=True)
    name = models.CharField(max_length=256)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "categories"
        verbose_name_plural = "categories"

    def save(self, *args, **kwargs):
        self.code = (self.code or "").strip().upper()
        super().save(*args, **kwargs)

    def __str__(self):
        return self.code


class Product(models.Model):
    code = models.CharField(max_length=32, unique=True)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    category = models.ForeignKey(
        Category,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="products",
    )

    class Meta:
        db_table = "products"
        indexes = [
            models.Index(fields=["price"], name="product_price_idx"),
        ]

    def __str__(self):
        return self.code


class Variant(models.Model):
    product = models.ForeignKey(
        Product, on_delete=models.CASCADE, related_name="variants"
    )
    name = models.CharField(max_length=256)
    sku = models.CharField(max_length=256)
    # NULL or 0.00 means the variant sells at the product's price
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal("0.00"))],
    )

    class Meta:
        db_table = "product_variants"
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(
                fields=["product", "sku"], name="variant_product_sku_uniq"
            ),
        ]

    def __str__(self):
        return f"{self.product_id}:{self.sku}"
