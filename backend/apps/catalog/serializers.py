from rest_framework import serializers


def _price_field(**kwargs):
    # JSON number at the stored precision
    return serializers.DecimalField(
        max_digits=10, decimal_places=2, coerce_to_string=False, **kwargs
    )


class CategorySerializer(serializers.Serializer):
    code = serializers.CharField(max_length=32)
    name = serializers.CharField(max_length=256)


class CategoryListSerializer(serializers.Serializer):
    categories = CategorySerializer(many=True)


class VariantSerializer(serializers.Serializer):
    name = serializers.CharField()
    sku = serializers.CharField()
    price = _price_field()


class ProductReadSerializer(serializers.Serializer):
    code = serializers.CharField()
    price = _price_field()
    category = CategorySerializer(required=False, allow_null=True)

    def to_representation(self, instance):
        if instance is None:
            return None
        data = super().to_representation(instance)
        # Uncategorized products omit the key rather than sending null or {}
        if data.get("category") is None:
            data.pop("category", None)
        return data


class ProductDetailSerializer(ProductReadSerializer):
    variants = VariantSerializer(many=True)


class ProductListSerializer(serializers.Serializer):
    products = ProductReadSerializer(many=True)
    total = serializers.IntegerField()
    offset = serializers.IntegerField()
    limit = serializers.IntegerField()
