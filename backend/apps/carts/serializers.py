import math

from rest_framework import serializers

from apps.api.schemas import StorageWarningSerializer


class CartItemReadSerializer(serializers.Serializer):
    id = serializers.JSONField()
    name = serializers.CharField()
    price = serializers.SerializerMethodField()
    quantity = serializers.IntegerField()
    productImage = serializers.CharField(source="product_image", allow_null=True)
    rating = serializers.FloatField(allow_null=True)
    discount = serializers.FloatField(allow_null=True)
    backendId = serializers.CharField(source="backend_id", allow_null=True)
    productSlug = serializers.CharField(source="slug", allow_null=True)

    def get_price(self, item):
        price = item.price
        if isinstance(price, float) and not math.isfinite(price):
            return None
        return price


class CartSummarySerializer(serializers.Serializer):
    items = CartItemReadSerializer(many=True)
    count = serializers.IntegerField()
    total = serializers.CharField()
    warning = StorageWarningSerializer(required=False)


class CartAddSerializer(serializers.Serializer):
    # The full product card payload is forwarded; only the identity is checked here
    id = serializers.JSONField(required=False)
    name = serializers.CharField(required=False, allow_blank=True)
    price = serializers.JSONField(required=False, allow_null=True)

    def validate(self, attrs):
        raw = dict(self.initial_data)
        if raw.get("id") in (None, "") and raw.get("_id") in (None, ""):
            raise serializers.ValidationError({"id": ["Product id is required."]})
        return raw


class CartQuantitySerializer(serializers.Serializer):
    # Range checks are enforced by the cart service
    quantity = serializers.IntegerField()


class CartCountSerializer(serializers.Serializer):
    count = serializers.IntegerField()
