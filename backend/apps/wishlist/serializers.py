from rest_framework import serializers

from apps.api.schemas import StorageWarningSerializer


class WishlistItemReadSerializer(serializers.Serializer):
    productSlug = serializers.CharField(source="product_slug")
    name = serializers.CharField(allow_blank=True)
    price = serializers.JSONField(allow_null=True)
    productImage = serializers.CharField(source="image", allow_null=True)
    id = serializers.CharField(source="product_id", allow_null=True)


class WishlistSummarySerializer(serializers.Serializer):
    items = WishlistItemReadSerializer(many=True)
    count = serializers.IntegerField()
    warning = StorageWarningSerializer(required=False)


class WishlistToggleResponseSerializer(WishlistSummarySerializer):
    productSlug = serializers.CharField()
    inWishlist = serializers.BooleanField()


class WishlistMembershipSerializer(serializers.Serializer):
    productSlug = serializers.CharField()
    inWishlist = serializers.BooleanField()


class WishlistProductSerializer(serializers.Serializer):
    productSlug = serializers.CharField(required=False)
    slug = serializers.CharField(required=False)
    name = serializers.CharField(required=False, allow_blank=True)

    def validate(self, attrs):
        raw = dict(self.initial_data)
        if not (raw.get("productSlug") or raw.get("slug")):
            raise serializers.ValidationError({"productSlug": ["Product slug is required."]})
        return raw
