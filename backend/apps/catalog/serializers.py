from rest_framework import serializers


class ProductReadSerializer(serializers.Serializer):
    # Matches ProductDTO shapes used for responses
    id = serializers.CharField()
    name = serializers.CharField()
    slug = serializers.CharField()
    price = serializers.FloatField()
    finalPrice = serializers.FloatField()
    discount = serializers.FloatField()
    badge = serializers.CharField(allow_null=True)
    image = serializers.CharField(allow_blank=True)
    images = serializers.ListField(child=serializers.CharField())
    description = serializers.CharField(allow_blank=True)
    shortDescription = serializers.CharField(allow_blank=True)
    fullDescription = serializers.CharField(allow_blank=True)
    category = serializers.CharField(allow_blank=True)
    rating = serializers.FloatField()
    stock = serializers.IntegerField(allow_null=True)
    inStock = serializers.BooleanField()
    brand = serializers.CharField(allow_blank=True)
    sku = serializers.CharField(allow_blank=True)
    weight = serializers.CharField(allow_blank=True)
    dimensions = serializers.CharField(allow_blank=True)
    material = serializers.CharField(allow_blank=True)
    warranty = serializers.CharField(allow_blank=True)
    returnPolicy = serializers.CharField()
    colors = serializers.ListField(child=serializers.JSONField())
    finishes = serializers.ListField(child=serializers.JSONField())
    specifications = serializers.ListField(child=serializers.JSONField())
    reviews = serializers.ListField(child=serializers.JSONField())

    def to_representation(self, instance):
        if instance is None:
            return None
        if hasattr(instance, "__dataclass_fields__"):
            return {
                "id": instance.id,
                "name": instance.name,
                "slug": instance.slug,
                "price": instance.price,
                "finalPrice": instance.final_price,
                "discount": instance.discount,
                "badge": instance.badge,
                "image": instance.image,
                "images": list(instance.images),
                "description": instance.description,
                "shortDescription": instance.short_description,
                "fullDescription": instance.full_description,
                "category": instance.category,
                "rating": instance.rating,
                "stock": instance.stock,
                "inStock": instance.in_stock,
                "brand": instance.brand,
                "sku": instance.sku,
                "weight": instance.weight,
                "dimensions": instance.dimensions,
                "material": instance.material,
                "warranty": instance.warranty,
                "returnPolicy": instance.return_policy,
                "colors": list(instance.colors),
                "finishes": list(instance.finishes),
                "specifications": list(instance.specifications),
                "reviews": list(instance.reviews),
            }
        return super().to_representation(instance)


class ProductSearchSerializer(serializers.Serializer):
    query = serializers.CharField(allow_blank=True)
    count = serializers.IntegerField()
    results = ProductReadSerializer(many=True)


class CategoryPageSerializer(serializers.Serializer):
    slug = serializers.CharField()
    title = serializers.CharField()
    count = serializers.IntegerField()
    products = ProductReadSerializer(many=True)

    def to_representation(self, instance):
        if hasattr(instance, "__dataclass_fields__"):
            return {
                "slug": instance.slug,
                "title": instance.title,
                "count": len(instance.products),
                "products": ProductReadSerializer(instance.products, many=True).data,
            }
        return super().to_representation(instance)
