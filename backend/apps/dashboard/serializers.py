from rest_framework import serializers


def _required(message):
    return {"required": message, "blank": message, "null": message, "invalid": message}


class AdminOtpRequestSerializer(serializers.Serializer):
    email = serializers.EmailField()


class AdminOtpLoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    otp = serializers.CharField()


class AdminProfileSerializer(serializers.Serializer):
    id = serializers.CharField(required=False, allow_null=True)
    name = serializers.CharField(required=False, allow_blank=True)
    email = serializers.CharField(required=False, allow_blank=True)
    role = serializers.CharField(required=False, allow_blank=True)


class SpecificationSerializer(serializers.Serializer):
    key = serializers.CharField(allow_blank=True, default="")
    value = serializers.CharField(allow_blank=True, default="")


class ProductFormSerializer(serializers.Serializer):
    name = serializers.CharField(error_messages=_required("Product name is required"))
    shortDescription = serializers.CharField(
        error_messages=_required("Short description is required")
    )
    fullDescription = serializers.CharField(
        error_messages=_required("Full description is required")
    )
    price = serializers.FloatField(error_messages=_required("Valid price is required"))
    discountPercentage = serializers.FloatField(
        required=False, allow_null=True, min_value=0, max_value=100
    )
    stock = serializers.IntegerField(
        min_value=0,
        error_messages={**_required("Valid stock is required"), "min_value": "Valid stock is required"},
    )
    category = serializers.CharField(required=False, allow_blank=True, default="")
    customCategory = serializers.CharField(required=False, allow_blank=True, default="")
    brand = serializers.CharField(error_messages=_required("Brand is required"))
    sku = serializers.CharField(error_messages=_required("SKU is required"))
    weight = serializers.CharField(required=False, allow_blank=True, default="")
    dimensions = serializers.CharField(required=False, allow_blank=True, default="")
    material = serializers.CharField(required=False, allow_blank=True, default="")
    warranty = serializers.CharField(required=False, allow_blank=True, default="")
    returnPolicy = serializers.CharField(required=False, allow_blank=True, default="")
    colors = serializers.ListField(child=serializers.CharField(), required=False, default=list)
    finishes = serializers.ListField(child=serializers.CharField(), required=False, default=list)
    specifications = SpecificationSerializer(many=True, required=False, default=list)
    images = serializers.ListField(
        child=serializers.CharField(),
        min_length=1,
        error_messages={
            "required": "At least one product image is required",
            "min_length": "At least one product image is required",
            "empty": "At least one product image is required",
        },
    )
    isVisible = serializers.BooleanField(required=False, default=True)

    def validate_price(self, value):
        if value <= 0:
            raise serializers.ValidationError("Valid price is required")
        return value

    def validate(self, attrs):
        if not (attrs.get("category") or "").strip() and not (attrs.get("customCategory") or "").strip():
            raise serializers.ValidationError({"category": "Category is required"})
        return attrs


class VisibilitySerializer(serializers.Serializer):
    isVisible = serializers.BooleanField()


class BookingStatusSerializer(serializers.Serializer):
    status = serializers.CharField()


class DashboardSummarySerializer(serializers.Serializer):
    total = serializers.IntegerField()
    completed = serializers.IntegerField()
    pending = serializers.IntegerField()
    revenue = serializers.FloatField()


class DeliveryStaffRegisterSerializer(serializers.Serializer):
    name = serializers.CharField(error_messages=_required("Please fill all fields"))
    email = serializers.EmailField(
        error_messages={**_required("Please fill all fields"), "invalid": "Enter a valid email address."}
    )
    phone = serializers.CharField(error_messages=_required("Please fill all fields"))


class DetailResponseSerializer(serializers.Serializer):
    detail = serializers.CharField()
