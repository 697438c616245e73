from rest_framework import serializers


class RegisterRequestSerializer(serializers.Serializer):
    name = serializers.CharField()
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=6)
    phone = serializers.CharField()
    address = serializers.CharField(required=False, allow_blank=True)


class LoginRequestSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class GoogleLoginRequestSerializer(serializers.Serializer):
    credential = serializers.CharField()


class VerifyEmailRequestSerializer(serializers.Serializer):
    token = serializers.CharField()


class UserProfileSerializer(serializers.Serializer):
    id = serializers.CharField(required=False, allow_null=True)
    name = serializers.CharField(required=False, allow_blank=True)
    email = serializers.CharField(required=False, allow_blank=True)
    phone = serializers.CharField(required=False, allow_blank=True)
    address = serializers.CharField(required=False, allow_blank=True)
    role = serializers.CharField(required=False, allow_blank=True)

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data.setdefault("phone", "")
        data.setdefault("address", "")
        return data


class ProfileUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(required=False)
    phone = serializers.CharField(required=False, allow_blank=True)
    address = serializers.CharField(required=False, allow_blank=True)


class AuthResponseSerializer(serializers.Serializer):
    message = serializers.CharField(allow_blank=True)
    user = UserProfileSerializer(allow_null=True)


class DetailResponseSerializer(serializers.Serializer):
    detail = serializers.CharField()


class OrdersResponseSerializer(serializers.Serializer):
    count = serializers.IntegerField()
    bookings = serializers.ListField(child=serializers.JSONField())
