from rest_framework import serializers

from apps.carts.serializers import CartItemReadSerializer


class CheckoutDetailsSerializer(serializers.Serializer):
    # Presence of address/phone is checked by the checkout service
    address = serializers.CharField(required=False, allow_blank=True)
    phone = serializers.CharField(required=False, allow_blank=True)
    firstName = serializers.CharField(required=False, allow_blank=True)
    lastName = serializers.CharField(required=False, allow_blank=True)


class PaymentVerificationSerializer(serializers.Serializer):
    razorpay_order_id = serializers.CharField()
    razorpay_payment_id = serializers.CharField()
    razorpay_signature = serializers.CharField()


class CheckoutPrefillSerializer(serializers.Serializer):
    firstName = serializers.CharField(allow_blank=True)
    lastName = serializers.CharField(allow_blank=True)
    email = serializers.CharField(allow_blank=True)
    phone = serializers.CharField(allow_blank=True)
    address = serializers.CharField(allow_blank=True)


class CheckoutSummarySerializer(serializers.Serializer):
    items = CartItemReadSerializer(many=True)
    count = serializers.IntegerField()
    total = serializers.CharField()
    currency = serializers.CharField()
    gatewayKeyId = serializers.CharField(allow_blank=True)
    phoneRequired = serializers.BooleanField()
    prefill = CheckoutPrefillSerializer()


class OrderPlacedSerializer(serializers.Serializer):
    bookingId = serializers.CharField(allow_null=True)
    cartCleared = serializers.BooleanField()


class PaymentOrderSerializer(serializers.Serializer):
    orderId = serializers.CharField(allow_null=True)
    amount = serializers.CharField()
    amountSubunits = serializers.IntegerField()
    currency = serializers.CharField()
    keyId = serializers.CharField()
    order = serializers.JSONField()
