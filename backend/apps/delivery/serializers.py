from rest_framework import serializers


class OtpRequestSerializer(serializers.Serializer):
    email = serializers.EmailField()


class OtpLoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    # Digit count is checked by the auth service
    otp = serializers.CharField()


class DeliveryAgentSerializer(serializers.Serializer):
    id = serializers.CharField(required=False, allow_null=True)
    name = serializers.CharField(required=False, allow_blank=True)
    email = serializers.CharField(required=False, allow_blank=True)
    phone = serializers.CharField(required=False, allow_blank=True)


class WizardStateSerializer(serializers.Serializer):
    step = serializers.CharField()
    searchTerm = serializers.CharField(allow_blank=True)
    booking = serializers.JSONField(allow_null=True)

    def to_representation(self, instance):
        # OTP and agent details stay server-side
        return {
            "step": instance.step.value,
            "searchTerm": instance.search_term,
            "booking": instance.booking,
        }


class WizardSearchSerializer(serializers.Serializer):
    searchTerm = serializers.CharField(allow_blank=True)


class WizardConfirmSerializer(serializers.Serializer):
    otp = serializers.CharField(allow_blank=True)
    deliveryBoyName = serializers.CharField(allow_blank=True)
    deliveryBoyPhone = serializers.CharField(allow_blank=True)


class DeliveryConfirmedSerializer(serializers.Serializer):
    detail = serializers.CharField()
    booking = serializers.JSONField(allow_null=True)
    wizard = WizardStateSerializer()


class DetailResponseSerializer(serializers.Serializer):
    detail = serializers.CharField()
