from rest_framework import serializers

CONTACT_REQUIRED = "Please fill in all required fields"


class SectionSerializer(serializers.Serializer):
    heading = serializers.CharField()
    body = serializers.CharField(allow_blank=True)
    items = serializers.ListField(child=serializers.CharField())


class PolicyPageSerializer(serializers.Serializer):
    slug = serializers.CharField()
    title = serializers.CharField()
    lastUpdated = serializers.CharField(source="last_updated")
    sections = SectionSerializer(many=True)


class PolicyPageSummarySerializer(serializers.Serializer):
    slug = serializers.CharField()
    title = serializers.CharField()


class ContactRequestSerializer(serializers.Serializer):
    name = serializers.CharField(error_messages={"required": CONTACT_REQUIRED, "blank": CONTACT_REQUIRED})
    email = serializers.EmailField(error_messages={"required": CONTACT_REQUIRED, "blank": CONTACT_REQUIRED})
    phone = serializers.CharField(required=False, allow_blank=True)
    subject = serializers.CharField(required=False, allow_blank=True)
    message = serializers.CharField(error_messages={"required": CONTACT_REQUIRED, "blank": CONTACT_REQUIRED})


class DetailResponseSerializer(serializers.Serializer):
    detail = serializers.CharField()
