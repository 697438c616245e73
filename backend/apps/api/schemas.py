from drf_spectacular.utils import inline_serializer
from rest_framework import serializers


class ErrorDetailSerializer(serializers.Serializer):
    code = serializers.CharField()
    message = serializers.CharField()
    status = serializers.IntegerField()
    details = serializers.JSONField(required=False)
    hint = serializers.CharField(required=False, allow_blank=True)
    extra = serializers.JSONField(required=False)


class ErrorResponseSerializer(serializers.Serializer):
    error = ErrorDetailSerializer()


class StorageWarningSerializer(serializers.Serializer):
    code = serializers.CharField()
    message = serializers.CharField()


def paginated_response(item_serializer_class):
    """Schema for a ``?page``/``?limit`` listing of ``item_serializer_class`` rows."""
    return inline_serializer(
        name=f"Paginated{item_serializer_class.__name__}",
        fields={
            "count": serializers.IntegerField(),
            "next": serializers.CharField(allow_null=True),
            "previous": serializers.CharField(allow_null=True),
            "results": item_serializer_class(many=True),
        },
    )
