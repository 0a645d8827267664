"""Serializers for the article form's real-time validation endpoint."""

from rest_framework import serializers

from .components import FIELDS, IMAGE_FIELD


class FieldChangeSerializer(serializers.Serializer):
    """One field edit sent by the browser while the user types."""

    field = serializers.ChoiceField(choices=FIELDS)
    value = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)
    image = serializers.FileField(required=False, allow_empty_file=True)
    article = serializers.IntegerField(required=False, allow_null=True, min_value=1)

    def validate(self, attrs):
        """Pick the changed value from ``image`` or ``value`` depending on the field."""
        if attrs["field"] == IMAGE_FIELD:
            attrs["new_value"] = attrs.get("image")
        else:
            attrs["new_value"] = attrs.get("value")
        return attrs


class FieldChangeResultSerializer(serializers.Serializer):
    """Form state after a field edit: values (slug may be re-derived) and field errors."""

    field = serializers.CharField()
    values = serializers.DictField(child=serializers.CharField(allow_blank=True, allow_null=True))
    field_errors = serializers.DictField(child=serializers.CharField())
    messages = serializers.DictField(child=serializers.CharField())


__all__ = ["FieldChangeResultSerializer", "FieldChangeSerializer"]
