from rest_framework import serializers

from .models import Setting


class SettingSerializer(serializers.ModelSerializer):
    class Meta:
        model = Setting
        fields = ("key", "value", "description", "updated_at")
        read_only_fields = fields


class DisableBookingsSerializer(serializers.Serializer):
    disabled = serializers.BooleanField()
    reason = serializers.CharField(required=False, allow_blank=True)


class SettingItemSerializer(serializers.Serializer):
    key = serializers.CharField(max_length=100)
    # bool / number / string; stored as text by the service
    value = serializers.JSONField()
    description = serializers.CharField(required=False, allow_blank=True)


class BulkSettingsSerializer(serializers.Serializer):
    settings = SettingItemSerializer(many=True, allow_empty=False)
