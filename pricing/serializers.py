from rest_framework import serializers

from .models import Pricing


class PricingSerializer(serializers.ModelSerializer):
    class Meta:
        model = Pricing
        fields = ("id", "turf_id", "day_type", "time_slot", "price", "updated_at")
        read_only_fields = fields


class PricingUpdateSerializer(serializers.Serializer):
    """
    {"pricing": {"weekday": {"morning": 550}, "weekend": {...}}}
    Cell-level validation happens in the resolver so the rules live in one place.
    """
    pricing = serializers.DictField(
        child=serializers.DictField(child=serializers.JSONField())
    )
