# Dashboard/serializers.py
from rest_framework import serializers


class StatsQuerySerializer(serializers.Serializer):
    fresh = serializers.BooleanField(required=False, default=False)


class EarningsSerializer(serializers.Serializer):
    # items are {"day"|"week"|"month": label, "earnings": amount}
    breakdown = serializers.ListField(child=serializers.DictField())
    total_earnings = serializers.FloatField()


class AdminStatsSerializer(serializers.Serializer):
    overview = serializers.DictField()
    last_7_days = EarningsSerializer()
    current_week = EarningsSerializer()
    last_5_weeks = EarningsSerializer()
    this_month = EarningsSerializer()
    this_year = EarningsSerializer()
    insights = serializers.DictField()
