from django.utils import timezone
from rest_framework import serializers

from .constants import BookingStatus, TurfStatus
from .models import Booking, Turf


# =========================================================
# TURF SERIALIZERS
# =========================================================
class TurfSerializer(serializers.ModelSerializer):
    owner_name = serializers.CharField(source="owner.display_name", read_only=True)

    class Meta:
        model = Turf
        fields = (
            "id",
            "name",
            "description",
            "image",
            "address",
            "city",
            "state",
            "phone",
            "amenities",
            "status",
            "opening_time",
            "closing_time",
            "owner_id",
            "owner_name",
            "created_at",
        )
        read_only_fields = fields


class TurfWriteSerializer(serializers.Serializer):
    """
    Whitelisted turf fields. Anything else in the payload is ignored;
    id, owner, status and timestamps are never writable here.
    """
    name = serializers.CharField(max_length=100)
    description = serializers.CharField(required=False, allow_blank=True)
    address = serializers.CharField(max_length=255)
    city = serializers.CharField(required=False, allow_blank=True, max_length=100)
    state = serializers.CharField(required=False, allow_blank=True, max_length=100)
    phone = serializers.CharField(required=False, allow_blank=True, max_length=20)
    amenities = serializers.ListField(
        child=serializers.CharField(),
        required=False
    )
    opening_time = serializers.TimeField(required=False)
    closing_time = serializers.TimeField(required=False)

    def validate(self, attrs):
        open_t = attrs.get("opening_time")
        close_t = attrs.get("closing_time")

        if open_t and close_t and open_t >= close_t:
            raise serializers.ValidationError(
                "opening_time must be before closing_time"
            )
        return attrs


class TurfStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=TurfStatus.CHOICES)


class TurfImageUploadSerializer(serializers.Serializer):
    image = serializers.ImageField()


class TurfAvailabilityQuerySerializer(serializers.Serializer):
    date = serializers.DateField()

    def validate_date(self, value):
        if value < timezone.localdate():
            raise serializers.ValidationError("Date cannot be in the past")
        return value


# =========================================================
# BOOKING SERIALIZERS
# =========================================================
class BookingSerializer(serializers.ModelSerializer):
    turf_name = serializers.CharField(source="turf.name", read_only=True)
    display_status = serializers.CharField(read_only=True)
    duration_hours = serializers.FloatField(read_only=True)

    class Meta:
        model = Booking
        fields = (
            "id",
            "turf_id",
            "turf_name",
            "user_id",
            "date",
            "start_time",
            "end_time",
            "duration_hours",
            "price",
            "status",
            "display_status",
            "created_by_name",
            "cancelled_at",
            "cancellation_reason",
            "created_at",
        )
        read_only_fields = fields


class BookingCreateSerializer(serializers.Serializer):
    turf_id = serializers.IntegerField()
    date = serializers.DateField()
    start_time = serializers.DateTimeField()
    end_time = serializers.DateTimeField()

    def validate(self, attrs):
        if attrs["end_time"] <= attrs["start_time"]:
            raise serializers.ValidationError("end_time must be after start_time")
        return attrs


class AdminBookingCreateSerializer(BookingCreateSerializer):
    user_id = serializers.IntegerField()


class BookingCancelSerializer(serializers.Serializer):
    reason = serializers.CharField(required=False, allow_blank=True)


class BookingListQuerySerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=BookingStatus.CHOICES, required=False)
    turf_id = serializers.IntegerField(required=False)
    date = serializers.DateField(required=False)
