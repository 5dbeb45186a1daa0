from rest_framework import serializers

from .models import Review


class ReviewSerializer(serializers.ModelSerializer):
    user_name = serializers.CharField(source="user.display_name", read_only=True)
    turf_id = serializers.IntegerField(source="booking.turf_id", read_only=True)

    class Meta:
        model = Review
        fields = (
            "id",
            "booking_id",
            "turf_id",
            "user_id",
            "user_name",
            "rating",
            "comment",
            "created_at",
        )
        read_only_fields = fields


class ReviewCreateSerializer(serializers.Serializer):
    booking_id = serializers.IntegerField()
    # range is enforced by ReviewService
    rating = serializers.IntegerField()
    comment = serializers.CharField(required=False, allow_blank=True)


class ReviewQuerySerializer(serializers.Serializer):
    turf_id = serializers.IntegerField(required=False)
