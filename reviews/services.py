# reviews/services.py
import logging

from django.db import IntegrityError, transaction
from django.db.models import Avg, Count
from django.utils import timezone

from Turf.constants import BookingStatus
from Turf.exceptions import (
    AlreadyReviewed,
    BookingNotFound,
    InvalidRating,
    InvalidReviewState,
    NotBookingOwner,
    NotFoundError,
    NotYetCompleted,
)
from Turf.models import Booking
from .models import Review

logger = logging.getLogger(__name__)

# Stored "active" is legacy; pending/confirmed/cancelled are never reviewable
REVIEWABLE_STATUSES = (BookingStatus.ACTIVE, BookingStatus.COMPLETED)

RATING_VALUES = (5, 4, 3, 2, 1)


class ReviewService:

    @staticmethod
    def create_review(user_id, booking_id, rating, comment=None):
        if isinstance(rating, bool) or not isinstance(rating, int) or not 1 <= rating <= 5:
            raise InvalidRating()

        booking = Booking.objects.filter(id=booking_id).first()
        if booking is None:
            raise BookingNotFound()

        if booking.user_id != user_id:
            raise NotBookingOwner("You can only review your own bookings")

        if booking.end_time > timezone.now():
            raise NotYetCompleted()

        if booking.status not in REVIEWABLE_STATUSES:
            raise InvalidReviewState(f"Cannot review a {booking.status} booking")

        if Review.objects.filter(user_id=user_id, booking_id=booking_id).exists():
            raise AlreadyReviewed()

        try:
            with transaction.atomic():
                review = Review.objects.create(
                    user_id=user_id,
                    booking=booking,
                    rating=rating,
                    comment=comment or "",
                )
        except IntegrityError:
            # Lost a race with a concurrent submission for the same pair
            raise AlreadyReviewed()

        logger.info("Review %s added for booking %s", review.id, booking.id)
        return review

    # -------------------------------
    # LISTINGS
    # -------------------------------
    @staticmethod
    def list_reviews(turf_id=None):
        qs = Review.objects.select_related("user", "booking")
        if turf_id:
            qs = qs.filter(booking__turf_id=turf_id)
        return qs.order_by("-created_at")

    @staticmethod
    def user_reviews(user_id):
        return (
            Review.objects
            .select_related("booking")
            .filter(user_id=user_id)
            .order_by("-created_at")
        )

    @staticmethod
    def booking_review(booking_id):
        review = (
            Review.objects
            .select_related("user")
            .filter(booking_id=booking_id)
            .first()
        )
        if review is None:
            raise NotFoundError("No review for this booking")
        return review

    # -------------------------------
    # AGGREGATES
    # -------------------------------
    @staticmethod
    def _scoped(turf_id=None):
        qs = Review.objects.all()
        if turf_id:
            qs = qs.filter(booking__turf_id=turf_id)
        return qs

    @staticmethod
    def average_rating(turf_id=None):
        average = ReviewService._scoped(turf_id).aggregate(avg=Avg("rating"))["avg"]
        return float(average) if average is not None else 0.0

    @staticmethod
    def rating_distribution(turf_id=None):
        counts = dict(
            ReviewService._scoped(turf_id)
            .order_by()
            .values("rating")
            .annotate(count=Count("id"))
            .values_list("rating", "count")
        )
        return [
            {"rating": rating, "count": counts.get(rating, 0)}
            for rating in RATING_VALUES
        ]
