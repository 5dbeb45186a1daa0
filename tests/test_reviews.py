from datetime import timedelta

import pytest
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
from reviews.models import Review
from reviews.services import ReviewService


@pytest.fixture
def finished(make_booking):
    """Completed booking that ended two hours ago."""
    start = timezone.now() - timedelta(hours=3)
    return make_booking(start, start + timedelta(hours=1), status=BookingStatus.COMPLETED)


@pytest.mark.django_db
class TestCreateReview:

    def test_one_review_per_user_and_booking(self, user, finished):
        review = ReviewService.create_review(user.id, finished.id, 5, "Great pitch")

        assert review.rating == 5
        assert review.comment == "Great pitch"

        with pytest.raises(AlreadyReviewed):
            ReviewService.create_review(user.id, finished.id, 4)

        assert Review.objects.count() == 1

    def test_legacy_active_booking_is_reviewable(self, user, make_booking):
        start = timezone.now() - timedelta(hours=3)
        booking = make_booking(start, start + timedelta(hours=1), status=BookingStatus.ACTIVE)

        assert ReviewService.create_review(user.id, booking.id, 3).booking_id == booking.id

    @pytest.mark.parametrize("rating", [0, 6, -1, 2.5, "4", True, None])
    def test_rating_must_be_int_in_range(self, user, finished, rating):
        with pytest.raises(InvalidRating):
            ReviewService.create_review(user.id, finished.id, rating)

    def test_missing_booking(self, user):
        with pytest.raises(BookingNotFound):
            ReviewService.create_review(user.id, 999999, 4)

    def test_only_the_booker_reviews(self, other_user, finished):
        with pytest.raises(NotBookingOwner):
            ReviewService.create_review(other_user.id, finished.id, 4)

    def test_slot_must_have_ended(self, user, make_booking):
        start = timezone.now() - timedelta(minutes=30)
        booking = make_booking(start, start + timedelta(hours=1), status=BookingStatus.COMPLETED)

        with pytest.raises(NotYetCompleted):
            ReviewService.create_review(user.id, booking.id, 4)

    @pytest.mark.parametrize(
        "status",
        [BookingStatus.PENDING, BookingStatus.CONFIRMED, BookingStatus.CANCELLED],
    )
    def test_status_must_be_active_or_completed(self, user, make_booking, status):
        start = timezone.now() - timedelta(hours=3)
        booking = make_booking(start, start + timedelta(hours=1), status=status)

        with pytest.raises(InvalidReviewState):
            ReviewService.create_review(user.id, booking.id, 4)


@pytest.mark.django_db
class TestReviewQueries:

    @pytest.fixture
    def reviews(self, user, other_user, make_booking):
        start = timezone.now() - timedelta(days=2)
        first = make_booking(start, start + timedelta(hours=1), status=BookingStatus.COMPLETED)
        second = make_booking(
            start + timedelta(hours=2),
            start + timedelta(hours=3),
            status=BookingStatus.COMPLETED,
            user=other_user,
        )
        return [
            ReviewService.create_review(user.id, first.id, 5),
            ReviewService.create_review(other_user.id, second.id, 3),
        ]

    def test_average_rating(self, turf, reviews):
        assert ReviewService.average_rating(turf.id) == 4.0

    def test_average_without_reviews(self, turf):
        assert ReviewService.average_rating(turf.id) == 0.0

    def test_distribution_lists_every_rating(self, turf, reviews):
        assert ReviewService.rating_distribution(turf.id) == [
            {"rating": 5, "count": 1},
            {"rating": 4, "count": 0},
            {"rating": 3, "count": 1},
            {"rating": 2, "count": 0},
            {"rating": 1, "count": 0},
        ]

    def test_listings(self, turf, user, reviews):
        assert len(ReviewService.list_reviews(turf.id)) == 2
        assert list(ReviewService.user_reviews(user.id)) == [reviews[0]]
        assert ReviewService.booking_review(reviews[1].booking_id) == reviews[1]

    def test_booking_without_review(self, finished):
        with pytest.raises(NotFoundError):
            ReviewService.booking_review(finished.id)
