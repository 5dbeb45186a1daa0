from django.urls import path

from .views import BookingReviewView, MyReviewsView, ReviewListCreateView, ReviewSummaryView

urlpatterns = [
    path("reviews/", ReviewListCreateView.as_view(), name="review-list"),
    path("reviews/mine/", MyReviewsView.as_view(), name="review-mine"),
    path("reviews/summary/", ReviewSummaryView.as_view(), name="review-summary"),
    path(
        "reviews/booking/<int:booking_id>/",
        BookingReviewView.as_view(),
        name="review-booking"
    ),
]
