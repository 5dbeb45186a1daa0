from django.urls import path

from .views import (
    AdminBookingCreateView,
    BookingCompleteView,
    BookingConfirmView,
    BookingDetailView,
    BookingListCreateView,
    MyTurfsView,
    TurfAvailabilityView,
    TurfDetailView,
    TurfImageUploadView,
    TurfListView,
    TurfStatusView,
)

urlpatterns = [
    # turfs
    path("turfs/", TurfListView.as_view(), name="turf-list"),
    path("turfs/mine/", MyTurfsView.as_view(), name="turf-mine"),
    path("turfs/<int:turf_id>/", TurfDetailView.as_view(), name="turf-detail"),
    path("turfs/<int:turf_id>/status/", TurfStatusView.as_view(), name="turf-status"),
    path("turfs/<int:turf_id>/image/", TurfImageUploadView.as_view(), name="turf-image"),
    path(
        "turfs/<int:turf_id>/availability/",
        TurfAvailabilityView.as_view(),
        name="turf-availability"
    ),

    # bookings
    path("bookings/", BookingListCreateView.as_view(), name="booking-list"),
    path("bookings/<int:booking_id>/", BookingDetailView.as_view(), name="booking-detail"),
    path(
        "bookings/admin/create-for-user/",
        AdminBookingCreateView.as_view(),
        name="booking-admin-create"
    ),
    path(
        "bookings/admin/<int:booking_id>/confirm/",
        BookingConfirmView.as_view(),
        name="booking-confirm"
    ),
    path(
        "bookings/admin/<int:booking_id>/complete/",
        BookingCompleteView.as_view(),
        name="booking-complete"
    ),
]
