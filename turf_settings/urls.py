from django.urls import path

from .views import DisableBookingsView, TurfSettingDetailView, TurfSettingsView

urlpatterns = [
    path("turfs/<int:turf_id>/settings/", TurfSettingsView.as_view(), name="turf-settings"),
    path(
        "turfs/<int:turf_id>/settings/disable-bookings/",
        DisableBookingsView.as_view(),
        name="turf-settings-disable-bookings"
    ),
    path(
        "turfs/<int:turf_id>/settings/<str:key>/",
        TurfSettingDetailView.as_view(),
        name="turf-setting-detail"
    ),
]
