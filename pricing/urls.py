from django.urls import path

from .views import DefaultPricingView, TurfPricingView

urlpatterns = [
    path("turfs/<int:turf_id>/pricing/", TurfPricingView.as_view(), name="turf-pricing"),
    path(
        "turfs/<int:turf_id>/pricing/defaults/",
        DefaultPricingView.as_view(),
        name="turf-pricing-defaults"
    ),
]
