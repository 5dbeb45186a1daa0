# turfbook/urls.py
from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/auth/", include("Accounts.urls")),
    path("api/", include("Turf.urls")),
    path("api/", include("pricing.urls")),
    path("api/", include("turf_settings.urls")),
    path("api/", include("reviews.urls")),
    path("api/", include("Dashboard.urls")),
] + static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
