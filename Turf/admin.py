# Turf/admin.py

from django.contrib import admin

from pricing.models import Pricing
from turf_settings.models import Setting
from .models import Booking, Turf


# -------------------------------
# INLINES
# -------------------------------
# Pricing grid and settings are edited from the turf screen
class PricingInline(admin.TabularInline):
    model = Pricing
    extra = 0
    can_delete = False


class SettingInline(admin.TabularInline):
    model = Setting
    extra = 0


# -------------------------------
# TURF ADMIN
# -------------------------------
@admin.register(Turf)
class TurfAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "name",
        "owner",
        "city",
        "status",
        "opening_time",
        "closing_time",
    )

    list_filter = ("status", "city")
    search_fields = ("name", "address", "owner__email")
    readonly_fields = ("created_at", "updated_at")

    inlines = [PricingInline, SettingInline]


# -------------------------------
# BOOKING ADMIN
# -------------------------------
@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "turf",
        "user",
        "date",
        "start_time",
        "end_time",
        "price",
        "status",
        "created_by_name",
        "created_at",
    )

    list_filter = ("status", "date")

    search_fields = (
        "turf__name",
        "user__email",
    )

    date_hierarchy = "date"

    # Price and creator are snapshots taken at booking time
    readonly_fields = ("price", "created_by", "created_by_name", "created_at", "updated_at")
