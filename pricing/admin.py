from django.contrib import admin

from .models import Pricing


@admin.register(Pricing)
class PricingAdmin(admin.ModelAdmin):
    list_display = ("turf", "day_type", "time_slot", "price", "updated_at")
    list_filter = ("day_type", "time_slot")
    search_fields = ("turf__name",)
