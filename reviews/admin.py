from django.contrib import admin

from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ("id", "booking", "user", "rating", "created_at")
    list_filter = ("rating",)
    search_fields = ("user__email", "booking__turf__name")
    readonly_fields = ("created_at",)
