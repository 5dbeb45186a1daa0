from django.contrib import admin

from .models import Setting


@admin.register(Setting)
class SettingAdmin(admin.ModelAdmin):
    list_display = ("turf", "key", "value", "updated_at")
    list_filter = ("key",)
    search_fields = ("turf__name", "key")
