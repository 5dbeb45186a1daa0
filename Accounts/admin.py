from django.contrib import admin
from django.contrib.auth import forms as auth_forms
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.db.models import Count
from django.forms import ModelForm

from Turf.models import Turf
from .models import User


# ----------------------------------
# USER FORMS (ADMIN)
# ----------------------------------
# Email is the login field; there is no username
class UserChangeForm(ModelForm):
    class Meta:
        model = User
        fields = "__all__"


class UserCreationForm(auth_forms.BaseUserCreationForm):
    class Meta:
        model = User
        fields = ("email", "full_name", "phone_number", "role")


# ----------------------------------
# OWNED TURFS (read-only)
# ----------------------------------
class OwnedTurfInline(admin.TabularInline):
    model = Turf
    fk_name = "owner"
    fields = ("name", "city", "status", "opening_time", "closing_time")
    readonly_fields = fields
    extra = 0
    can_delete = False
    show_change_link = True

    def has_add_permission(self, request, obj=None):
        return False


# ----------------------------------
# ACCOUNT ADMIN
# ----------------------------------
@admin.register(User)
class UserAdmin(BaseUserAdmin):
    form = UserChangeForm
    add_form = UserCreationForm
    model = User

    list_display = ("email", "full_name", "role", "turf_count", "is_active", "created_at")
    list_filter = ("role", "is_active", "is_staff")
    search_fields = ("email", "full_name", "phone_number")
    ordering = ("-created_at",)
    actions = ("promote_to_turf_admin", "demote_to_user")
    inlines = [OwnedTurfInline]

    fieldsets = (
        (None, {"fields": ("email", "password")}),
        ("Profile", {"fields": ("full_name", "phone_number")}),
        ("Access", {
            "fields": ("role", "is_active", "is_staff", "is_superuser", "groups", "user_permissions")
        }),
        ("Dates", {"fields": ("last_login", "created_at")}),
    )
    readonly_fields = ("created_at", "last_login")

    add_fieldsets = (
        (None, {
            "classes": ("wide",),
            "fields": ("email", "full_name", "phone_number", "role", "password1", "password2"),
        }),
    )

    filter_horizontal = ("groups", "user_permissions")

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(_turf_count=Count("turfs"))

    @admin.display(description="Turfs", ordering="_turf_count")
    def turf_count(self, obj):
        return obj._turf_count

    @admin.action(description="Make selected accounts turf admins")
    def promote_to_turf_admin(self, request, queryset):
        queryset.update(role=User.ROLE_ADMIN)

    @admin.action(description="Make selected accounts plain users")
    def demote_to_user(self, request, queryset):
        # Owners keep their turfs; they just lose owner endpoints
        queryset.update(role=User.ROLE_USER)
