# Accounts/permissions.py
from rest_framework.permissions import BasePermission


class IsTurfAdmin(BasePermission):
    """Authenticated turf owner. Per-turf ownership is checked in services."""

    message = "Only turf admins allowed"

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_turf_admin)
