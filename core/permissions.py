"""
Role based permission classes.
"""
from rest_framework.permissions import BasePermission

from core.models import Role

API_ROLES = {Role.ADMIN.value, Role.USER.value}


class IsAdminRole(BasePermission):
    """Allow access only to users with the ADMIN role."""
    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        user = getattr(request, "user", None)
        return bool(user and user.is_authenticated and getattr(user, "role", None) == Role.ADMIN)


class IsAdminOrUser(BasePermission):
    """ADMIN or USER."""
    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        user = getattr(request, "user", None)
        return bool(user and user.is_authenticated and getattr(user, "role", None) in API_ROLES)
