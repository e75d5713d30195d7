from rest_framework.permissions import BasePermission

from .sessions import AdminSession


class HasAdminSession(BasePermission):
    """Allow only requests authenticated with a live admin session."""

    message = 'Admin session required.'

    def has_permission(self, request, view):
        return isinstance(request.auth, AdminSession)
