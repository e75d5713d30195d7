"""
Domain exceptions for dashboard app.
"""


class DashboardServiceError(Exception):
    """Base exception for dashboard service errors."""
    pass


class AdminNotConfiguredError(DashboardServiceError):
    """Raised when no admin password is configured."""
    pass


class InvalidAdminPasswordError(DashboardServiceError):
    """Raised when a login attempt uses the wrong password."""
    pass
