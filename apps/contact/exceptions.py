"""
Domain exceptions for contact app.

Raised by the contact services and converted to HTTP responses in the
views that call them.
"""


class ContactServiceError(Exception):
    """Base exception for contact service errors."""
    pass


class ContactNotFoundError(ContactServiceError):
    """Raised when a contact submission does not exist."""
    pass


class ContactStorageError(ContactServiceError):
    """Raised when a submission cannot be read or written."""
    pass
