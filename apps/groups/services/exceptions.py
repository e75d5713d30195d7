"""
Domain-specific exceptions for groups app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class GroupsServiceError(Exception):
    """Base exception for all groups service errors."""
    pass


class GroupNotFoundError(GroupsServiceError):
    """Raised when no document is stored under the requested group ID."""
    pass


class InvalidGroupIdError(GroupsServiceError):
    """Raised when a group ID is empty, too long or has illegal characters."""
    pass


class GroupValidationError(GroupsServiceError):
    """
    Raised when a submitted group document violates shape or size rules.

    The individual human-readable messages are kept on ``errors`` so views
    can return them verbatim.
    """

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__('Validation failed')


class StorageUnavailableError(GroupsServiceError):
    """Raised when the document store cannot be reached or queried."""
    pass


class NotGroupCreatorError(GroupsServiceError):
    """Raised when a creator-only action is requested by someone else."""
    pass
