"""
Groups app services layer.

Services contain business logic for group documents: legacy shape
normalization, validation, sanitization, visibility filtering and the
group service that orchestrates them over the document store.
"""

from .exceptions import (
    GroupsServiceError,
    GroupNotFoundError,
    InvalidGroupIdError,
    GroupValidationError,
    StorageUnavailableError,
    NotGroupCreatorError,
)

from .normalization import (
    normalize_group_document,
    normalize_stored_document,
)

from .validation import (
    validate_group_document,
    validate_group_id,
)

from .sanitization import (
    sanitize_group_document,
    sanitize_text,
)

from .visibility import (
    filter_for_member,
)

from .group_management import (
    create_or_update_group,
    get_group,
    group_exists,
    delete_group,
    check_group_creator,
    sweep_expired_groups,
    count_expired_groups,
    get_retention_period,
)

from .retention import (
    run_scheduled_sweep,
)


__all__ = [
    # Exceptions
    'GroupsServiceError',
    'GroupNotFoundError',
    'InvalidGroupIdError',
    'GroupValidationError',
    'StorageUnavailableError',
    'NotGroupCreatorError',

    # Document shape
    'normalize_group_document',
    'normalize_stored_document',
    'validate_group_document',
    'validate_group_id',
    'sanitize_group_document',
    'sanitize_text',
    'filter_for_member',

    # Group service
    'create_or_update_group',
    'get_group',
    'group_exists',
    'delete_group',
    'check_group_creator',

    # Retention
    'sweep_expired_groups',
    'count_expired_groups',
    'get_retention_period',
    'run_scheduled_sweep',
]
