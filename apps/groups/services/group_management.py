"""
Group management service.

The only entry point the HTTP layer and the admin dashboard use to read
and write group documents. Every write is a whole-document overwrite:
callers fetch the current document, merge their change and send the
full result back. Two members doing that at the same time race, and
the later write wins.
"""

import logging
from datetime import timedelta
from typing import Any, Optional, Tuple

from django.conf import settings
from django.utils import timezone

from . import document_store
from .exceptions import (
    GroupNotFoundError,
    GroupValidationError,
    NotGroupCreatorError,
)
from .normalization import normalize_group_document, normalize_stored_document
from .sanitization import sanitize_group_document
from .validation import validate_group_document, validate_group_id
from .visibility import filter_for_member

logger = logging.getLogger(__name__)


def get_retention_period() -> timedelta:
    """How long an untouched group is kept before the sweep removes it."""
    return timedelta(days=settings.GROUP_RETENTION_DAYS)


def create_or_update_group(*, group_id: str, data: Any) -> Tuple[dict, bool]:
    """
    Validate, sanitize and store a full group document.

    This operation:
    1. Checks the group ID format
    2. Resolves legacy field names
    3. Validates shape and size
    4. Sanitizes every free-text field
    5. Upserts the document, refreshing ``updated_at``

    Args:
        group_id: Storage key and URL identifier of the group
        data: Complete group document as sent by the client

    Returns:
        Tuple of (stored document, created)

    Raises:
        InvalidGroupIdError: If the group ID is malformed
        GroupValidationError: If the document breaks any rule; the
            messages are on ``errors``
        StorageUnavailableError: If the database cannot be reached
    """
    validate_group_id(group_id)

    document = normalize_group_document(data)
    errors = validate_group_document(document)
    if errors:
        raise GroupValidationError(errors)

    sanitized = sanitize_group_document(document)
    _, created = document_store.store_document(group_id, sanitized)

    logger.info(
        "Group %s %s (%d members)",
        group_id,
        'created' if created else 'updated',
        len(sanitized['users']),
    )
    return sanitized, created


def get_group(*, group_id: str, member: Optional[str] = None) -> dict:
    """
    Get a group document as seen by ``member``.

    Legacy shapes are repaired on the way out, then the visibility filter
    hides claim status on the member's own wishlist.

    Args:
        group_id: Group identifier
        member: Requesting member's name, or None for observer access
            (creator/admin), which sees the stored document unfiltered

    Returns:
        Filtered group document

    Raises:
        InvalidGroupIdError: If the group ID is malformed
        GroupNotFoundError: If no document is stored under ``group_id``
        StorageUnavailableError: If the database cannot be reached
    """
    validate_group_id(group_id)

    stored = document_store.fetch_document(group_id)
    if stored is None:
        raise GroupNotFoundError(f"Group {group_id} not found")

    return filter_for_member(normalize_stored_document(stored), member)


def group_exists(*, group_id: str) -> bool:
    validate_group_id(group_id)
    return document_store.document_exists(group_id)


def delete_group(*, group_id: str) -> None:
    """
    Delete a group permanently.

    Raises:
        InvalidGroupIdError: If the group ID is malformed
        GroupNotFoundError: If no document is stored under ``group_id``
        StorageUnavailableError: If the database cannot be reached
    """
    validate_group_id(group_id)

    if not document_store.remove_document(group_id):
        raise GroupNotFoundError(f"Group {group_id} not found")

    logger.info("Group %s deleted", group_id)


def check_group_creator(*, group_id: str, member: Optional[str]) -> None:
    """
    Allow creator-only actions.

    The stored ``createdBy`` name is compared with the name the client
    claims; nothing authenticates either side. Groups without a recorded
    creator allow everyone.

    Raises:
        GroupNotFoundError: If the group does not exist
        NotGroupCreatorError: If ``member`` is not the recorded creator
    """
    document = get_group(group_id=group_id)
    creator = document.get('createdBy')
    if creator and member != creator:
        raise NotGroupCreatorError("Only the group creator can do this")


def sweep_expired_groups(*, max_age: Optional[timedelta] = None) -> int:
    """
    Delete every group not modified within ``max_age``.

    Only documents whose ``updated_at`` is strictly older than
    ``now - max_age`` are removed, so running the sweep twice in a row
    removes nothing the second time.

    Args:
        max_age: Retention period; defaults to ``GROUP_RETENTION_DAYS``

    Returns:
        Number of groups deleted

    Raises:
        StorageUnavailableError: If the database cannot be reached
    """
    cutoff = timezone.now() - (max_age if max_age is not None else get_retention_period())
    deleted = document_store.remove_documents_older_than(cutoff)
    if deleted:
        logger.info("Swept %d group(s) not modified since %s", deleted, cutoff.isoformat())
    return deleted


def count_expired_groups(*, max_age: Optional[timedelta] = None) -> int:
    cutoff = timezone.now() - (max_age if max_age is not None else get_retention_period())
    return document_store.count_documents_older_than(cutoff)
