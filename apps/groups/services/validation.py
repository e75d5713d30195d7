"""
Group document validation.

Validation reports problems instead of raising them: the caller gets a
list of human-readable messages and decides what to do. Missing fields
and fields of the wrong type are reported like any other violation, so
arbitrary JSON input can be passed in safely.
"""

import json
import re
from typing import Any, List

from django.core.serializers.json import DjangoJSONEncoder
from django.utils.dateparse import parse_date, parse_datetime

from apps.groups.constants import (
    GROUP_ID_PATTERN,
    MAX_CREATED_BY_LENGTH,
    MAX_DESCRIPTION_LENGTH,
    MAX_DETAILS_LENGTH,
    MAX_DOCUMENT_BYTES,
    MAX_GROUP_ID_LENGTH,
    MAX_GROUP_NAME_LENGTH,
    MAX_ITEMS_PER_USER,
    MAX_MEMBER_NAME_LENGTH,
    MAX_NOTES_LENGTH,
    MAX_USERS,
)
from apps.groups.models import Holiday, Priority

from .exceptions import InvalidGroupIdError
from .normalization import normalize_group_document
from .sanitization import sanitize_text

_GROUP_ID_RE = re.compile(GROUP_ID_PATTERN)


def validate_group_id(group_id: Any) -> str:
    """
    Check that a group ID is usable as a storage key and URL segment.

    Returns:
        The group ID unchanged

    Raises:
        InvalidGroupIdError: If the ID is empty, too long or contains
            characters other than letters, digits, ``-`` and ``_``
    """
    if (
        not isinstance(group_id, str)
        or not group_id
        or len(group_id) > MAX_GROUP_ID_LENGTH
        or not _GROUP_ID_RE.fullmatch(group_id)
    ):
        raise InvalidGroupIdError('Invalid group ID format')
    return group_id


def is_valid_event_date(value: str) -> bool:
    """Accept ISO-8601 dates (``2025-12-25``) and datetimes."""
    try:
        return bool(parse_date(value) or parse_datetime(value))
    except ValueError:
        return False


def _serialized_size(data: Any) -> int:
    return len(json.dumps(data, cls=DjangoJSONEncoder).encode('utf-8'))


def _validate_name_list(value: Any, field: str, username: str, errors: List[str]) -> None:
    if value is None:
        return
    if not isinstance(value, list):
        errors.append(f'{field} must be an array for user: {username}')
    elif not all(isinstance(name, str) for name in value):
        errors.append(f'{field} must only contain names for user: {username}')


def _validate_item(item: Any, username: str, errors: List[str]) -> None:
    if not isinstance(item, dict):
        errors.append(f'Invalid item for user: {username}')
        return

    description = item.get('description')
    if not isinstance(description, str) or not sanitize_text(description, MAX_DESCRIPTION_LENGTH):
        errors.append(f'Item missing description for user: {username}')
    elif len(description) > MAX_DESCRIPTION_LENGTH:
        errors.append(f'Item description too long for user: {username}')

    for field, limit in (('details', MAX_DETAILS_LENGTH), ('notes', MAX_NOTES_LENGTH)):
        value = item.get(field)
        if value is None:
            continue
        if not isinstance(value, str):
            errors.append(f'Item {field} must be text for user: {username}')
        elif len(value) > limit:
            errors.append(f'Item {field} too long for user: {username}')

    priority = item.get('priority')
    if priority not in (None, '') and priority not in Priority.values:
        errors.append(f'Invalid priority for user: {username}')

    price = item.get('price')
    if price is not None and (isinstance(price, bool) or not isinstance(price, (str, int, float))):
        errors.append(f'Invalid price for user: {username}')

    purchased = item.get('purchased')
    if purchased is not None and not isinstance(purchased, bool):
        errors.append(f'purchased must be true or false for user: {username}')

    _validate_name_list(item.get('claimedBy'), 'claimedBy', username, errors)
    _validate_name_list(item.get('splitWith'), 'splitWith', username, errors)


def _validate_users(users: Any, errors: List[str]) -> None:
    if not isinstance(users, dict):
        errors.append('Users must be an object')
        return

    if len(users) > MAX_USERS:
        errors.append(f'Too many users (max {MAX_USERS})')

    # Names are stored sanitized; two names that sanitize alike would share one wishlist
    stored_names = set()
    for username, wishlist in users.items():
        if not isinstance(username, str):
            errors.append(f'Invalid username: {username!r}')
            continue
        if len(username) > MAX_MEMBER_NAME_LENGTH:
            errors.append(f'Username too long: {username}')
        else:
            stored_name = sanitize_text(username, MAX_MEMBER_NAME_LENGTH)
            if not stored_name:
                errors.append(f'Invalid username: {username!r}')
            elif stored_name in stored_names:
                errors.append(f'Duplicate username: {stored_name}')
            stored_names.add(stored_name)

        items = wishlist.get('items') if isinstance(wishlist, dict) else None
        if not isinstance(items, list):
            errors.append(f'Invalid items for user: {username}')
        elif len(items) > MAX_ITEMS_PER_USER:
            errors.append(f'Too many items for user {username} (max {MAX_ITEMS_PER_USER})')
        else:
            for item in items:
                _validate_item(item, username, errors)


def validate_group_document(data: Any) -> List[str]:
    """
    Validate a candidate group document.

    Legacy field names are accepted (see ``normalize_group_document``).
    The input is never modified.

    Args:
        data: Untrusted, already JSON-decoded request body

    Returns:
        List of error messages; empty when the document is valid

    Example:
        >>> validate_group_document({'groupName': 'Smith Family', 'users': {}})
        []
        >>> validate_group_document({'users': []})
        ['Group name is required', 'Users must be an object']
    """
    if not isinstance(data, dict):
        return ['Group data must be an object']

    errors: List[str] = []
    document = normalize_group_document(data)

    group_name = document.get('groupName')
    if not isinstance(group_name, str) or not sanitize_text(group_name, MAX_GROUP_NAME_LENGTH):
        errors.append('Group name is required')
    elif len(group_name) > MAX_GROUP_NAME_LENGTH:
        errors.append(f'Group name too long (max {MAX_GROUP_NAME_LENGTH} characters)')

    holiday = document.get('holiday')
    if holiday is not None and holiday not in Holiday.values:
        errors.append('Invalid holiday type')

    event_date = document.get('eventDate')
    if event_date:
        if not isinstance(event_date, str) or not is_valid_event_date(event_date):
            errors.append('Invalid event date format')

    created_by = document.get('createdBy')
    if created_by:
        if not isinstance(created_by, str):
            errors.append('createdBy must be a name')
        elif len(created_by) > MAX_CREATED_BY_LENGTH:
            errors.append(f'createdBy too long (max {MAX_CREATED_BY_LENGTH} characters)')

    _validate_users(document.get('users'), errors)

    try:
        too_large = _serialized_size(data) > MAX_DOCUMENT_BYTES
    except (TypeError, ValueError):
        errors.append('Group data is not valid JSON')
    else:
        if too_large:
            errors.append(f'Group data too large (max {MAX_DOCUMENT_BYTES // 1024} KB)')

    return errors
