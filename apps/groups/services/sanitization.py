"""
Group document sanitization.

The sanitizer rebuilds a document from an allow-list of known fields:
anything not listed here is dropped rather than passed through. Every
free-text value is stripped of markup and cut to the same bounds the
validator enforces.

Sanitizing never fails, and sanitizing a sanitized document returns an
equal document.
"""

import re
from typing import Any

from django.core.exceptions import SuspiciousOperation
from django.utils.html import strip_tags

from apps.groups.constants import (
    MAX_CLAIMANTS,
    MAX_CREATED_BY_LENGTH,
    MAX_DESCRIPTION_LENGTH,
    MAX_DETAILS_LENGTH,
    MAX_EVENT_DATE_LENGTH,
    MAX_GROUP_NAME_LENGTH,
    MAX_ITEMS_PER_USER,
    MAX_MEMBER_NAME_LENGTH,
    MAX_NOTES_LENGTH,
    MAX_PRICE_LENGTH,
    MAX_USERS,
)
from apps.groups.models import Holiday, Priority

from .normalization import normalize_group_document

_TAG = re.compile(r'<[^>]*>')
_UNSAFE_CHARS = re.compile(r'[<>"\']')


def sanitize_text(value: Any, max_length: int = 500) -> str:
    """
    Strip HTML and quote characters from ``value`` and bound its length.

    Non-string input yields an empty string.
    """
    if not isinstance(value, str):
        return ''
    try:
        text = strip_tags(value)
    except SuspiciousOperation:
        # Pathologically nested markup; drop anything tag-shaped instead
        text = _TAG.sub('', value)
    text = _UNSAFE_CHARS.sub('', text)
    # Trim again after cutting so the result is stable on a second pass
    return text.strip()[:max_length].strip()


def _sanitize_price(value: Any) -> str:
    if value is None or value == '' or isinstance(value, bool):
        return ''
    if isinstance(value, (int, float)):
        value = str(value)
    return sanitize_text(value, MAX_PRICE_LENGTH)


def _sanitize_names(value: Any) -> list:
    if not isinstance(value, list):
        return []
    names = (sanitize_text(name, MAX_MEMBER_NAME_LENGTH) for name in value[:MAX_CLAIMANTS])
    return [name for name in names if name]


def _sanitize_item(item: Any) -> dict:
    if not isinstance(item, dict):
        item = {}
    priority = item.get('priority')
    return {
        'description': sanitize_text(item.get('description'), MAX_DESCRIPTION_LENGTH),
        'priority': priority if priority in Priority.values else Priority.MEDIUM.value,
        'price': _sanitize_price(item.get('price')),
        'notes': sanitize_text(item.get('notes'), MAX_NOTES_LENGTH),
        'details': sanitize_text(item.get('details'), MAX_DETAILS_LENGTH),
        'claimedBy': _sanitize_names(item.get('claimedBy')),
        'purchased': bool(item.get('purchased')),
        'splitWith': _sanitize_names(item.get('splitWith')),
    }


def _sanitize_users(users: Any) -> dict:
    if not isinstance(users, dict):
        return {}

    sanitized = {}
    for username in list(users)[:MAX_USERS]:
        clean_name = sanitize_text(username, MAX_MEMBER_NAME_LENGTH)
        wishlist = users[username]
        items = wishlist.get('items') if isinstance(wishlist, dict) else None
        sanitized[clean_name] = {
            'items': [_sanitize_item(item) for item in items[:MAX_ITEMS_PER_USER]]
            if isinstance(items, list) else []
        }
    return sanitized


def sanitize_group_document(data: Any) -> dict:
    """
    Build the storable form of a group document.

    Args:
        data: Group document that passed ``validate_group_document``.
            Legacy field names are accepted.

    Returns:
        New dict with exactly the keys ``groupName``, ``holiday``,
        ``eventDate``, ``createdBy`` and ``users``; each item carries
        ``description``, ``priority``, ``price``, ``notes``, ``details``,
        ``claimedBy``, ``purchased`` and ``splitWith``.
    """
    document = normalize_group_document(data)
    if not isinstance(document, dict):
        document = {}

    holiday = document.get('holiday')
    return {
        'groupName': sanitize_text(document.get('groupName'), MAX_GROUP_NAME_LENGTH),
        'holiday': holiday if holiday in Holiday.values else Holiday.CHRISTMAS.value,
        'eventDate': sanitize_text(document.get('eventDate'), MAX_EVENT_DATE_LENGTH),
        'createdBy': sanitize_text(document.get('createdBy'), MAX_CREATED_BY_LENGTH),
        'users': _sanitize_users(document.get('users')),
    }
