"""
Legacy shape normalization for group documents.

Earlier versions of the front-end stored the same data under different
key names (``people`` instead of ``users``, ``wishlist`` instead of
``items``, ``item``/``name`` instead of ``description``, ``eventType``
instead of ``holiday``). They also stored ``claimedBy`` as a single name
instead of a list.

Aliases are resolved here, once, so validation, sanitization and the
visibility filter only ever see the canonical shape. Nothing in this
module mutates its input: every level that changes is copied.
"""

from typing import Any

from apps.groups.constants import (
    DESCRIPTION_ALIASES,
    HOLIDAY_ALIASES,
    ITEMS_ALIASES,
    USERS_ALIASES,
)


def _pop_alias(mapping: dict, aliases: tuple, truthy: bool = False) -> Any:
    """Remove every alias from ``mapping`` and return the first usable value."""
    found = None
    for key in aliases:
        if key not in mapping:
            continue
        value = mapping.pop(key)
        if found is not None:
            continue
        if truthy and not value:
            continue
        if value is not None:
            found = value
    return found


def _normalize_item(item: Any) -> Any:
    if not isinstance(item, dict):
        return item
    item = dict(item)
    description = _pop_alias(item, DESCRIPTION_ALIASES, truthy=True)
    if description is not None:
        item['description'] = description
    return item


def _normalize_wishlist(wishlist: Any) -> Any:
    if not isinstance(wishlist, dict):
        return wishlist
    wishlist = dict(wishlist)
    items = _pop_alias(wishlist, ITEMS_ALIASES)
    if isinstance(items, list):
        items = [_normalize_item(item) for item in items]
    if items is not None:
        wishlist['items'] = items
    return wishlist


def normalize_group_document(data: Any) -> Any:
    """
    Return ``data`` with every legacy alias mapped to its canonical key.

    Values of the wrong type are passed through untouched so the validator
    can report them. Normalizing an already-normalized document is a no-op.
    """
    if not isinstance(data, dict):
        return data

    document = dict(data)

    holiday = _pop_alias(document, HOLIDAY_ALIASES, truthy=True)
    if holiday is not None:
        document['holiday'] = holiday

    users = _pop_alias(document, USERS_ALIASES)
    if isinstance(users, dict):
        users = {
            name: _normalize_wishlist(wishlist)
            for name, wishlist in users.items()
        }
    if users is not None:
        document['users'] = users

    return document


def _as_name_list(value: Any) -> list:
    if isinstance(value, list):
        return value
    if isinstance(value, str) and value.strip():
        return [value]
    return []


def normalize_stored_document(data: Any) -> dict:
    """
    Repair a document read back from storage.

    Documents written before validation existed may hold ``claimedBy`` or
    ``splitWith`` as a bare name, or miss the ``users`` mapping entirely.
    The result always satisfies the canonical invariants.
    """
    document = normalize_group_document(data)
    if not isinstance(document, dict):
        document = {}

    users = document.get('users')
    if not isinstance(users, dict):
        document['users'] = {}
        return document

    repaired = {}
    for name, wishlist in users.items():
        if not isinstance(wishlist, dict):
            wishlist = {'items': []}
        items = wishlist.get('items')
        if not isinstance(items, list):
            items = []
        fixed_items = []
        for item in items:
            if not isinstance(item, dict):
                continue
            item = dict(item)
            item['claimedBy'] = _as_name_list(item.get('claimedBy'))
            item['splitWith'] = _as_name_list(item.get('splitWith'))
            fixed_items.append(item)
        repaired[name] = {**wishlist, 'items': fixed_items}

    document['users'] = repaired
    return document
