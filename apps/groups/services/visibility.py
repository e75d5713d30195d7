"""Member-specific views of a group document."""

import copy
from typing import Optional

from apps.groups.constants import CLAIM_FIELDS


def _hidden_value(field: str):
    return False if field == 'purchased' else []


def filter_for_member(document: dict, member: Optional[str]) -> dict:
    """
    Hide claim status from a member on their own wishlist.

    For every item on ``member``'s list, ``claimedBy``, ``purchased`` and
    ``splitWith`` are replaced with empty values so the member cannot see
    who is buying what for them. Items on other members' lists are left
    as stored.

    Args:
        document: Stored group document (canonical shape)
        member: Name of the requesting member, or None for observer access,
            which returns the document unfiltered

    Returns:
        A copy of the document; the input is never modified
    """
    view = copy.deepcopy(document)
    if member is None:
        return view

    wishlist = view.get('users', {}).get(member)
    if not isinstance(wishlist, dict):
        return view

    for item in wishlist.get('items', []):
        if not isinstance(item, dict):
            continue
        for field in CLAIM_FIELDS:
            item[field] = _hidden_value(field)

    return view
